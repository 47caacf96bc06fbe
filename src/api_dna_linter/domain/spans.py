"""Source spans used for scoping and for anchoring diagnostics."""

from dataclasses import dataclass

import astroid  # type: ignore[import-untyped]


@dataclass(frozen=True)
class Span:
    """
    A source range. Lines are 1-based; columns are UTF-8 byte offsets, the
    unit the Python parser reports, so editors can underline the exact token.
    """

    file: str | None
    lineno: int
    col_offset: int
    end_lineno: int
    end_col_offset: int

    @classmethod
    def of(cls, node: astroid.nodes.NodeNG) -> "Span":
        """Span covering node."""
        lineno = node.lineno if node.lineno is not None else node.fromlineno
        col = node.col_offset or 0
        end_lineno = node.end_lineno if node.end_lineno is not None else lineno
        end_col = node.end_col_offset if node.end_col_offset is not None else col
        return cls(
            file=cls.file_of(node),
            lineno=lineno or 0,
            col_offset=col,
            end_lineno=end_lineno or 0,
            end_col_offset=end_col,
        )

    @classmethod
    def of_attribute_name(cls, node: astroid.nodes.Attribute) -> "Span":
        """Span of the attribute name token only (`register` in `x.register`)."""
        whole = cls.of(node)
        width = len(node.attrname.encode("utf-8"))
        return cls(
            file=whole.file,
            lineno=whole.end_lineno,
            col_offset=max(whole.end_col_offset - width, 0),
            end_lineno=whole.end_lineno,
            end_col_offset=whole.end_col_offset,
        )

    @staticmethod
    def file_of(node: astroid.nodes.NodeNG) -> str | None:
        """Path of the module that owns node, or None when unknown."""
        try:
            root = node.root()
        except AttributeError:
            return None
        path = getattr(root, "file", None)
        if not isinstance(path, str) or not path or path == "<?>":
            return None
        return path

    def text_in(self, source: str) -> str:
        """Slice this span out of source text."""
        lines = source.encode("utf-8").splitlines(keepends=True)
        if self.lineno < 1 or self.end_lineno > len(lines):
            return ""
        if self.lineno == self.end_lineno:
            line = lines[self.lineno - 1]
            return line[self.col_offset:self.end_col_offset].decode("utf-8")
        parts = [lines[self.lineno - 1][self.col_offset:]]
        parts.extend(lines[self.lineno:self.end_lineno - 1])
        parts.append(lines[self.end_lineno - 1][:self.end_col_offset])
        return b"".join(parts).decode("utf-8")

    def to_dict(self) -> dict[str, object]:
        return {
            "file": self.file,
            "start": {"line": self.lineno, "col": self.col_offset},
            "end": {"line": self.end_lineno, "col": self.end_col_offset},
        }

    def __str__(self) -> str:
        return f"{self.file or '<unknown>'}:{self.lineno}:{self.col_offset}"
