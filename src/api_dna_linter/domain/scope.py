"""Path scope gate: restricts rules to declarations under designated subtrees."""

from collections.abc import Iterable

import astroid  # type: ignore[import-untyped]

from api_dna_linter.domain.spans import Span


class PathScopeGate:
    """
    Decides whether a file lies under one of the designated directory runs.

    A designated subtree is a sequence of directory names that must appear as
    adjacent whole components of the file's directory, e.g. ("api", "rest")
    matches `modules/users/api/rest/dto.py` but not `apiary/rest/dto.py` nor
    `api/v1/rest/dto.py`.
    """

    def __init__(self, subtrees: Iterable[Iterable[str] | str]) -> None:
        normalized: list[tuple[str, ...]] = []
        for subtree in subtrees:
            segments = self.split(subtree) if isinstance(subtree, str) else tuple(subtree)
            if segments:
                normalized.append(segments)
        self._subtrees: tuple[tuple[str, ...], ...] = tuple(normalized)

    @property
    def subtrees(self) -> tuple[tuple[str, ...], ...]:
        return self._subtrees

    @staticmethod
    def split(path: str) -> tuple[str, ...]:
        return tuple(part for part in path.replace("\\", "/").split("/") if part)

    def is_within(self, path: str | None) -> bool:
        """True when the directory of path contains a designated subtree."""
        if not path:
            return False
        directories = self.split(path)[:-1]
        for subtree in self._subtrees:
            width = len(subtree)
            for start in range(len(directories) - width + 1):
                if directories[start:start + width] == subtree:
                    return True
        return False

    def is_span_within(self, span: Span) -> bool:
        return self.is_within(span.file)

    def is_node_within(self, node: astroid.nodes.NodeNG) -> bool:
        """Resolve node to its module file; unresolvable means out of scope."""
        return self.is_within(Span.file_of(node))
