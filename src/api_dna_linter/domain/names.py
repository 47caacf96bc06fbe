"""Dotted-name reading for Name/Attribute expression chains."""

import astroid  # type: ignore[import-untyped]


class DottedName:
    """Reads `a.b.c` expressions without inference. No top-level functions."""

    @staticmethod
    def segments(node: astroid.nodes.NodeNG) -> tuple[str, ...] | None:
        """
        Return ("a", "b", "c") for `a.b.c`, or None when the expression is not
        a pure dotted path (a call, subscript or literal anywhere in it).
        """
        parts: list[str] = []
        current = node
        while isinstance(current, astroid.nodes.Attribute):
            parts.append(current.attrname)
            current = current.expr
        if not isinstance(current, astroid.nodes.Name):
            return None
        parts.append(current.name)
        parts.reverse()
        return tuple(parts)

    @staticmethod
    def terminal(node: astroid.nodes.NodeNG) -> str | None:
        """Last identifier of a Name or Attribute, whatever its receiver is."""
        if isinstance(node, astroid.nodes.Attribute):
            return node.attrname
        if isinstance(node, astroid.nodes.Name):
            return node.name
        return None
