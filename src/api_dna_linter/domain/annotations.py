"""Key/value metadata attached to declarations through annotation calls.

A class carries annotations as decorator calls::

    @serde(rename_all="camelCase")
    class UserDto: ...

A field carries them in the call assigned as its default::

    user_id: str = field(rename="userId")

The namespace of an annotation is the terminal name of its callee, so
`serde(...)` and `pyserde.serde(...)` are both in the `serde` namespace.
"""

from collections.abc import Iterator
from dataclasses import dataclass

import astroid  # type: ignore[import-untyped]

from api_dna_linter.domain.names import DottedName
from api_dna_linter.domain.spans import Span


@dataclass(frozen=True)
class Annotation:
    """One key/value entry of an annotation call."""

    namespace: str
    key: str
    value: str | None
    span: Span
    node: astroid.nodes.Keyword


class MetadataExtractor:
    """Reads annotations off ClassDef and field (AnnAssign/Assign) nodes."""

    def annotations(self, node: astroid.nodes.NodeNG) -> list[Annotation]:
        """All annotation entries attached to node, in source order."""
        return list(self._iter_node(node))

    def extract(
        self, node: astroid.nodes.NodeNG, namespace: str, key: str
    ) -> list[tuple[Span, str]]:
        """
        Every `namespace(key="value")` entry on node as (span, value).

        Entries without a string literal value are skipped. Repeated keys are
        all returned; the span is that of the key=value pair.
        """
        return [
            (annotation.span, annotation.value)
            for annotation in self._iter_node(node)
            if annotation.namespace == namespace
            and annotation.key == key
            and annotation.value is not None
        ]

    def _iter_node(self, node: astroid.nodes.NodeNG) -> Iterator[Annotation]:
        for call in self._annotation_calls(node):
            yield from self._iter_call(call)

    @staticmethod
    def _annotation_calls(node: astroid.nodes.NodeNG) -> list[astroid.nodes.Call]:
        if isinstance(node, astroid.nodes.ClassDef):
            decorators = node.decorators.nodes if node.decorators else []
            return [d for d in decorators if isinstance(d, astroid.nodes.Call)]
        if isinstance(node, (astroid.nodes.AnnAssign, astroid.nodes.Assign)):
            if isinstance(node.value, astroid.nodes.Call):
                return [node.value]
        return []

    def _iter_call(self, call: astroid.nodes.Call) -> Iterator[Annotation]:
        namespace = DottedName.terminal(call.func)
        if namespace is None:
            return
        for arg in call.args or []:
            # Nested annotations, e.g. serde(field(rename="x")).
            if isinstance(arg, astroid.nodes.Call):
                yield from self._iter_call(arg)
        for keyword in call.keywords or []:
            if keyword.arg is None:
                continue
            yield Annotation(
                namespace=namespace,
                key=keyword.arg,
                value=self._string_value(keyword.value),
                span=Span.of(keyword),
                node=keyword,
            )

    @staticmethod
    def _string_value(node: astroid.nodes.NodeNG) -> str | None:
        if isinstance(node, astroid.nodes.Const) and isinstance(node.value, str):
            return node.value
        return None
