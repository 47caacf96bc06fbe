"""API Problem Details rule (DE0803)."""

from collections.abc import Iterable

import astroid  # type: ignore[import-untyped]

from api_dna_linter.domain.chain import ChainWalker
from api_dna_linter.domain.constants import DEFAULT_ERROR_STATUS_NAMES
from api_dna_linter.domain.rules import Checkable, NodeKind, Violation


class ApiProblemDetailsRule(Checkable):
    """
    Rule for DE0803: 4xx/5xx responses declared on an OperationBuilder chain
    must use RFC 9457 Problem Details (`.problem_response()` or `.error_404()`
    style helpers), not `.json_response()` with an error status.
    """

    code: str = "DE0803"
    description: str = "Use Problem Details for 4xx/5xx error responses, not plain JSON."
    node_kind: NodeKind = NodeKind.EXPRESSION

    JSON_RESPONSE: str = "json_response"

    def __init__(
        self,
        chain_walker: ChainWalker,
        error_status_names: Iterable[str] = DEFAULT_ERROR_STATUS_NAMES,
    ) -> None:
        self._chain_walker = chain_walker
        self._error_status_names = frozenset(error_status_names)

    def check(self, node: astroid.nodes.NodeNG) -> list[Violation]:
        func = getattr(node, "func", None)
        if not isinstance(func, astroid.nodes.Attribute) or func.attrname != self.JSON_RESPONSE:
            return []
        chain = self._chain_walker.reconstruct(node)
        if chain is None or chain.last is None:
            return []
        status = chain.last.status_name()
        if status not in self._error_status_names:
            return []
        return [
            Violation.at(
                code=self.code,
                message=f"Use Problem Details for error responses, not plain JSON ({self.code})",
                node=node,
                span=chain.last.name_span,
                help=(
                    "Use .problem_response(openapi, status, description) or "
                    "convenience methods like .error_404(openapi)"
                ),
                notes=("DNA Section 7 requires RFC 9457 Problem Details for all 4xx/5xx responses",),
            )
        ]
