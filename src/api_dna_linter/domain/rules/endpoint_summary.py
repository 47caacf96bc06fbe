"""API Endpoint Summary rule (DE0804)."""

import astroid  # type: ignore[import-untyped]

from api_dna_linter.domain.chain import ChainWalker
from api_dna_linter.domain.rules import Checkable, NodeKind, Violation


class ApiEndpointSummaryRule(Checkable):
    """
    Rule for DE0804: every OperationBuilder chain that reaches `.register()`
    must call `.summary()` before it, so generated OpenAPI documents carry a
    one-line description of each endpoint.
    """

    code: str = "DE0804"
    description: str = "API endpoints must have summary for documentation quality."
    node_kind: NodeKind = NodeKind.EXPRESSION

    REGISTER: str = "register"
    SUMMARY: str = "summary"

    def __init__(self, chain_walker: ChainWalker) -> None:
        self._chain_walker = chain_walker

    def check(self, node: astroid.nodes.NodeNG) -> list[Violation]:
        func = getattr(node, "func", None)
        if not isinstance(func, astroid.nodes.Attribute) or func.attrname != self.REGISTER:
            return []
        chain = self._chain_walker.reconstruct(node)
        if chain is None or chain.last is None:
            return []
        register_at = len(chain) - 1
        if chain.has_call_before(self.SUMMARY, register_at):
            return []
        return [
            Violation.at(
                code=self.code,
                message=f"API endpoint missing required summary ({self.code})",
                node=node,
                span=chain.last.name_span,
                help='Add .summary("Brief description") to the OperationBuilder chain',
                notes=("DNA Section 24 requires one-line summary for all endpoints",),
            )
        ]
