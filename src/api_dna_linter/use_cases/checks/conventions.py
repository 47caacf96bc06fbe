"""Pylint checkers for the API DNA rules (DE0205, DE0803, DE0804, DE0805)."""

import logging
from typing import TYPE_CHECKING, ClassVar

import astroid  # type: ignore[import-untyped]

if TYPE_CHECKING:
    from pylint.lint import PyLinter

from pylint.checkers import BaseChecker

from api_dna_linter.domain.registry import RuleRegistry
from api_dna_linter.domain.rule_msgs import RuleMsgBuilder
from api_dna_linter.domain.rules import NodeKind, RuleDescriptor, Violation

logger = logging.getLogger(__name__)


class RegistryBackedChecker(BaseChecker):
    """
    Thin: delegates to the registry's rules of one node kind and reports each
    violation at its exact span.
    """

    name: str = "api-dna"
    NODE_KIND: ClassVar[NodeKind] = NodeKind.ITEM

    def __init__(self, linter: "PyLinter", registry: RuleRegistry) -> None:
        self._rules = registry.for_kind(self.NODE_KIND)
        self.msgs = RuleMsgBuilder.build_msgs(descriptor for descriptor, _ in self._rules)
        super().__init__(linter)

    def _run_rules(self, node: astroid.nodes.NodeNG) -> None:
        for descriptor, rule in self._rules:
            try:
                violations = rule.check(node)
            except Exception:  # a rule that cannot decide abstains
                logger.exception("Rule %s failed on line %s; skipped", descriptor.code, node.lineno)
                continue
            for violation in violations:
                self._report(descriptor, violation)

    def _report(self, descriptor: RuleDescriptor, violation: Violation) -> None:
        if not descriptor.pylint_number:
            return
        span = violation.span
        self.add_message(
            RuleMsgBuilder.msgid_for(descriptor),
            node=violation.node,
            args=(violation.message,),
            line=span.lineno,
            col_offset=span.col_offset,
            end_lineno=span.end_lineno,
            end_col_offset=span.end_col_offset,
        )


class DtoConventionsChecker(RegistryBackedChecker):
    """DE0205, DE0805: snake_case renames on DTO classes."""

    name: str = "api-dna-dto"
    NODE_KIND: ClassVar[NodeKind] = NodeKind.ITEM

    def visit_classdef(self, node: astroid.nodes.ClassDef) -> None:
        self._run_rules(node)


class OperationBuilderChecker(RegistryBackedChecker):
    """DE0803, DE0804: OperationBuilder chain conventions."""

    name: str = "api-dna-operation-builder"
    NODE_KIND: ClassVar[NodeKind] = NodeKind.EXPRESSION

    def visit_call(self, node: astroid.nodes.Call) -> None:
        self._run_rules(node)
