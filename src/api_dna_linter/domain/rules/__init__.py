"""Domain models for rules and violations."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

import astroid  # type: ignore[import-untyped]

from api_dna_linter.domain.spans import Span

__all__ = [
    "Checkable",
    "NodeKind",
    "RuleDescriptor",
    "Severity",
    "Violation",
]


class Severity(Enum):
    """Warn is advisory; Deny is meant to break the build. The host decides."""

    WARN = "warn"
    DENY = "deny"

    @classmethod
    def parse(cls, value: str) -> "Severity":
        """Parse 'warn'/'deny' (case-insensitive). Raises ValueError otherwise."""
        return cls(value.strip().lower())


class NodeKind(Enum):
    """Node kinds a rule can subscribe to."""

    EXPRESSION = "expression"
    ITEM = "item"

    @classmethod
    def of(cls, node: astroid.nodes.NodeNG) -> "NodeKind | None":
        if isinstance(node, astroid.nodes.Call):
            return cls.EXPRESSION
        if isinstance(node, astroid.nodes.ClassDef):
            return cls.ITEM
        return None


@dataclass(frozen=True)
class RuleDescriptor:
    """Static description of a registered rule. Immutable after registration."""

    code: str
    symbol: str
    severity: Severity
    description: str
    node_kind: NodeKind
    pylint_number: str = ""


@dataclass(frozen=True)
class Violation:
    """A rule violation anchored at a sub-span of the node that triggered it."""

    code: str
    message: str
    location: str
    node: astroid.nodes.NodeNG
    span: Span
    help: str | None = None
    notes: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def at(
        cls,
        *,
        code: str,
        message: str,
        node: astroid.nodes.NodeNG,
        span: Span,
        help: str | None = None,
        notes: tuple[str, ...] = (),
    ) -> "Violation":
        """Build a Violation whose location string is derived from span."""
        return cls(
            code=code,
            message=message,
            location=str(span),
            node=node,
            span=span,
            help=help,
            notes=notes,
        )


class Checkable(Protocol):
    """One-and-done check: given a node of node_kind, return violations."""

    code: str
    description: str
    node_kind: NodeKind

    def check(self, node: astroid.nodes.NodeNG) -> list[Violation]:
        """Interrogate a node for convention breaches. Must not raise for odd shapes."""
        ...
