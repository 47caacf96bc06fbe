"""Diagnostic records and the per-file sink rules write to."""

from dataclasses import dataclass, field

from api_dna_linter.domain.rules import RuleDescriptor, Severity, Violation
from api_dna_linter.domain.spans import Span


@dataclass(frozen=True)
class Diagnostic:
    """A reported violation. Holds no tree nodes, so it outlives the parse."""

    rule_id: str
    severity: Severity
    span: Span
    primary_message: str
    help: str | None = None
    notes: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_violation(cls, descriptor: RuleDescriptor, violation: Violation) -> "Diagnostic":
        return cls(
            rule_id=descriptor.code,
            severity=descriptor.severity,
            span=violation.span,
            primary_message=violation.message,
            help=violation.help or None,
            notes=tuple(violation.notes),
        )

    def to_dict(self) -> dict[str, object]:
        return {
            "rule_id": self.rule_id,
            "severity": self.severity.value,
            "span": self.span.to_dict(),
            "primary_message": self.primary_message,
            "help": self.help,
            "notes": list(self.notes),
        }


class DiagnosticSink:
    """Append-only collection for a single file's pass."""

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []

    def emit(self, descriptor: RuleDescriptor, violation: Violation) -> Diagnostic:
        diagnostic = Diagnostic.from_violation(descriptor, violation)
        self._diagnostics.append(diagnostic)
        return diagnostic

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return list(self._diagnostics)

    def __len__(self) -> int:
        return len(self._diagnostics)

    def reset(self) -> None:
        self._diagnostics = []
