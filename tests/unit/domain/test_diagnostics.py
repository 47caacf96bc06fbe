"""Unit tests for Diagnostic and DiagnosticSink (domain/diagnostics.py)."""

from unittest.mock import MagicMock

from api_dna_linter.domain.diagnostics import Diagnostic, DiagnosticSink
from api_dna_linter.domain.rules import NodeKind, RuleDescriptor, Severity, Violation
from api_dna_linter.domain.spans import Span

DESCRIPTOR = RuleDescriptor(
    code="DE0804",
    symbol="api-endpoint-summary",
    severity=Severity.DENY,
    description="d",
    node_kind=NodeKind.EXPRESSION,
)


def _violation(help_text: str | None = "Add .summary()") -> Violation:
    return Violation.at(
        code="DE0804",
        message="API endpoint missing required summary (DE0804)",
        node=MagicMock(),
        span=Span("routes.py", 3, 9, 3, 17),
        help=help_text,
        notes=("DNA Section 24",),
    )


class TestDiagnostic:
    def test_from_violation(self) -> None:
        diagnostic = Diagnostic.from_violation(DESCRIPTOR, _violation())
        assert diagnostic.rule_id == "DE0804"
        assert diagnostic.severity is Severity.DENY
        assert diagnostic.span == Span("routes.py", 3, 9, 3, 17)
        assert diagnostic.notes == ("DNA Section 24",)

    def test_empty_help_becomes_none(self) -> None:
        assert Diagnostic.from_violation(DESCRIPTOR, _violation("")).help is None

    def test_to_dict(self) -> None:
        assert Diagnostic.from_violation(DESCRIPTOR, _violation()).to_dict() == {
            "rule_id": "DE0804",
            "severity": "deny",
            "span": {
                "file": "routes.py",
                "start": {"line": 3, "col": 9},
                "end": {"line": 3, "col": 17},
            },
            "primary_message": "API endpoint missing required summary (DE0804)",
            "help": "Add .summary()",
            "notes": ["DNA Section 24"],
        }

    def test_violation_location(self) -> None:
        assert _violation().location == "routes.py:3:9"


class TestDiagnosticSink:
    def test_append_only_and_reset(self) -> None:
        sink = DiagnosticSink()
        sink.emit(DESCRIPTOR, _violation())
        snapshot = sink.diagnostics
        snapshot.clear()
        assert len(sink) == 1
        sink.reset()
        assert len(sink) == 0
        assert sink.diagnostics == []
