"""Protocol for diagnostic reporting - no infrastructure imports."""

from typing import TYPE_CHECKING, Protocol, TextIO

if TYPE_CHECKING:
    from api_dna_linter.domain.registry import RuleRegistry
    from api_dna_linter.use_cases.analyze_source import AnalysisReport
    from api_dna_linter.use_cases.verify_fixtures import FixtureReport


class DiagnosticReporterProtocol(Protocol):
    """Protocol for reporting analysis results, the rule list and fixture outcomes."""

    def report_analysis(
        self, report: "AnalysisReport", stream: TextIO, fmt: str = "text"
    ) -> None:
        """Report diagnostics. fmt: 'text' (default) or 'json'."""
        ...

    def report_rules(self, registry: "RuleRegistry", stream: TextIO) -> None:
        ...

    def report_fixtures(self, reports: list["FixtureReport"], stream: TextIO) -> None:
        ...
