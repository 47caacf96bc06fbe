"""Plain text and JSON rendering of diagnostics."""

import json
from typing import TextIO

from api_dna_linter.domain.diagnostics import Diagnostic
from api_dna_linter.domain.registry import RuleRegistry
from api_dna_linter.use_cases.analyze_source import AnalysisReport
from api_dna_linter.use_cases.verify_fixtures import FixtureReport


class DiagnosticReporter:
    """Writes reports to a stream. Formats: text (default) and json."""

    def format_diagnostic(self, diagnostic: Diagnostic) -> str:
        span = diagnostic.span
        lines = [
            f"{span.file or '<unknown>'}:{span.lineno}:{span.col_offset}: "
            f"{diagnostic.rule_id} [{diagnostic.severity.value}] {diagnostic.primary_message}"
        ]
        if diagnostic.help:
            lines.append(f"    help: {diagnostic.help}")
        lines.extend(f"    note: {note}" for note in diagnostic.notes)
        return "\n".join(lines)

    def report_analysis(self, report: AnalysisReport, stream: TextIO, fmt: str = "text") -> None:
        diagnostics = report.all_diagnostics()
        if fmt == "json":
            payload = {
                "diagnostics": [d.to_dict() for d in diagnostics],
                "skipped": report.skipped,
            }
            stream.write(json.dumps(payload, indent=2) + "\n")
            return
        for diagnostic in diagnostics:
            stream.write(self.format_diagnostic(diagnostic) + "\n")
        for path, reason in sorted(report.skipped.items()):
            stream.write(f"{path}: skipped ({reason})\n")
        stream.write(f"{len(diagnostics)} diagnostic(s) in {len(report.diagnostics)} file(s)\n")

    def report_rules(self, registry: RuleRegistry, stream: TextIO) -> None:
        for descriptor in registry.descriptors():
            stream.write(
                f"{descriptor.code}  {descriptor.severity.value:<4}  "
                f"{descriptor.symbol:<28}  {descriptor.description}\n"
            )

    def report_fixtures(self, reports: list[FixtureReport], stream: TextIO) -> None:
        failed = [r for r in reports if not r.ok]
        for report in failed:
            for line in report.describe():
                stream.write(line + "\n")
        stream.write(f"{len(reports) - len(failed)}/{len(reports)} fixture(s) match\n")
