"""CLI entry points for the API DNA linter - Thin Controller using Typer."""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

import typer

from api_dna_linter.domain.config import ConfigurationLoader
from api_dna_linter.domain.protocols import GuidanceServiceProtocol
from api_dna_linter.domain.registry import RuleRegistry
from api_dna_linter.domain.rules import NodeKind, Severity
from api_dna_linter.interface.reporters import DiagnosticReporterProtocol
from api_dna_linter.use_cases.analyze_source import AnalyzeSourceUseCase
from api_dna_linter.use_cases.verify_fixtures import VerifyFixturesUseCase

OUTPUT_FORMATS = ("text", "json")


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    config_loader: ConfigurationLoader
    registry: RuleRegistry
    analyzer: AnalyzeSourceUseCase
    fixture_verifier: VerifyFixturesUseCase
    reporter: DiagnosticReporterProtocol
    guidance_service: GuidanceServiceProtocol


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def resolve_target_path(path: Path | None) -> str:
        """Resolve target path: explicit path, else src/ if exists, else '.'."""
        if path and str(path) != ".":
            return str(path)
        src_dir = Path.cwd() / "src"
        if src_dir.exists() and src_dir.is_dir():
            return "src"
        return "."

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name="api-dna",
            help="API DNA conventions linter. Run 'api-dna check' to lint; 'api-dna rules' to list rules.",
            add_completion=False,
        )

        @app.command()
        def check(
            path: Path | None = typer.Argument(None, help="File or directory to lint (default: src/ or .)"),  # noqa: B008
            output_format: str = typer.Option("text", "--format", help="Output format: text or json"),
            verbose: bool = typer.Option(False, "--verbose", "-v", help="Log rule and parse details"),
        ) -> None:
            """Lint Python files. Exits 1 when any deny-level diagnostic is found."""
            if output_format not in OUTPUT_FORMATS:
                typer.echo(f"Unknown format: {output_format}", err=True)
                sys.exit(2)
            if verbose:
                logging.basicConfig(level=logging.DEBUG)
            target_path = CLIAppFactory.resolve_target_path(path)
            report = deps.analyzer.analyze_paths([target_path])
            deps.reporter.report_analysis(report, sys.stdout, fmt=output_format)
            sys.exit(1 if report.has_blocking() else 0)

        @app.command()
        def rules() -> None:
            """List the enabled rules with their effective severity."""
            deps.reporter.report_rules(deps.registry, sys.stdout)

        @app.command(name="verify-fixtures")
        def verify_fixtures(
            directory: Path = typer.Argument(..., help="Directory of fixture files"),  # noqa: B008
            rule: str = typer.Option(..., "--rule", help="Rule code under test, e.g. DE0805"),
        ) -> None:
            """Check that fixtures produce exactly the diagnostics their markers expect."""
            if rule not in deps.registry:
                typer.echo(f"Unknown or disabled rule: {rule}", err=True)
                sys.exit(2)
            try:
                reports = deps.fixture_verifier.verify_directory(str(directory), rule)
            except NotADirectoryError as exc:
                typer.echo(str(exc), err=True)
                sys.exit(2)
            deps.reporter.report_fixtures(reports, sys.stdout)
            sys.exit(0 if all(r.ok for r in reports) else 1)

        @app.command(name="explain")
        def explain(
            rule: str = typer.Argument(..., help="Rule code, e.g. DE0804"),
        ) -> None:
            """Show how a rule is configured and how to fix what it reports."""
            found = deps.registry.get(rule)
            if found is None:
                typer.echo(f"Unknown or disabled rule: {rule}", err=True)
                sys.exit(2)
            descriptor, _ = found
            blocking = "blocking" if descriptor.severity is Severity.DENY else "advisory"
            typer.echo(f"{descriptor.code} ({descriptor.symbol}) [{descriptor.severity.value}, {blocking}]")
            typer.echo(descriptor.description)
            if descriptor.node_kind is NodeKind.ITEM:
                scopes = ", ".join("/".join(run) for run in deps.config_loader.scope_paths)
                typer.echo(f"Applies under: {scopes}")
            instructions = deps.guidance_service.get_manual_instructions(descriptor.code)
            if instructions:
                typer.echo("")
                typer.echo(instructions)

        return app
