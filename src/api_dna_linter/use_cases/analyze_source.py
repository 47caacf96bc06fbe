"""Traversal driver: one top-down pass per file over the registered rules."""

import logging
from dataclasses import dataclass, field

import astroid  # type: ignore[import-untyped]

from api_dna_linter.domain.diagnostics import Diagnostic, DiagnosticSink
from api_dna_linter.domain.protocols import AstroidProtocol, FileSystemProtocol
from api_dna_linter.domain.registry import RuleRegistry
from api_dna_linter.domain.rules import NodeKind, Severity

logger = logging.getLogger(__name__)


@dataclass
class AnalysisReport:
    """Diagnostics per analyzed file, plus the files that could not be parsed."""

    diagnostics: dict[str, list[Diagnostic]] = field(default_factory=dict)
    skipped: dict[str, str] = field(default_factory=dict)

    def all_diagnostics(self) -> list[Diagnostic]:
        return [d for path in sorted(self.diagnostics) for d in self.diagnostics[path]]

    def has_blocking(self) -> bool:
        return any(d.severity is Severity.DENY for d in self.all_diagnostics())


class AnalyzeSourceUseCase:
    """
    Walks each module once, pre-order, and hands every Call and ClassDef to the
    rules registered for its kind, in registration order. Each file gets a
    fresh sink; no state crosses file boundaries.
    """

    def __init__(
        self,
        registry: RuleRegistry,
        ast_gateway: AstroidProtocol,
        filesystem: FileSystemProtocol | None = None,
    ) -> None:
        self._registry = registry
        self._ast_gateway = ast_gateway
        self._filesystem = filesystem
        self._by_kind = {kind: registry.for_kind(kind) for kind in NodeKind}

    @property
    def registry(self) -> RuleRegistry:
        return self._registry

    def analyze_module(self, module: astroid.nodes.Module) -> list[Diagnostic]:
        sink = DiagnosticSink()
        stack: list[astroid.nodes.NodeNG] = [module]
        while stack:
            node = stack.pop()
            self._visit(node, sink)
            children = list(node.get_children())
            stack.extend(reversed(children))
        return sink.diagnostics

    def analyze_source(self, source: str, path: str | None = None) -> list[Diagnostic]:
        """Parse and analyze source text. Raises astroid.AstroidSyntaxError."""
        return self.analyze_module(self._ast_gateway.parse_source(source, path))

    def analyze_file(self, file_path: str) -> list[Diagnostic]:
        return self.analyze_module(self._ast_gateway.parse_file(file_path))

    def analyze_paths(self, paths: list[str]) -> AnalysisReport:
        """Analyze every Python file under paths. Unparsable files are skipped and reported."""
        report = AnalysisReport()
        for file_path in self._expand(paths):
            try:
                report.diagnostics[file_path] = self.analyze_file(file_path)
            except (OSError, UnicodeDecodeError, astroid.AstroidSyntaxError) as exc:
                logger.warning("Skipping %s: %s", file_path, exc)
                report.skipped[file_path] = str(exc)
        return report

    def _expand(self, paths: list[str]) -> list[str]:
        if self._filesystem is None:
            return list(paths)
        files: list[str] = []
        for path in paths:
            files.extend(self._filesystem.glob_python_files(path))
        return list(dict.fromkeys(files))

    def _visit(self, node: astroid.nodes.NodeNG, sink: DiagnosticSink) -> None:
        kind = NodeKind.of(node)
        if kind is None:
            return
        for descriptor, rule in self._by_kind[kind]:
            try:
                violations = rule.check(node)
            except Exception:  # a rule that cannot decide abstains
                logger.exception("Rule %s failed on line %s; skipped", descriptor.code, node.lineno)
                continue
            for violation in violations:
                sink.emit(descriptor, violation)
