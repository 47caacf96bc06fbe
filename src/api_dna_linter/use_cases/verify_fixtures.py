"""Fixture harness: checks that fixtures produce exactly the marked diagnostics.

A fixture is a Python file carrying marker comments::

    # simulated_dir=/srv/modules/users/api/rest/dto.py
    @serde(rename_all="camelCase")  # Should trigger DE0805 - DTOs must not use

A marker on a line of its own applies to the next line holding code; a
trailing marker applies to its own line. A marker with no code after it can
never be met and fails the fixture. `# Should not trigger ...` comments
document intent and expect nothing.
"""

import io
import re
import tokenize
from dataclasses import dataclass, field

from api_dna_linter.domain.diagnostics import Diagnostic
from api_dna_linter.domain.protocols import FileSystemProtocol
from api_dna_linter.use_cases.analyze_source import AnalyzeSourceUseCase

_MARKER = re.compile(r"^#\s*Should trigger\s+(?P<code>[A-Z]+\d+)\s*-\s*(?P<message>.*?)\s*$")
_SIMULATED_DIR = re.compile(r"^#\s*simulated_dir\s*=\s*(?P<path>\S+)\s*$")
_NON_CODE_TOKENS = frozenset(
    {
        tokenize.COMMENT,
        tokenize.NL,
        tokenize.NEWLINE,
        tokenize.INDENT,
        tokenize.DEDENT,
        tokenize.ENCODING,
        tokenize.ENDMARKER,
    }
)


class FixtureMismatchError(AssertionError):
    """Raised when a fixture's diagnostics differ from its markers."""


@dataclass(frozen=True)
class FixtureExpectation:
    line: int
    rule_code: str
    message_prefix: str


@dataclass(frozen=True)
class Fixture:
    source: str
    simulated_path: str | None
    expectations: tuple[FixtureExpectation, ...]


@dataclass
class FixtureReport:
    """Outcome of one fixture against one rule."""

    name: str
    rule_code: str
    missing: list[FixtureExpectation] = field(default_factory=list)
    unexpected: list[Diagnostic] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.missing and not self.unexpected

    def describe(self) -> list[str]:
        lines = [
            f"{self.name}:{e.line}: expected {e.rule_code} starting with {e.message_prefix!r}"
            for e in self.missing
        ]
        lines.extend(
            f"{self.name}:{d.span.lineno}: unexpected {d.rule_id}: {d.primary_message}"
            for d in self.unexpected
        )
        return lines

    def raise_for_mismatch(self) -> None:
        if not self.ok:
            raise FixtureMismatchError("\n".join(self.describe()))


class FixtureParser:
    """Reads markers from real comments only (tokenize, not regex over text)."""

    @staticmethod
    def parse(source: str) -> Fixture:
        simulated_path: str | None = None
        expectations: list[FixtureExpectation] = []
        pending: list[tuple[int, str, str]] = []
        code_lines: set[int] = set()

        tokens = tokenize.generate_tokens(io.StringIO(source).readline)
        for token in tokens:
            line = token.start[0]
            if token.type == tokenize.COMMENT:
                text = token.string
                simulated = _SIMULATED_DIR.match(text)
                if simulated:
                    simulated_path = simulated.group("path")
                    continue
                marker = _MARKER.match(text)
                if not marker:
                    continue
                found = (marker.group("code"), marker.group("message"))
                if line in code_lines:
                    expectations.append(FixtureExpectation(line, *found))
                else:
                    pending.append((line, *found))
                continue
            if token.type in _NON_CODE_TOKENS:
                continue
            if line not in code_lines:
                code_lines.add(line)
                for _, *found in pending:
                    expectations.append(FixtureExpectation(line, *found))
                pending = []
        # Markers with no code after them keep their comment line and never match.
        expectations.extend(FixtureExpectation(*orphan) for orphan in pending)
        return Fixture(
            source=source,
            simulated_path=simulated_path,
            expectations=tuple(expectations),
        )


class VerifyFixturesUseCase:
    """Runs the analysis driver over fixtures and compares against their markers."""

    def __init__(
        self,
        analyzer: AnalyzeSourceUseCase,
        filesystem: FileSystemProtocol | None = None,
    ) -> None:
        self._analyzer = analyzer
        self._filesystem = filesystem

    def verify_source(self, source: str, rule_code: str, name: str = "<fixture>") -> FixtureReport:
        fixture = FixtureParser.parse(source)
        path = fixture.simulated_path or (name if name.endswith(".py") else None)
        diagnostics = [
            d for d in self._analyzer.analyze_source(source, path) if d.rule_id == rule_code
        ]
        expected = [e for e in fixture.expectations if e.rule_code == rule_code]
        return self._compare(name, rule_code, expected, diagnostics)

    def verify_file(self, file_path: str, rule_code: str) -> FixtureReport:
        if self._filesystem is None:
            raise ValueError("verify_file needs a filesystem gateway")
        return self.verify_source(self._filesystem.read_text(file_path), rule_code, file_path)

    def verify_directory(self, directory: str, rule_code: str) -> list[FixtureReport]:
        if self._filesystem is None:
            raise ValueError("verify_directory needs a filesystem gateway")
        if not self._filesystem.is_directory(directory):
            raise NotADirectoryError(f"Not a fixture directory: {directory}")
        return [
            self.verify_file(path, rule_code)
            for path in self._filesystem.glob_python_files(directory)
        ]

    @staticmethod
    def _compare(
        name: str,
        rule_code: str,
        expected: list[FixtureExpectation],
        diagnostics: list[Diagnostic],
    ) -> FixtureReport:
        report = FixtureReport(name=name, rule_code=rule_code)
        remaining = list(diagnostics)
        for expectation in expected:
            match = next(
                (
                    d
                    for d in remaining
                    if d.span.lineno == expectation.line
                    and d.primary_message.startswith(expectation.message_prefix)
                ),
                None,
            )
            if match is None:
                report.missing.append(expectation)
            else:
                remaining.remove(match)
        report.unexpected.extend(remaining)
        return report
