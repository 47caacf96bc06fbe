"""Unit tests for the fixture harness (use_cases/verify_fixtures.py)."""

import unittest
from pathlib import Path

import pytest

from api_dna_linter.infrastructure.gateways.astroid_gateway import AstroidGateway
from api_dna_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from api_dna_linter.use_cases.analyze_source import AnalyzeSourceUseCase
from api_dna_linter.use_cases.verify_fixtures import (
    FixtureExpectation,
    FixtureMismatchError,
    FixtureParser,
    VerifyFixturesUseCase,
)
from tests.linter_test_utils import build_registry


class TestFixtureParser(unittest.TestCase):
    def test_standalone_marker_applies_to_next_code_line(self) -> None:
        source = (
            "# simulated_dir=/srv/api/rest/dto.py\n"
            "\n"
            "# Should trigger DE0805 - DTOs must not use\n"
            "\n"
            '@serde(rename_all="camelCase")\n'
            "class Dto:\n"
            "    pass\n"
        )
        fixture = FixtureParser.parse(source)
        self.assertEqual(fixture.simulated_path, "/srv/api/rest/dto.py")
        self.assertEqual(
            fixture.expectations, (FixtureExpectation(5, "DE0805", "DTOs must not use"),)
        )

    def test_trailing_marker_applies_to_its_own_line(self) -> None:
        source = "route.register(r)  # Should trigger DE0804 - API endpoint missing\n"
        fixture = FixtureParser.parse(source)
        self.assertIsNone(fixture.simulated_path)
        self.assertEqual(
            fixture.expectations, (FixtureExpectation(1, "DE0804", "API endpoint missing"),)
        )

    def test_markers_inside_strings_are_not_markers(self) -> None:
        source = 'text = "# Should trigger DE0804 - nope"\n'
        self.assertEqual(FixtureParser.parse(source).expectations, ())

    def test_should_not_trigger_expects_nothing(self) -> None:
        source = "# Should not trigger DE0804 - fine\nroute.register(r)\n"
        self.assertEqual(FixtureParser.parse(source).expectations, ())

    def test_stacked_markers_share_a_line(self) -> None:
        source = (
            "x = (\n"
            "    builder\n"
            "    # Should trigger DE0803 - first\n"
            "    # Should trigger DE0804 - second\n"
            "    .call()\n"
            ")\n"
        )
        self.assertEqual(
            [(e.line, e.rule_code) for e in FixtureParser.parse(source).expectations],
            [(5, "DE0803"), (5, "DE0804")],
        )

    def test_marker_without_following_code_keeps_its_own_line(self) -> None:
        source = "x = 1\n# Should trigger DE0805 - DTOs must not use\n# trailing comment\n"
        self.assertEqual(
            FixtureParser.parse(source).expectations,
            (FixtureExpectation(2, "DE0805", "DTOs must not use"),),
        )


class TestVerifyFixturesUseCase:
    @pytest.fixture
    def verifier(self) -> VerifyFixturesUseCase:
        return VerifyFixturesUseCase(AnalyzeSourceUseCase(build_registry(), AstroidGateway()))

    def test_matching_fixture(self, verifier: VerifyFixturesUseCase) -> None:
        source = (
            "# simulated_dir=/srv/api/rest/dto.py\n"
            "# Should trigger DE0805 - DTOs must not use non-snake_case in serde rename_all\n"
            '@serde(rename_all="camelCase")\n'
            "class Dto:\n"
            "    pass\n"
        )
        report = verifier.verify_source(source, "DE0805", "dto.py")
        assert report.ok
        report.raise_for_mismatch()

    def test_other_rules_do_not_count(self, verifier: VerifyFixturesUseCase) -> None:
        source = '# simulated_dir=/srv/api/rest/dto.py\n@serde(rename_all="camelCase")\nclass Dto:\n    pass\n'
        assert verifier.verify_source(source, "DE0804").ok
        assert not verifier.verify_source(source, "DE0805").ok

    def test_unexpected_diagnostic(self, verifier: VerifyFixturesUseCase) -> None:
        source = 'OperationBuilder.get("/u").register(r, o)\n'
        report = verifier.verify_source(source, "DE0804", "routes.py")
        assert not report.ok
        assert [d.span.lineno for d in report.unexpected] == [1]
        with pytest.raises(FixtureMismatchError, match="unexpected DE0804"):
            report.raise_for_mismatch()

    def test_missing_diagnostic(self, verifier: VerifyFixturesUseCase) -> None:
        source = '# Should trigger DE0804 - API endpoint missing\nOperationBuilder.get("/u").summary("s").register(r, o)\n'
        report = verifier.verify_source(source, "DE0804")
        assert report.missing == [FixtureExpectation(2, "DE0804", "API endpoint missing")]
        assert "expected DE0804" in report.describe()[0]

    def test_wrong_line_is_both_missing_and_unexpected(self, verifier: VerifyFixturesUseCase) -> None:
        source = (
            "# Should trigger DE0804 - API endpoint missing\n"
            "route = (\n"
            '    OperationBuilder.get("/u")\n'
            "    .register(r, o)\n"
            ")\n"
        )
        report = verifier.verify_source(source, "DE0804")
        assert len(report.missing) == 1
        assert len(report.unexpected) == 1

    def test_message_prefix_must_match(self, verifier: VerifyFixturesUseCase) -> None:
        source = 'OperationBuilder.get("/u").register(r, o)  # Should trigger DE0804 - Summary required\n'
        assert not verifier.verify_source(source, "DE0804").ok

    def test_marker_at_end_of_file_is_missing(self, verifier: VerifyFixturesUseCase) -> None:
        source = "x = 1\n# Should trigger DE0805 - DTOs must not use\n"
        report = verifier.verify_source(source, "DE0805")
        assert not report.ok
        assert report.missing == [FixtureExpectation(2, "DE0805", "DTOs must not use")]
        with pytest.raises(FixtureMismatchError, match="expected DE0805"):
            report.raise_for_mismatch()

    def test_file_helpers_need_filesystem(self, verifier: VerifyFixturesUseCase) -> None:
        with pytest.raises(ValueError, match="filesystem"):
            verifier.verify_file("x.py", "DE0804")
        with pytest.raises(ValueError, match="filesystem"):
            verifier.verify_directory(".", "DE0804")

    def test_verify_directory_rejects_a_file(self, tmp_path: Path) -> None:
        fixture = tmp_path / "routes.py"
        fixture.write_text("x = 1\n", encoding="utf-8")
        verifier = VerifyFixturesUseCase(
            AnalyzeSourceUseCase(build_registry(), AstroidGateway()), FileSystemGateway()
        )
        with pytest.raises(NotADirectoryError, match="Not a fixture directory"):
            verifier.verify_directory(str(fixture), "DE0804")
        assert verifier.verify_directory(str(tmp_path), "DE0804")[0].ok
