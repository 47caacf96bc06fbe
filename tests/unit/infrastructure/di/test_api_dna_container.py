"""Unit tests for ApiDnaContainer (infrastructure/di/container.py)."""

from unittest.mock import patch

from api_dna_linter.domain.rules import Severity
from api_dna_linter.infrastructure.di.container import ApiDnaContainer
from api_dna_linter.infrastructure.reporters import DiagnosticReporter
from api_dna_linter.use_cases.analyze_source import AnalyzeSourceUseCase
from api_dna_linter.use_cases.verify_fixtures import VerifyFixturesUseCase


class TestApiDnaContainer:
    def test_wires_from_explicit_config(self) -> None:
        container = ApiDnaContainer({"disable": ["DE0205"], "severity": {"DE0803": "deny"}})
        registry = container.get_rule_registry()
        assert registry.codes() == ["DE0803", "DE0804", "DE0805"]
        assert registry.get("DE0803")[0].severity is Severity.DENY
        assert isinstance(container.get_analyzer(), AnalyzeSourceUseCase)
        assert container.get_analyzer().registry is registry
        assert isinstance(container.get_fixture_verifier(), VerifyFixturesUseCase)
        assert isinstance(container.get_reporter(), DiagnosticReporter)
        assert container.get_config_loader().disabled_rules == frozenset({"DE0205"})
        assert container.get_guidance_service().get_manual_instructions("DE0804")

    def test_reads_pyproject_when_no_config_given(self) -> None:
        with patch(
            "api_dna_linter.infrastructure.di.container.ConfigFileLoader.load_config_from_fs",
            return_value={"disable": ["DE0804"]},
        ) as load:
            container = ApiDnaContainer()
        load.assert_called_once_with()
        assert "DE0804" not in container.get_rule_registry()

    def test_register_singleton_overrides(self) -> None:
        container = ApiDnaContainer({})
        container.register_singleton("Custom", 42)
        assert container.get("Custom") == 42
        assert container.get("Missing") is None

    def test_get_instance_is_shared(self) -> None:
        with patch.object(ApiDnaContainer, "_instance", None):
            with patch(
                "api_dna_linter.infrastructure.di.container.ConfigFileLoader.load_config_from_fs",
                return_value={},
            ):
                first = ApiDnaContainer.get_instance()
                second = ApiDnaContainer.get_instance()
        assert first is second
