from typing import Any, Optional

from api_dna_linter.domain.config import ConfigurationLoader
from api_dna_linter.domain.registry import RuleRegistry, RuleRegistryFactory
from api_dna_linter.infrastructure.config_file_loader import ConfigFileLoader
from api_dna_linter.infrastructure.gateways.astroid_gateway import AstroidGateway
from api_dna_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from api_dna_linter.infrastructure.reporters import DiagnosticReporter
from api_dna_linter.infrastructure.services.guidance_service import GuidanceService
from api_dna_linter.use_cases.analyze_source import AnalyzeSourceUseCase
from api_dna_linter.use_cases.verify_fixtures import VerifyFixturesUseCase


class ApiDnaContainer:
    """Dependency Injection Container for the API DNA linter."""

    _instance: Optional["ApiDnaContainer"] = None

    def __init__(self, config_dict: dict[str, object] | None = None) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults(config_dict)

    def _register_defaults(self, config_dict: dict[str, object] | None) -> None:
        """Register default implementations for protocols."""
        if config_dict is None:
            config_dict = ConfigFileLoader.load_config_from_fs()
        config_loader = ConfigurationLoader(config_dict)
        self.register_singleton("ConfigurationLoader", config_loader)

        ast_gateway = AstroidGateway()
        filesystem = FileSystemGateway()
        guidance_service = GuidanceService()
        self.register_singleton("AstroidGateway", ast_gateway)
        self.register_singleton("FileSystemGateway", filesystem)
        self.register_singleton("GuidanceService", guidance_service)

        registry = RuleRegistryFactory.build(config_loader, guidance_service.get_registry())
        self.register_singleton("RuleRegistry", registry)

        analyzer = AnalyzeSourceUseCase(registry, ast_gateway, filesystem)
        self.register_singleton("AnalyzeSourceUseCase", analyzer)
        self.register_singleton(
            "VerifyFixturesUseCase", VerifyFixturesUseCase(analyzer, filesystem)
        )
        self.register_singleton("DiagnosticReporter", DiagnosticReporter())

    @classmethod
    def get_instance(cls) -> "ApiDnaContainer":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def register_singleton(self, key: str, instance: Any) -> None:
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        return self._singletons.get(key)

    def get_config_loader(self) -> ConfigurationLoader:
        return self._singletons["ConfigurationLoader"]

    def get_guidance_service(self) -> GuidanceService:
        return self._singletons["GuidanceService"]

    def get_rule_registry(self) -> RuleRegistry:
        return self._singletons["RuleRegistry"]

    def get_analyzer(self) -> AnalyzeSourceUseCase:
        return self._singletons["AnalyzeSourceUseCase"]

    def get_fixture_verifier(self) -> VerifyFixturesUseCase:
        return self._singletons["VerifyFixturesUseCase"]

    def get_reporter(self) -> DiagnosticReporter:
        return self._singletons["DiagnosticReporter"]
