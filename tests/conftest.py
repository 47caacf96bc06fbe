"""Pytest configuration and shared fixtures.

pythonpath in pyproject.toml puts src/ and the project root on sys.path, so
tests import api_dna_linter directly and helpers as tests.linter_test_utils.
"""

import pytest

from api_dna_linter.domain.registry import RuleRegistry
from api_dna_linter.infrastructure.gateways.astroid_gateway import AstroidGateway
from api_dna_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from api_dna_linter.use_cases.analyze_source import AnalyzeSourceUseCase
from tests.linter_test_utils import build_registry


@pytest.fixture
def registry() -> RuleRegistry:
    return build_registry()


@pytest.fixture
def analyzer(registry: RuleRegistry) -> AnalyzeSourceUseCase:
    return AnalyzeSourceUseCase(registry, AstroidGateway(), FileSystemGateway())
