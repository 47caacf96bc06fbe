"""
Pylint plugin entry point - composition root for the checker plugin.
Load with `pylint --load-plugins=api_dna_linter.infrastructure.checker`.
"""

from pylint.lint import PyLinter

from api_dna_linter.infrastructure.di.container import ApiDnaContainer
from api_dna_linter.use_cases.checks.conventions import (
    DtoConventionsChecker,
    OperationBuilderChecker,
)


def register(linter: PyLinter) -> None:
    """Register checkers."""
    registry = ApiDnaContainer.get_instance().get_rule_registry()

    linter.register_checker(DtoConventionsChecker(linter, registry=registry))
    linter.register_checker(OperationBuilderChecker(linter, registry=registry))
