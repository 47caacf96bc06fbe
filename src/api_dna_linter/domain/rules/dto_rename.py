"""DTO rename rules: DTOs Must Use Snake Case (DE0205), API Snake Case (DE0805).

Both rules read the same annotations::

    @serde(rename_all="camelCase")        # type level, must be "snake_case"
    class UserDto:
        user_id: str = field(rename="userId")   # field level, must be snake_case

They differ in their code, grouping and wording only; a project enables the
one its guidelines refer to.
"""

from typing import ClassVar

import astroid  # type: ignore[import-untyped]

from api_dna_linter.domain.annotations import MetadataExtractor
from api_dna_linter.domain.constants import (
    FIELD_NAMESPACE,
    RENAME_ALL_KEY,
    RENAME_KEY,
    SERDE_NAMESPACE,
    SNAKE_CASE_CONVENTION,
)
from api_dna_linter.domain.declarations import DeclarationInspector, ItemKind
from api_dna_linter.domain.naming import NamingClassifier, NamingStyle
from api_dna_linter.domain.rules import Checkable, NodeKind, Violation
from api_dna_linter.domain.scope import PathScopeGate


class SerdeRenameRule(Checkable):
    """Shared detector for rename_all / rename values on in-scope DTOs."""

    code: str = ""
    description: str = ""
    node_kind: NodeKind = NodeKind.ITEM

    type_message: ClassVar[str] = "DTOs must not use non-snake_case in serde rename_all"
    field_message: ClassVar[str] = "DTO fields must not use non-snake_case in serde rename"
    type_help: ClassVar[str] = ""
    field_help: ClassVar[str] = ""

    def __init__(
        self,
        scope_gate: PathScopeGate,
        extractor: MetadataExtractor | None = None,
    ) -> None:
        self._scope_gate = scope_gate
        self._extractor = extractor or MetadataExtractor()

    def check(self, node: astroid.nodes.NodeNG) -> list[Violation]:
        """Check a ClassDef. Variants are reached through their enum."""
        kind = DeclarationInspector.kind_of(node)
        if kind not in (ItemKind.STRUCT, ItemKind.ENUM):
            return []
        if not self._scope_gate.is_node_within(node):
            return []

        violations = self._check_rename_all(node)
        violations.extend(self._check_fields(node))
        if kind is ItemKind.ENUM:
            # Variant annotations are checked on their own, never merged with
            # the enum-level rename_all.
            for variant in DeclarationInspector.variants(node):
                violations.extend(self._check_rename_all(variant))
                violations.extend(self._check_fields(variant))
        return violations

    def _check_rename_all(self, node: astroid.nodes.ClassDef) -> list[Violation]:
        violations: list[Violation] = []
        for span, value in self._extractor.extract(node, SERDE_NAMESPACE, RENAME_ALL_KEY):
            if value == SNAKE_CASE_CONVENTION:
                continue
            violations.append(
                Violation.at(
                    code=self.code,
                    message=f"{self.type_message} ({self.code})",
                    node=node,
                    span=span,
                    help=self.type_help,
                    notes=(self._convention_note(value),),
                )
            )
        return violations

    @staticmethod
    def _convention_note(value: str) -> str:
        style = NamingStyle.from_convention_name(value)
        if style is None:
            return f'"{value}" is not a known naming convention'
        return f'rename_all="{value}" renames to {style.value}, not snake_case'

    def _check_fields(self, node: astroid.nodes.ClassDef) -> list[Violation]:
        violations: list[Violation] = []
        for field_node in DeclarationInspector.fields(node):
            for span, value in self._extractor.extract(field_node, FIELD_NAMESPACE, RENAME_KEY):
                if NamingClassifier.is_snake_case(value):
                    continue
                violations.append(
                    Violation.at(
                        code=self.code,
                        message=f"{self.field_message} ({self.code})",
                        node=field_node,
                        span=span,
                        help=self.field_help,
                    )
                )
        return violations


class DtoSnakeCaseRenameAllRule(SerdeRenameRule):
    """Rule for DE0205: API-layer DTOs must use snake_case renames."""

    code: str = "DE0205"
    description: str = "DTOs must use snake_case in serde rename_all and rename."
    type_help: ClassVar[str] = (
        "DTOs in api/rest must use snake_case (or no rename_all) to match API standards"
    )
    field_help: ClassVar[str] = "DTO fields in api/rest must be renamed to snake_case names only"


class ApiSnakeCaseRule(SerdeRenameRule):
    """Rule for DE0805: REST API DTOs must use snake_case renames."""

    code: str = "DE0805"
    description: str = "API DTOs must use snake_case in serde rename attributes."
    type_help: ClassVar[str] = (
        "DTOs in api/rest must use snake_case (or default) to match API standards"
    )
    field_help: ClassVar[str] = "DTO fields in api/rest must use snake_case to match API standards"
