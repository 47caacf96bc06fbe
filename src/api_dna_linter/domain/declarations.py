"""Classification of item declarations: structs, enums, variants, fields."""

from enum import Enum

import astroid  # type: ignore[import-untyped]

from api_dna_linter.domain.constants import ENUM_BASE_NAMES
from api_dna_linter.domain.names import DottedName


class ItemKind(Enum):
    STRUCT = "struct"
    ENUM = "enum"
    ENUM_VARIANT = "enum_variant"
    FIELD = "field"
    OTHER = "other"


class DeclarationInspector:
    """
    Maps astroid nodes onto declaration kinds.

    An enum is a class deriving from one of the stdlib enum bases. A class
    nested directly in an enum body is a variant carrying fields; it is
    checked through its enum, never as a struct of its own.
    """

    @staticmethod
    def kind_of(node: astroid.nodes.NodeNG) -> ItemKind:
        if isinstance(node, astroid.nodes.ClassDef):
            parent = node.parent
            if isinstance(parent, astroid.nodes.ClassDef) and DeclarationInspector.is_enum(parent):
                return ItemKind.ENUM_VARIANT
            if DeclarationInspector.is_enum(node):
                return ItemKind.ENUM
            return ItemKind.STRUCT
        if isinstance(node, astroid.nodes.AnnAssign):
            if isinstance(node.parent, astroid.nodes.ClassDef) and isinstance(
                node.target, astroid.nodes.AssignName
            ):
                return ItemKind.FIELD
        return ItemKind.OTHER

    @staticmethod
    def is_enum(node: astroid.nodes.ClassDef) -> bool:
        """Syntactic check on the written bases; no inference."""
        return any(DottedName.terminal(base) in ENUM_BASE_NAMES for base in node.bases)

    @staticmethod
    def fields(node: astroid.nodes.ClassDef) -> list[astroid.nodes.AnnAssign]:
        return [
            stmt
            for stmt in node.body
            if DeclarationInspector.kind_of(stmt) is ItemKind.FIELD
        ]

    @staticmethod
    def variants(node: astroid.nodes.ClassDef) -> list[astroid.nodes.ClassDef]:
        return [stmt for stmt in node.body if isinstance(stmt, astroid.nodes.ClassDef)]
