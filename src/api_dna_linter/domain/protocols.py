"""Ports implemented by Infrastructure. Domain and use cases depend on these only."""

from typing import Protocol

import astroid  # type: ignore[import-untyped]

from api_dna_linter.domain.registry_types import RuleRegistryEntry


class AstroidProtocol(Protocol):
    """Parsing port. The host parser stays behind this boundary."""

    def parse_source(self, source: str, path: str | None = None) -> astroid.nodes.Module:
        """Parse source text; path becomes the module's file. Raises on syntax errors."""
        ...

    def parse_file(self, file_path: str) -> astroid.nodes.Module:
        """Read and parse a file. Raises OSError or astroid.AstroidSyntaxError."""
        ...


class FileSystemProtocol(Protocol):
    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        ...

    def glob_python_files(self, path: str) -> list[str]:
        ...

    def is_directory(self, path: str) -> bool:
        ...


class GuidanceServiceProtocol(Protocol):
    def get_registry(self) -> dict[str, RuleRegistryEntry]:
        ...

    def get_manual_instructions(self, rule_code: str) -> str:
        ...
