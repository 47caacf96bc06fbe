"""Astroid gateway: the only place source text becomes a tree."""

from pathlib import Path

import astroid  # type: ignore[import-untyped]

from api_dna_linter.domain.protocols import AstroidProtocol


class AstroidGateway(AstroidProtocol):
    """Parses without inference; rules only read syntax."""

    def parse_source(self, source: str, path: str | None = None) -> astroid.nodes.Module:
        """Parse source text. Raises astroid.AstroidSyntaxError on invalid code."""
        module_name = Path(path).stem if path else ""
        return astroid.parse(source, module_name=module_name, path=path)

    def parse_file(self, file_path: str) -> astroid.nodes.Module:
        """Parse a file and return the astroid Module node."""
        source = Path(file_path).read_text(encoding="utf-8")
        return self.parse_source(source, file_path)
