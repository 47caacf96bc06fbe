"""GuidanceService: loads the rule catalogue and provides manual instructions."""

from pathlib import Path
from typing import cast

import yaml

from api_dna_linter.domain.constants import RULE_PREFIX
from api_dna_linter.domain.protocols import GuidanceServiceProtocol
from api_dna_linter.domain.registry_types import RuleRegistryEntry


class GuidanceService(GuidanceServiceProtocol):
    """Loads rule_registry.yaml and provides get_registry / get_manual_instructions."""

    def __init__(self, registry_path: str | None = None) -> None:
        if registry_path is not None:
            self._path = Path(registry_path)
        else:
            # Default: packaged resource next to this package
            _base = Path(__file__).resolve().parent.parent
            self._path = _base / "resources" / "rule_registry.yaml"
        self._registry: dict[str, RuleRegistryEntry] = {}
        self._load()

    def _load(self) -> None:
        if self._path.exists():
            with open(self._path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
                self._registry = (
                    cast(dict[str, RuleRegistryEntry], data) if isinstance(data, dict) else {}
                )
        else:
            self._registry = {}

    def get_registry(self) -> dict[str, RuleRegistryEntry]:
        """Return a shallow copy of the loaded catalogue."""
        return dict(self._registry)

    def get_manual_instructions(self, rule_code: str) -> str:
        entry = self._registry.get(f"{RULE_PREFIX}{rule_code}")
        if not entry:
            return ""
        return str(entry.get("manual_instructions", "")).strip()
