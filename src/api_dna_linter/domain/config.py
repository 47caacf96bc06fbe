"""Configuration for the rule set. Immutable value object created by Infrastructure."""

from __future__ import annotations

import logging

from api_dna_linter.domain.constants import (
    DEFAULT_BUILDER_CONSTRUCTORS,
    DEFAULT_BUILDER_TYPES,
    DEFAULT_ERROR_STATUS_NAMES,
    DEFAULT_MAX_CHAIN_LENGTH,
    DEFAULT_SCOPE_PATHS,
)
from api_dna_linter.domain.rules import Severity

logger = logging.getLogger(__name__)


class ConfigurationLoader:
    """
    Immutable configuration for the rule set.

    Created by Infrastructure from the [tool.api-dna] table. Domain does not
    read the filesystem; Infrastructure calls ConfigFileLoader.load_config_from_fs()
    and constructs ConfigurationLoader(config_dict) at the composition root.
    Invalid values fall back to the defaults with a logged warning.
    """

    KNOWN_KEYS: frozenset[str] = frozenset(
        {
            "scope_paths",
            "builder_types",
            "builder_constructors",
            "error_status_names",
            "max_chain_length",
            "disable",
            "severity",
        }
    )

    def __init__(self, config_dict: dict[str, object] | None = None) -> None:
        """Set config once at construction. No mutable state after init."""
        self._config: dict[str, object] = dict(config_dict or {})
        if self._config:
            self.validate_config(self._config)

        self._scope_paths = self._read_scope_paths()
        self._builder_types = self._read_names("builder_types", DEFAULT_BUILDER_TYPES)
        self._builder_constructors = self._read_names(
            "builder_constructors", DEFAULT_BUILDER_CONSTRUCTORS
        )
        self._error_status_names = self._read_names(
            "error_status_names", DEFAULT_ERROR_STATUS_NAMES
        )
        self._max_chain_length = self._read_max_chain_length()
        self._disabled = self._read_names("disable", frozenset())
        self._severity_overrides = self._read_severity_overrides()

    def validate_config(self, config: dict[str, object]) -> None:
        """Warn about keys this version does not understand."""
        for key in sorted(set(config) - self.KNOWN_KEYS):
            logger.warning("Configuration Warning: unknown key '%s' in [tool.api-dna]", key)

    @property
    def config(self) -> dict[str, object]:
        """Return the raw configuration table."""
        return dict(self._config)

    @property
    def scope_paths(self) -> tuple[tuple[str, ...], ...]:
        """Directory runs DTO rules are restricted to, e.g. (("api", "rest"),)."""
        return self._scope_paths

    @property
    def builder_types(self) -> frozenset[str]:
        return self._builder_types

    @property
    def builder_constructors(self) -> frozenset[str]:
        return self._builder_constructors

    @property
    def error_status_names(self) -> frozenset[str]:
        return self._error_status_names

    @property
    def max_chain_length(self) -> int:
        return self._max_chain_length

    @property
    def disabled_rules(self) -> frozenset[str]:
        return self._disabled

    def severity_for(self, code: str, default: Severity) -> Severity:
        """Configured severity for a rule code, else default."""
        return self._severity_overrides.get(code, default)

    def is_enabled(self, code: str) -> bool:
        return code not in self._disabled

    def _read_scope_paths(self) -> tuple[tuple[str, ...], ...]:
        raw = self._config.get("scope_paths")
        if raw is None:
            return DEFAULT_SCOPE_PATHS
        if not isinstance(raw, list) or not all(isinstance(item, str) for item in raw):
            logger.warning(
                "Configuration Warning: 'scope_paths' must be a list of strings; using defaults."
            )
            return DEFAULT_SCOPE_PATHS
        paths: list[tuple[str, ...]] = []
        for item in raw:
            segments = tuple(part for part in item.replace("\\", "/").split("/") if part)
            if segments:
                paths.append(segments)
        return tuple(paths)

    def _read_names(self, key: str, default: frozenset[str]) -> frozenset[str]:
        raw = self._config.get(key)
        if raw is None:
            return default
        if not isinstance(raw, list) or not all(isinstance(item, str) for item in raw):
            logger.warning(
                "Configuration Warning: '%s' must be a list of strings; using defaults.", key
            )
            return default
        return frozenset(raw)

    def _read_max_chain_length(self) -> int:
        raw = self._config.get("max_chain_length")
        if raw is None:
            return DEFAULT_MAX_CHAIN_LENGTH
        if isinstance(raw, bool) or not isinstance(raw, int) or raw < 1:
            logger.warning(
                "Configuration Warning: 'max_chain_length' must be a positive integer; "
                "using %d.",
                DEFAULT_MAX_CHAIN_LENGTH,
            )
            return DEFAULT_MAX_CHAIN_LENGTH
        return raw

    def _read_severity_overrides(self) -> dict[str, Severity]:
        raw = self._config.get("severity")
        if raw is None:
            return {}
        if not isinstance(raw, dict):
            logger.warning("Configuration Warning: 'severity' must be a table; ignoring it.")
            return {}
        overrides: dict[str, Severity] = {}
        for code, value in raw.items():
            if not isinstance(value, str):
                logger.warning("Configuration Warning: severity for %s must be a string.", code)
                continue
            try:
                overrides[str(code)] = Severity.parse(value)
            except ValueError:
                logger.warning(
                    "Configuration Warning: unknown severity '%s' for %s; expected warn or deny.",
                    value,
                    code,
                )
        return overrides
