"""Load [tool.api-dna] from pyproject.toml. Infrastructure I/O only."""

import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib as toml_lib
else:
    import tomli as toml_lib

logger = logging.getLogger(__name__)

TOOL_SECTION = "api-dna"


class ConfigFileLoader:
    """
    Loads config from pyproject.toml. No top-level functions.
    """

    @staticmethod
    def load_config_from_fs(start: Path | None = None) -> dict[str, object]:
        """Walk up from start (default: cwd) to the first pyproject.toml; return [tool.api-dna]."""
        current_path = (start or Path.cwd()).resolve()
        while True:
            config_file = current_path / "pyproject.toml"
            if config_file.exists():
                try:
                    with config_file.open("rb") as f:
                        data = toml_lib.load(f)
                except (OSError, toml_lib.TOMLDecodeError) as exc:
                    logger.warning("Could not read %s: %s", config_file, exc)
                    return {}
                tool_section = data.get("tool", {}) or {}
                section = tool_section.get(TOOL_SECTION, {}) or {}
                return section if isinstance(section, dict) else {}
            if current_path.parent == current_path:
                return {}
            current_path = current_path.parent
