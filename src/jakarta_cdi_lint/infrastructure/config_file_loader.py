"""Load [tool.jakarta-cdi-lint] from pyproject.toml. Infrastructure I/O only."""

import logging
import tomllib
from pathlib import Path

from jakarta_cdi_lint.domain.constants import CONFIG_SECTION

logger = logging.getLogger(__name__)


class ConfigFileLoader:
    """Loads config from the nearest pyproject.toml."""

    @staticmethod
    def load_config_from_fs(start: Path | None = None) -> dict[str, object]:
        """Walk up from start (default cwd) and return the tool table, or {}."""
        current_path = (start or Path.cwd()).resolve()
        for directory in (current_path, *current_path.parents):
            config_file = directory / "pyproject.toml"
            if not config_file.is_file():
                continue
            try:
                with config_file.open("rb") as f:
                    data = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as exc:
                logger.warning("Ignoring unreadable %s: %s", config_file, exc)
                return {}
            tool_section = data.get("tool", {}) or {}
            section = tool_section.get(CONFIG_SECTION, {}) or {}
            return section if isinstance(section, dict) else {}
        return {}
