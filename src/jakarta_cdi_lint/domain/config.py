"""Configuration for the linter. Immutable value object created by Infrastructure."""

from __future__ import annotations

import logging

from jakarta_cdi_lint.domain.constants import DEFAULT_FILE_EXTENSIONS
from jakarta_cdi_lint.domain.entities import DiagnosticSeverity

logger = logging.getLogger(__name__)


class ConfigurationLoader:
    """
    Immutable configuration for linter settings.

    Created by Infrastructure from the [tool.jakarta-cdi-lint] table. Domain does
    not read the filesystem; ConfigFileLoader.load_config_from_fs() provides the
    dict at the composition root.
    """

    def __init__(self, config_dict: dict[str, object] | None = None) -> None:
        self._config: dict[str, object] = dict(config_dict or {})
        self._severity = self._parse_severity(self._config.get("severity"))

    @staticmethod
    def _parse_severity(raw: object) -> DiagnosticSeverity:
        if raw is None:
            return DiagnosticSeverity.ERROR
        if isinstance(raw, str):
            try:
                return DiagnosticSeverity.from_name(raw)
            except KeyError:
                pass
        logger.warning(
            "Configuration Warning: unknown severity %r, using 'error'.", raw
        )
        return DiagnosticSeverity.ERROR

    @property
    def severity(self) -> DiagnosticSeverity:
        """Severity stamped on every diagnostic for the lifetime of the process."""
        return self._severity

    @property
    def exclude(self) -> list[str]:
        """Glob patterns of paths skipped while walking directories."""
        raw = self._config.get("exclude", [])
        if isinstance(raw, list):
            return [str(x) for x in raw if isinstance(x, str)]
        return []

    @property
    def file_extensions(self) -> tuple[str, ...]:
        raw = self._config.get("file_extensions")
        if isinstance(raw, list) and raw:
            return tuple(str(x) for x in raw if isinstance(x, str))
        return DEFAULT_FILE_EXTENSIONS
