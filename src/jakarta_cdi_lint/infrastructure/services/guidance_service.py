"""GuidanceService: loads the rule registry and answers lookups by rule id or symbol."""

from pathlib import Path
from typing import cast

import yaml

from jakarta_cdi_lint.domain.constants import RULE_PREFIX
from jakarta_cdi_lint.domain.protocols import GuidanceServiceProtocol
from jakarta_cdi_lint.domain.registry_types import RuleRegistryEntry


class GuidanceService(GuidanceServiceProtocol):
    """Loads rule_registry.yaml and provides registry entries for CLI help."""

    def __init__(self, registry_path: str | None = None) -> None:
        if registry_path is not None:
            self._path = Path(registry_path)
        else:
            # Default: packaged resource next to this package
            _base = Path(__file__).resolve().parent.parent.parent
            self._path = _base / "resources" / "rule_registry.yaml"
        self._registry: dict[str, RuleRegistryEntry] = {}
        self._load()

    def _load(self) -> None:
        if self._path.exists():
            with open(self._path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
                self._registry = (
                    cast(dict[str, RuleRegistryEntry],
                         data) if isinstance(data, dict) else {}
                )
        else:
            self._registry = {}

    def get_registry(self) -> dict[str, RuleRegistryEntry]:
        """Return a shallow copy of the loaded registry."""
        return dict(self._registry)

    def get_entry(self, rule: str) -> RuleRegistryEntry | None:
        """Return the registry entry for a rule id (with or without prefix) or symbol."""
        for key in (rule, f"{RULE_PREFIX}{rule}"):
            entry = self._registry.get(key)
            if isinstance(entry, dict):
                return cast(RuleRegistryEntry, dict(entry))
        for e in self._registry.values():
            if isinstance(e, dict) and e.get("symbol") == rule:
                return cast(RuleRegistryEntry, dict(e))
        return None
