from typing import TYPE_CHECKING, Any, cast

from jakarta_cdi_lint.domain.config import ConfigurationLoader
from jakarta_cdi_lint.domain.rules.managed_bean import ManagedBeanDiagnosticsCollector
from jakarta_cdi_lint.infrastructure.config_file_loader import ConfigFileLoader
from jakarta_cdi_lint.infrastructure.gateways.java_source_gateway import JavaSourceGateway
from jakarta_cdi_lint.infrastructure.gateways.position_resolver import SourcePositionResolver
from jakarta_cdi_lint.infrastructure.reporters import TerminalDiagnosticReporter
from jakarta_cdi_lint.infrastructure.services.failure_logging import FailureLogger
from jakarta_cdi_lint.infrastructure.services.guidance_service import GuidanceService
from jakarta_cdi_lint.use_cases.collect_diagnostics import CollectDiagnosticsUseCase

if TYPE_CHECKING:
    from jakarta_cdi_lint.domain.protocols import (
        GuidanceServiceProtocol,
        SourceGatewayProtocol,
    )
    from jakarta_cdi_lint.domain.rules import DiagnosticsCollector
    from jakarta_cdi_lint.interface.reporters import DiagnosticReporter


class JakartaLintContainer:
    """Dependency Injection Container for the CDI linter."""

    def __init__(self, config_dict: dict[str, object] | None = None) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults(config_dict)

    def _register_defaults(self, config_dict: dict[str, object] | None) -> None:
        """Register default implementations for protocols."""
        if config_dict is None:
            config_dict = ConfigFileLoader.load_config_from_fs()
        config_loader = ConfigurationLoader(config_dict)
        self.register_singleton("ConfigurationLoader", config_loader)

        source_gateway = JavaSourceGateway()
        self.register_singleton("JavaSourceGateway", source_gateway)
        self.register_singleton("GuidanceService", GuidanceService())

        # Severity is fixed here for the lifetime of the collector.
        collector = ManagedBeanDiagnosticsCollector(
            position_resolver=SourcePositionResolver(),
            failure_logger=FailureLogger(),
            severity=config_loader.severity,
        )
        self.register_singleton("ManagedBeanDiagnosticsCollector", collector)
        self.register_singleton(
            "CollectDiagnosticsUseCase",
            CollectDiagnosticsUseCase(
                source_gateway=source_gateway,
                collector=collector,
                config_loader=config_loader,
            ),
        )
        self.register_singleton("DiagnosticReporter", TerminalDiagnosticReporter())

    def register_singleton(self, key: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        """Retrieve a dependency by key. Prefer explicit get_* methods for type safety."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_config_loader(self) -> ConfigurationLoader:
        return cast(ConfigurationLoader, self.get("ConfigurationLoader"))

    def get_source_gateway(self) -> "SourceGatewayProtocol":
        return cast("SourceGatewayProtocol", self.get("JavaSourceGateway"))

    def get_guidance_service(self) -> "GuidanceServiceProtocol":
        return cast("GuidanceServiceProtocol", self.get("GuidanceService"))

    def get_collector(self) -> "DiagnosticsCollector":
        return cast("DiagnosticsCollector", self.get("ManagedBeanDiagnosticsCollector"))

    def get_collect_use_case(self) -> CollectDiagnosticsUseCase:
        return cast(CollectDiagnosticsUseCase, self.get("CollectDiagnosticsUseCase"))

    def get_reporter(self) -> "DiagnosticReporter":
        return cast("DiagnosticReporter", self.get("DiagnosticReporter"))
