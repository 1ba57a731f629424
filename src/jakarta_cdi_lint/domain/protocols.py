from typing import TYPE_CHECKING, Protocol

from jakarta_cdi_lint.domain.registry_types import RuleRegistryEntry

if TYPE_CHECKING:
    from jakarta_cdi_lint.domain.entities import (
        CompilationUnit,
        FieldDeclaration,
        Range,
    )


class PositionResolverProtocol(Protocol):
    """Maps a source-model element to the range of its name token."""

    def resolve(
        self, unit: "CompilationUnit", element: "FieldDeclaration"
    ) -> "Range":
        """Return a zero-based range or raise PositionResolutionFailure."""
        ...


class FailureLoggerProtocol(Protocol):
    def log_failure(self, context_message: str, error: BaseException) -> None:
        """Record an unexpected failure. Must not raise."""
        ...


class SourceGatewayProtocol(Protocol):
    """Turns source files into compilation units. Raises SourceParseError."""

    def parse_file(self, file_path: str) -> "CompilationUnit":
        ...

    def parse_source(self, source: str, file_path: str = "<string>") -> "CompilationUnit":
        ...


class GuidanceServiceProtocol(Protocol):
    def get_registry(self) -> dict[str, RuleRegistryEntry]:
        ...

    def get_entry(self, rule: str) -> RuleRegistryEntry | None:
        ...

