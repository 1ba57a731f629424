"""Domain models for rules and their per-step outcomes."""

from dataclasses import dataclass

__all__ = [
    "DiagnosticsCollector",
    "FieldStep",
]

from typing import TYPE_CHECKING, Protocol

from jakarta_cdi_lint.domain.errors import PositionResolutionFailure

if TYPE_CHECKING:
    from jakarta_cdi_lint.domain.entities import (
        CompilationUnit,
        Diagnostic,
        ScanOutcome,
    )


class DiagnosticsCollector(Protocol):
    """
    Capability shared by every rule: scan a unit and classify its diagnostics.

    collect() appends to a caller-owned list and must not raise; finalize()
    stamps the rule's fixed source tag and severity onto a diagnostic.
    """

    code: str

    def collect(
        self, unit: "CompilationUnit | None", diagnostics: "list[Diagnostic]"
    ) -> "ScanOutcome":
        ...

    def finalize(self, diagnostic: "Diagnostic") -> "Diagnostic":
        ...


@dataclass(frozen=True)
class FieldStep:
    """Outcome of evaluating one field: a diagnostic, nothing, or a failure."""

    diagnostic: "Diagnostic | None" = None
    error: PositionResolutionFailure | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None
