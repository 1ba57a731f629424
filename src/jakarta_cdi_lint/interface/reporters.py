"""Protocol for diagnostic reporting - no infrastructure imports."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from jakarta_cdi_lint.domain.entities import FileDiagnostics


class DiagnosticReporter(Protocol):
    """Protocol for reporting per-file diagnostics."""

    def report(
        self, results: "list[FileDiagnostics]", output_format: str = "text"
    ) -> None:
        """Render diagnostics. output_format: 'text' (default) or 'json'."""
        ...
