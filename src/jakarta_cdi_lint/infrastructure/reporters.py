"""Terminal reporter implementation - text and JSON renderings of the wire shape."""

import json

import typer

from jakarta_cdi_lint.domain.entities import Diagnostic, FileDiagnostics
from jakarta_cdi_lint.interface.reporters import DiagnosticReporter


class TerminalDiagnosticReporter(DiagnosticReporter):
    """Writes diagnostics to stdout and parse failures to stderr."""

    def report(self, results: list[FileDiagnostics], output_format: str = "text") -> None:
        if output_format == "json":
            typer.echo(json.dumps([self.to_dict(r) for r in results], indent=2))
            return
        for result in results:
            if result.error is not None:
                typer.echo(f"{result.path}: error: {result.error}", err=True)
                continue
            for diagnostic in result.diagnostics:
                typer.echo(self.format_line(result.path, diagnostic))
            if result.aborted:
                typer.echo(f"{result.path}: scan aborted, results may be incomplete", err=True)
        total = sum(len(r.diagnostics) for r in results)
        typer.echo(f"{total} diagnostic(s) in {len(results)} file(s)")

    @staticmethod
    def format_line(path: str, diagnostic: Diagnostic) -> str:
        """path:line:col (1-based) severity [source] message."""
        start = diagnostic.range.start
        severity = diagnostic.severity.name.lower() if diagnostic.severity else "unknown"
        return (
            f"{path}:{start.line + 1}:{start.col + 1}: {severity} "
            f"[{diagnostic.source}] {diagnostic.message}"
        )

    @staticmethod
    def to_dict(result: FileDiagnostics) -> dict[str, object]:
        return {
            "path": result.path,
            "diagnostics": [d.to_dict() for d in result.diagnostics],
            "error": result.error,
            "aborted": result.aborted,
        }
