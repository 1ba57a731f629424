"""CLI entry points for jakarta-cdi-lint - Thin Controller using Typer."""

import logging
from dataclasses import dataclass
from pathlib import Path

import typer

from jakarta_cdi_lint.domain.config import ConfigurationLoader
from jakarta_cdi_lint.domain.protocols import GuidanceServiceProtocol
from jakarta_cdi_lint.interface.reporters import DiagnosticReporter
from jakarta_cdi_lint.use_cases.collect_diagnostics import CollectDiagnosticsUseCase

EXIT_CLEAN = 0
EXIT_DIAGNOSTICS = 1
EXIT_ERRORS = 2


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    config_loader: ConfigurationLoader
    collect_use_case: CollectDiagnosticsUseCase
    reporter: DiagnosticReporter
    guidance_service: GuidanceServiceProtocol


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def configure_logging(verbose: bool) -> None:
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
            force=True,
        )

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name="jakarta-cdi-lint",
            help="Jakarta CDI diagnostics for Java sources. Run 'jakarta-cdi-lint check PATH'.",
            add_completion=False,
        )

        @app.command()
        def check(
            path: Path = typer.Argument(..., help="Java file or directory to scan"),  # noqa: B008
            output_format: str = typer.Option(
                "text", "--format", help="Output format: text or json"),
            verbose: bool = typer.Option(
                False, "--verbose", "-v", help="Log debug output to stderr"),
        ) -> None:
            """Scan Java sources and report managed bean diagnostics."""
            CLIAppFactory.configure_logging(verbose)
            if output_format not in ("text", "json"):
                typer.echo(f"Unknown format: {output_format}", err=True)
                raise typer.Exit(code=EXIT_ERRORS)
            try:
                results = deps.collect_use_case.execute(str(path))
            except FileNotFoundError as exc:
                typer.echo(str(exc), err=True)
                raise typer.Exit(code=EXIT_ERRORS) from exc

            deps.reporter.report(results, output_format=output_format)
            if any(r.diagnostics for r in results):
                raise typer.Exit(code=EXIT_DIAGNOSTICS)
            if any(r.error is not None or r.aborted for r in results):
                raise typer.Exit(code=EXIT_ERRORS)

        @app.command()
        def rules() -> None:
            """List the rules known to the registry."""
            for rule_id, entry in sorted(deps.guidance_service.get_registry().items()):
                typer.echo(f"{rule_id}: {entry.get('short_description', '')}")

        @app.command()
        def explain(
            rule: str = typer.Argument(..., help="Rule id or symbol"),
        ) -> None:
            """Show the registry entry for a rule."""
            entry = deps.guidance_service.get_entry(rule)
            if entry is None:
                typer.echo(f"Unknown rule: {rule}", err=True)
                raise typer.Exit(code=EXIT_ERRORS)
            typer.echo(entry.get("display_name", rule))
            typer.echo("")
            typer.echo(f"Message: {entry.get('message_template', '')}")
            typer.echo(f"Severity: {deps.config_loader.severity.name.lower()}")
            if entry.get("manual_instructions"):
                typer.echo(f"Fix: {entry['manual_instructions']}")
            for ref in entry.get("references", []):
                typer.echo(f"See: {ref}")

        return app
