"""Unit tests for the Typer CLI."""

import json
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import Mock

from typer.testing import CliRunner

from jakarta_cdi_lint.domain.config import ConfigurationLoader
from jakarta_cdi_lint.domain.entities import (
    Diagnostic,
    DiagnosticSeverity,
    FileDiagnostics,
    Position,
    Range,
)
from jakarta_cdi_lint.infrastructure.reporters import TerminalDiagnosticReporter
from jakarta_cdi_lint.infrastructure.services.guidance_service import GuidanceService
from jakarta_cdi_lint.interface.cli import CLIAppFactory, CLIDependencies

runner = CliRunner()

DIAGNOSTIC = Diagnostic(
    range=Range(Position(6, 18), Position(6, 22)),
    message="A managed bean with a non-static public field must not declare any scope other than @Dependent",
    source="jakarta-cdi",
    severity=DiagnosticSeverity.ERROR,
)


def _make_deps(results: list[FileDiagnostics]) -> CLIDependencies:
    use_case = Mock()
    use_case.execute.return_value = results
    return CLIDependencies(
        config_loader=ConfigurationLoader(),
        collect_use_case=use_case,
        reporter=TerminalDiagnosticReporter(),
        guidance_service=GuidanceService(),
    )


class TestCheckCommand(unittest.TestCase):
    """Test 'check' output and exit codes."""

    def setUp(self) -> None:
        self.tmp = TemporaryDirectory()
        self.path = Path(self.tmp.name)

    def tearDown(self) -> None:
        self.tmp.cleanup()

    def test_text_output_and_exit_one(self) -> None:
        deps = _make_deps([FileDiagnostics("Bean.java", (DIAGNOSTIC,))])
        result = runner.invoke(CLIAppFactory.create_app(deps), ["check", str(self.path)])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Bean.java:7:19: error [jakarta-cdi] A managed bean", result.output)
        self.assertIn("1 diagnostic(s) in 1 file(s)", result.output)
        deps.collect_use_case.execute.assert_called_once_with(str(self.path))

    def test_clean_run_exit_zero(self) -> None:
        deps = _make_deps([FileDiagnostics("Bean.java")])
        result = runner.invoke(CLIAppFactory.create_app(deps), ["check", str(self.path)])
        self.assertEqual(result.exit_code, 0)

    def test_parse_error_exit_two(self) -> None:
        deps = _make_deps([FileDiagnostics("Broken.java", error="syntax error")])
        result = runner.invoke(CLIAppFactory.create_app(deps), ["check", str(self.path)])
        self.assertEqual(result.exit_code, 2)

    def test_json_output(self) -> None:
        deps = _make_deps([FileDiagnostics("Bean.java", (DIAGNOSTIC,))])
        result = runner.invoke(
            CLIAppFactory.create_app(deps), ["check", str(self.path), "--format", "json"]
        )
        payload = json.loads(result.stdout)
        self.assertEqual(payload[0]["path"], "Bean.java")
        self.assertEqual(payload[0]["diagnostics"][0], DIAGNOSTIC.to_dict())

    def test_unknown_format(self) -> None:
        deps = _make_deps([])
        result = runner.invoke(
            CLIAppFactory.create_app(deps), ["check", str(self.path), "--format", "xml"]
        )
        self.assertEqual(result.exit_code, 2)
        deps.collect_use_case.execute.assert_not_called()

    def test_missing_path(self) -> None:
        deps = _make_deps([])
        deps.collect_use_case.execute.side_effect = FileNotFoundError("No such file")
        result = runner.invoke(CLIAppFactory.create_app(deps), ["check", "missing"])
        self.assertEqual(result.exit_code, 2)


class TestRegistryCommands(unittest.TestCase):
    """Test 'rules' and 'explain'."""

    def test_rules_lists_registry(self) -> None:
        result = runner.invoke(CLIAppFactory.create_app(_make_deps([])), ["rules"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("jakarta.managed-bean-public-field", result.output)

    def test_explain_known_rule(self) -> None:
        result = runner.invoke(
            CLIAppFactory.create_app(_make_deps([])), ["explain", "managed-bean-public-field"]
        )
        self.assertEqual(result.exit_code, 0)
        self.assertIn("Severity: error", result.output)
        self.assertIn("cdi-spec-2.0.html#managed_beans", result.output)

    def test_explain_unknown_rule(self) -> None:
        result = runner.invoke(CLIAppFactory.create_app(_make_deps([])), ["explain", "nope"])
        self.assertEqual(result.exit_code, 2)
