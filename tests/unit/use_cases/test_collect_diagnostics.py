"""Unit tests for CollectDiagnosticsUseCase."""

import unittest
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import MagicMock

from jakarta_cdi_lint.domain.config import ConfigurationLoader
from jakarta_cdi_lint.domain.entities import (
    CompilationUnit,
    Diagnostic,
    Position,
    Range,
    ScanOutcome,
)
from jakarta_cdi_lint.domain.errors import PositionResolutionFailure, SourceParseError
from jakarta_cdi_lint.use_cases.collect_diagnostics import CollectDiagnosticsUseCase


def _diagnostic() -> Diagnostic:
    return Diagnostic(range=Range(Position(0, 0), Position(0, 1)), message="m")


class TestCollectDiagnosticsUseCase(unittest.TestCase):
    """Test file discovery and per-file collection."""

    def setUp(self) -> None:
        self.gateway = MagicMock()
        self.gateway.parse_file.side_effect = lambda path: CompilationUnit(path=path)
        self.collector = MagicMock()
        self.collector.collect.return_value = ScanOutcome()
        self.tmp = TemporaryDirectory()
        self.root = Path(self.tmp.name)

    def tearDown(self) -> None:
        self.tmp.cleanup()

    def _use_case(self, config: dict[str, object] | None = None) -> CollectDiagnosticsUseCase:
        return CollectDiagnosticsUseCase(
            source_gateway=self.gateway,
            collector=self.collector,
            config_loader=ConfigurationLoader(config),
        )

    def _touch(self, relative: str) -> Path:
        path = self.root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("class A {}\n", encoding="utf-8")
        return path

    def test_discovers_java_files_sorted(self) -> None:
        b = self._touch("pkg/B.java")
        a = self._touch("A.java")
        self._touch("notes.txt")
        self.assertEqual(self._use_case().discover_files(str(self.root)), sorted([a, b]))

    def test_exclude_patterns(self) -> None:
        kept = self._touch("src/A.java")
        self._touch("src/generated/G.java")
        files = self._use_case({"exclude": ["*/generated/*"]}).discover_files(str(self.root))
        self.assertEqual(files, [kept])

    def test_single_file_target(self) -> None:
        path = self._touch("Only.java")
        self.assertEqual(self._use_case().discover_files(str(path)), [path])

    def test_missing_target(self) -> None:
        with self.assertRaises(FileNotFoundError):
            self._use_case().discover_files(str(self.root / "missing"))

    def test_fresh_list_per_file(self) -> None:
        self._touch("A.java")
        self._touch("B.java")

        def collect(unit, diagnostics):
            diagnostics.append(_diagnostic())
            return ScanOutcome(diagnostics_added=1)

        self.collector.collect.side_effect = collect
        results = self._use_case().execute(str(self.root))

        self.assertEqual([len(r.diagnostics) for r in results], [1, 1])
        lists = [c.args[1] for c in self.collector.collect.call_args_list]
        self.assertIsNot(lists[0], lists[1])

    def test_parse_error_is_recorded_and_scan_continues(self) -> None:
        self._touch("A.java")
        self._touch("B.java")

        def parse(path):
            if path.endswith("A.java"):
                raise SourceParseError(path, "syntax error")
            return CompilationUnit(path=path)

        self.gateway.parse_file.side_effect = parse
        results = self._use_case().execute(str(self.root))

        self.assertEqual(results[0].error, "syntax error")
        self.assertIsNone(results[1].error)
        self.assertEqual(self.collector.collect.call_count, 1)

    def test_aborted_scan_is_flagged(self) -> None:
        path = self._touch("A.java")
        self.collector.collect.return_value = ScanOutcome(
            error=PositionResolutionFailure("x", "gone")
        )
        result = self._use_case().scan_file(str(path))
        self.assertTrue(result.aborted)
