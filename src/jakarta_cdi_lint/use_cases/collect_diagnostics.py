"""Collect diagnostics use case - scan files or directories with the CDI collector."""

import fnmatch
import logging
from pathlib import Path

from jakarta_cdi_lint.domain.config import ConfigurationLoader
from jakarta_cdi_lint.domain.entities import Diagnostic, FileDiagnostics
from jakarta_cdi_lint.domain.errors import SourceParseError
from jakarta_cdi_lint.domain.protocols import SourceGatewayProtocol
from jakarta_cdi_lint.domain.rules import DiagnosticsCollector

logger = logging.getLogger(__name__)


class CollectDiagnosticsUseCase:
    """Parse each source file and run the collector into a fresh list per file."""

    def __init__(
        self,
        source_gateway: SourceGatewayProtocol,
        collector: DiagnosticsCollector,
        config_loader: ConfigurationLoader,
    ) -> None:
        self._source_gateway = source_gateway
        self._collector = collector
        self._config_loader = config_loader

    def execute(self, target: str) -> list[FileDiagnostics]:
        results: list[FileDiagnostics] = []
        for file_path in self.discover_files(target):
            results.append(self.scan_file(str(file_path)))
        return results

    def scan_file(self, file_path: str) -> FileDiagnostics:
        try:
            unit = self._source_gateway.parse_file(file_path)
        except SourceParseError as exc:
            logger.warning("Skipping %s", exc)
            return FileDiagnostics(path=file_path, error=exc.reason)

        diagnostics: list[Diagnostic] = []
        outcome = self._collector.collect(unit, diagnostics)
        return FileDiagnostics(
            path=file_path,
            diagnostics=tuple(diagnostics),
            aborted=outcome.aborted,
        )

    def discover_files(self, target: str) -> list[Path]:
        """Expand target into source files, sorted, honouring exclude patterns."""
        root = Path(target)
        if root.is_file():
            return [root]
        if not root.is_dir():
            raise FileNotFoundError(f"No such file or directory: {target}")
        extensions = self._config_loader.file_extensions
        return sorted(
            path
            for path in root.rglob("*")
            if path.is_file()
            and path.suffix in extensions
            and not self._is_excluded(path)
        )

    def _is_excluded(self, path: Path) -> bool:
        posix = path.as_posix()
        return any(fnmatch.fnmatch(posix, pattern) for pattern in self._config_loader.exclude)
