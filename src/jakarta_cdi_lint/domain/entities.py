from dataclasses import dataclass, field, replace
from enum import IntEnum


class DiagnosticSeverity(IntEnum):
    """Diagnostic severity, numbered like the Language Server Protocol."""
    ERROR = 1
    WARNING = 2
    INFORMATION = 3
    HINT = 4

    @classmethod
    def from_name(cls, name: str) -> "DiagnosticSeverity":
        """Look up a severity by case-insensitive name (e.g. 'warning')."""
        return cls[name.strip().upper()]


@dataclass(frozen=True)
class SourcePosition:
    """1-based line/column token as produced by the source parser."""
    line: int
    column: int


@dataclass(frozen=True)
class Position:
    """Zero-based line/column pair."""
    line: int
    col: int

    def to_dict(self) -> dict[str, int]:
        return {"line": self.line, "col": self.col}


@dataclass(frozen=True)
class Range:
    start: Position
    end: Position

    def to_dict(self) -> dict[str, dict[str, int]]:
        return {"start": self.start.to_dict(), "end": self.end.to_dict()}


@dataclass(frozen=True)
class FieldDeclaration:
    """One declared field variable together with the modifiers of its declaration."""
    name: str
    position: SourcePosition | None = None
    modifiers: frozenset[str] = field(default_factory=frozenset)

    @property
    def is_public(self) -> bool:
        return "public" in self.modifiers

    @property
    def is_static(self) -> bool:
        return "static" in self.modifiers


@dataclass(frozen=True)
class TypeDeclaration:
    """
    A class, interface, enum or annotation type.

    annotations holds the annotation names exactly as written in source
    (simple or qualified); the same name may appear more than once.
    """
    name: str
    annotations: tuple[str, ...] = ()
    fields: tuple[FieldDeclaration, ...] = ()


@dataclass(frozen=True)
class CompilationUnit:
    """Parsed representation of one source file."""
    path: str
    source_lines: tuple[str, ...] = ()
    types: tuple[TypeDeclaration, ...] = ()


@dataclass(frozen=True)
class Diagnostic:
    """
    A positioned finding.

    Diagnostics are never mutated; rules stamp source and severity through
    finalize(), which returns a new instance.
    """
    range: Range
    message: str
    source: str | None = None
    severity: DiagnosticSeverity | None = None

    def with_classification(
        self, source: str, severity: DiagnosticSeverity
    ) -> "Diagnostic":
        return replace(self, source=source, severity=severity)

    def to_dict(self) -> dict[str, object]:
        """Wire shape consumed by the reporting channel."""
        return {
            "range": self.range.to_dict(),
            "message": self.message,
            "source": self.source,
            "severity": int(self.severity) if self.severity is not None else None,
        }


@dataclass(frozen=True)
class ScanOutcome:
    """Result of one collect() call over a compilation unit."""
    diagnostics_added: int = 0
    error: Exception | None = None

    @property
    def aborted(self) -> bool:
        return self.error is not None


@dataclass(frozen=True)
class FileDiagnostics:
    """Diagnostics collected for one file, or the reason it could not be scanned."""
    path: str
    diagnostics: tuple[Diagnostic, ...] = ()
    error: str | None = None
    aborted: bool = False
