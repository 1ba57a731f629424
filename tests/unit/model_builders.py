"""Builders for in-memory compilation units used across unit tests."""

from unittest.mock import MagicMock

from jakarta_cdi_lint.domain.entities import (
    CompilationUnit,
    FieldDeclaration,
    Position,
    Range,
    SourcePosition,
    TypeDeclaration,
)


def make_field(
    name: str = "value",
    modifiers: tuple[str, ...] = ("public",),
    line: int = 3,
    column: int = 19,
) -> FieldDeclaration:
    return FieldDeclaration(
        name=name,
        position=SourcePosition(line, column),
        modifiers=frozenset(modifiers),
    )


def make_type(
    name: str = "Bean",
    annotations: tuple[str, ...] = (),
    fields: tuple[FieldDeclaration, ...] = (),
) -> TypeDeclaration:
    return TypeDeclaration(name=name, annotations=annotations, fields=fields)


def make_unit(*types: TypeDeclaration, path: str = "Bean.java") -> CompilationUnit:
    return CompilationUnit(path=path, source_lines=(), types=tuple(types))


def range_for(field_decl: FieldDeclaration) -> Range:
    """Deterministic range derived from the field's position token."""
    assert field_decl.position is not None
    line = field_decl.position.line - 1
    col = field_decl.position.column - 1
    return Range(Position(line, col), Position(line, col + len(field_decl.name)))


def mock_resolver() -> MagicMock:
    """Position resolver mock that maps every field through range_for."""
    resolver = MagicMock()
    resolver.resolve.side_effect = lambda unit, element: range_for(element)
    return resolver
