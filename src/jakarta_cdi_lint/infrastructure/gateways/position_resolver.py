"""Maps source positions of model elements to zero-based name ranges."""

import re

from jakarta_cdi_lint.domain.entities import (
    CompilationUnit,
    FieldDeclaration,
    Position,
    Range,
)
from jakarta_cdi_lint.domain.errors import PositionResolutionFailure
from jakarta_cdi_lint.domain.protocols import PositionResolverProtocol


class SourcePositionResolver(PositionResolverProtocol):
    """
    Resolves an element's name token to a Range on the unit's source lines.

    The parser's column is used as a hint; the name is matched against the
    actual line text so tab expansion or off-by-one columns do not shift the
    reported range.
    """

    def resolve(self, unit: CompilationUnit, element: FieldDeclaration) -> Range:
        position = element.position
        if position is None:
            raise PositionResolutionFailure(element.name, "no source position")
        line_index = position.line - 1
        if not 0 <= line_index < len(unit.source_lines):
            raise PositionResolutionFailure(
                element.name,
                f"line {position.line} outside {unit.path} "
                f"({len(unit.source_lines)} lines)",
            )
        col = self._name_column(unit.source_lines[line_index], element.name, position.column - 1)
        return Range(
            start=Position(line_index, col),
            end=Position(line_index, col + len(element.name)),
        )

    @staticmethod
    def _name_column(line_text: str, name: str, hint: int) -> int:
        pattern = re.compile(rf"(?<![\w$]){re.escape(name)}(?![\w$])")
        candidates = [m.start() for m in pattern.finditer(line_text)]
        if not candidates:
            return max(hint, 0)
        return min(candidates, key=lambda c: abs(c - hint))
