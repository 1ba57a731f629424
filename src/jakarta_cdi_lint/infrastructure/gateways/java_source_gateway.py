"""Java source gateway - javalang parse trees to domain compilation units."""

import logging
from bisect import bisect_left
from collections.abc import Iterator
from pathlib import Path

import javalang.parser  # type: ignore[import-untyped]
import javalang.tokenizer  # type: ignore[import-untyped]
import javalang.tree  # type: ignore[import-untyped]

from jakarta_cdi_lint.domain.entities import (
    CompilationUnit,
    FieldDeclaration,
    SourcePosition,
    TypeDeclaration,
)
from jakarta_cdi_lint.domain.errors import SourceParseError
from jakarta_cdi_lint.domain.protocols import SourceGatewayProtocol

logger = logging.getLogger(__name__)

_TYPE_NODES = (
    javalang.tree.ClassDeclaration,
    javalang.tree.InterfaceDeclaration,
    javalang.tree.EnumDeclaration,
    javalang.tree.AnnotationDeclaration,
)

# Tokens that may follow a declarator name: `x;`, `x = 1`, `x, y`, `x[]`.
_DECLARATOR_FOLLOWERS = frozenset({";", "=", ",", "["})


class JavaSourceGateway(SourceGatewayProtocol):
    """
    Parses Java sources with javalang, which covers the Java 8 grammar.

    Later syntax such as switch expressions, text blocks and instanceof
    patterns raises SourceParseError for the whole file.

    Types are listed like JDT's getAllTypes(): every top-level and member type,
    depth-first in declaration order. Local and anonymous classes are skipped.
    Each variable of a field declaration becomes its own FieldDeclaration whose
    position is the declarator's name token.
    """

    def parse_file(self, file_path: str) -> CompilationUnit:
        try:
            source = Path(file_path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceParseError(file_path, str(exc)) from exc
        return self.parse_source(source, file_path)

    def parse_source(self, source: str, file_path: str = "<string>") -> CompilationUnit:
        try:
            tokens = list(javalang.tokenizer.tokenize(source))
            tree = javalang.parser.Parser(tokens).parse()
        except javalang.tokenizer.LexerError as exc:
            raise SourceParseError(file_path, f"lexer error: {exc}") from exc
        except javalang.parser.JavaSyntaxError as exc:
            raise SourceParseError(file_path, self._describe_syntax_error(exc)) from exc

        token_index = _TokenIndex(tokens)
        types = tuple(
            self._to_type(node, token_index) for node in self._walk_types(tree.types or [])
        )
        logger.debug("Parsed %s: %d type(s)", file_path, len(types))
        return CompilationUnit(
            path=file_path,
            source_lines=tuple(line.rstrip("\r") for line in source.split("\n")),
            types=types,
        )

    @staticmethod
    def _describe_syntax_error(exc: "javalang.parser.JavaSyntaxError") -> str:
        at = getattr(exc, "at", None)
        position = getattr(at, "position", None)
        if position is not None:
            return f"syntax error at line {position.line}: {exc.description}"
        return f"syntax error: {getattr(exc, 'description', exc)}"

    def _walk_types(self, nodes: list[object]) -> Iterator[object]:
        for node in nodes:
            if isinstance(node, _TYPE_NODES):
                yield node
                yield from self._walk_types(self._members(node))

    @staticmethod
    def _members(type_node: object) -> list[object]:
        body = getattr(type_node, "body", None)
        if isinstance(type_node, javalang.tree.EnumDeclaration):
            return list(getattr(body, "declarations", None) or [])
        return list(body or [])

    def _to_type(self, node: object, token_index: "_TokenIndex") -> TypeDeclaration:
        annotations = tuple(a.name for a in (getattr(node, "annotations", None) or []))
        fields: list[FieldDeclaration] = []
        for member in self._members(node):
            if isinstance(member, javalang.tree.FieldDeclaration):
                fields.extend(self._to_fields(member, token_index))
        return TypeDeclaration(
            name=getattr(node, "name", ""),
            annotations=annotations,
            fields=tuple(fields),
        )

    @staticmethod
    def _to_fields(
        member: "javalang.tree.FieldDeclaration", token_index: "_TokenIndex"
    ) -> Iterator[FieldDeclaration]:
        modifiers = frozenset(member.modifiers or ())
        start = getattr(member, "position", None)
        cursor = token_index.first_at(start.line, start.column) if start else None
        for declarator in member.declarators or []:
            position: SourcePosition | None = None
            if cursor is not None:
                found = token_index.find_declarator(declarator.name, cursor)
                if found is not None:
                    position, cursor = found
            yield FieldDeclaration(
                name=declarator.name, position=position, modifiers=modifiers
            )


class _TokenIndex:
    """Ordered token positions for locating name tokens after a member start."""

    def __init__(self, tokens: list[object]) -> None:
        self._tokens = tokens
        self._keys = [(t.position.line, t.position.column) for t in tokens]

    def first_at(self, line: int, column: int) -> int:
        return bisect_left(self._keys, (line, column))

    def find_declarator(
        self, name: str, start: int
    ) -> tuple[SourcePosition, int] | None:
        tokens = self._tokens
        for i in range(start, len(tokens)):
            token = tokens[i]
            if not isinstance(token, javalang.tokenizer.Identifier) or token.value != name:
                continue
            following = tokens[i + 1].value if i + 1 < len(tokens) else ";"
            if following in _DECLARATOR_FOLLOWERS:
                return SourcePosition(token.position.line, token.position.column), i + 1
        return None
