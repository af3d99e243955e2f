"""Typed view of a schema module's top-level statements.

The Python ``ast`` is reduced to the three kinds of item the compiler cares
about:

- ``ImportItem``: one local name bound by an ``import`` statement
- ``InvocationItem``: a call used as a statement, e.g. ``awto.register_schemas(A, B)``
- ``OtherItem``: anything else (class and function definitions, assignments...)

Invocation arguments are kept as a flat token list so that callers can
filter identifiers without walking ``ast`` nodes themselves.
"""

from __future__ import annotations

import ast
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple, Union

from awto.exceptions import ParseError


class TokenKind(str, Enum):
    """Classification of an invocation argument."""

    IDENT = "ident"
    OTHER = "other"


@dataclass(frozen=True)
class ArgumentToken:
    """A single positional or keyword argument of an invocation."""

    kind: TokenKind
    text: str


@dataclass(frozen=True)
class ImportItem:
    """A local name bound by an import statement.

    ``import awto`` binds ``awto`` to ``awto``; ``from awto import
    register_schemas as reg`` binds ``reg`` to ``awto.register_schemas``.
    """

    local: str
    target: str
    lineno: int


@dataclass(frozen=True)
class InvocationItem:
    """A call expression used as a top-level statement."""

    path: Tuple[str, ...]
    arguments: Tuple[ArgumentToken, ...]
    lineno: int

    @property
    def name(self) -> str:
        return ".".join(self.path)


@dataclass(frozen=True)
class OtherItem:
    """Any other top-level statement."""

    kind: str
    lineno: int


Item = Union[ImportItem, InvocationItem, OtherItem]


@dataclass
class SchemaModule:
    """Parsed schema module: its top-level items in source order."""

    items: List[Item] = field(default_factory=list)
    filename: str = "<schema>"


def _dotted_path(node: ast.expr) -> Optional[Tuple[str, ...]]:
    """Return ``("a", "b", "c")`` for ``a.b.c``; None for any other expression."""
    parts: List[str] = []
    while isinstance(node, ast.Attribute):
        parts.append(node.attr)
        node = node.value
    if not isinstance(node, ast.Name):
        return None
    parts.append(node.id)
    return tuple(reversed(parts))


def _argument_tokens(call: ast.Call) -> Tuple[ArgumentToken, ...]:
    tokens: List[ArgumentToken] = []
    for arg in call.args:
        if isinstance(arg, ast.Name):
            tokens.append(ArgumentToken(TokenKind.IDENT, arg.id))
        else:
            tokens.append(ArgumentToken(TokenKind.OTHER, ast.unparse(arg)))
    for keyword in call.keywords:
        tokens.append(ArgumentToken(TokenKind.OTHER, ast.unparse(keyword)))
    return tuple(tokens)


def _lower_statement(stmt: ast.stmt) -> List[Item]:
    if isinstance(stmt, ast.Import):
        items: List[Item] = []
        for alias in stmt.names:
            if alias.asname:
                items.append(ImportItem(alias.asname, alias.name, stmt.lineno))
            else:
                # `import a.b` binds `a` only
                head = alias.name.split(".", 1)[0]
                items.append(ImportItem(head, head, stmt.lineno))
        return items

    if isinstance(stmt, ast.ImportFrom):
        # Relative imports cannot name the marker package
        if stmt.level or not stmt.module:
            return [OtherItem("ImportFrom", stmt.lineno)]
        return [
            ImportItem(alias.asname or alias.name, f"{stmt.module}.{alias.name}", stmt.lineno)
            for alias in stmt.names
            if alias.name != "*"
        ]

    if isinstance(stmt, ast.Expr) and isinstance(stmt.value, ast.Call):
        path = _dotted_path(stmt.value.func)
        if path is not None:
            return [InvocationItem(path, _argument_tokens(stmt.value), stmt.lineno)]

    return [OtherItem(type(stmt).__name__, stmt.lineno)]


def parse_module(source: str, filename: str = "<schema>") -> SchemaModule:
    """Parse schema source text into its typed top-level items.

    Raises:
        ParseError: If the source is not valid Python
    """
    # A UTF-8 byte order mark is valid at the start of a Python source file
    source = source.removeprefix("\ufeff")
    try:
        tree = ast.parse(source, filename=filename)
    except SyntaxError as exc:
        raise ParseError(
            exc.msg or str(exc),
            lineno=exc.lineno,
            offset=exc.offset,
            path=filename,
        ) from exc
    except ValueError as exc:
        # ast.parse rejects source containing null bytes with ValueError
        raise ParseError(str(exc), path=filename) from exc

    module = SchemaModule(filename=filename)
    for stmt in tree.body:
        module.items.extend(_lower_statement(stmt))
    return module


__all__ = [
    "TokenKind",
    "ArgumentToken",
    "ImportItem",
    "InvocationItem",
    "OtherItem",
    "Item",
    "SchemaModule",
    "parse_module",
]
