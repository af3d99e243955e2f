"""Registered model extraction from schema source code.

The schema package registers its persisted models with a single top-level
marker call::

    import awto

    awto.register_schemas(UserAccount, Invoice)

Extraction is a pure function over the typed item list produced by
``awto.compile.syntax``; nothing is imported or executed.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from awto.exceptions import NoRegistrationFoundError
from awto.utils.logging import get_logger

from .syntax import ImportItem, InvocationItem, SchemaModule, TokenKind, parse_module

logger = get_logger(__name__)

MARKER_NAME = "register_schemas"
MARKER_QUALIFIED_NAMES = frozenset(
    {
        "awto.register_schemas",
        "awto.schema.register_schemas",
        "awto.schema.registry.register_schemas",
    }
)
# Spellings accepted without resolving imports
MARKER_SPELLINGS = frozenset({"awto.register_schemas", MARKER_NAME})


def resolve_name(invocation: InvocationItem, bindings: Dict[str, str]) -> str:
    """Resolve an invocation path through the import bindings seen so far."""
    head, *rest = invocation.path
    target = bindings.get(head)
    if target is None:
        return invocation.name
    return ".".join([target, *rest])


def is_marker(invocation: InvocationItem, bindings: Dict[str, str]) -> bool:
    """Check whether an invocation is the registration marker."""
    if invocation.name in MARKER_SPELLINGS:
        return True
    return resolve_name(invocation, bindings) in MARKER_QUALIFIED_NAMES


def find_registrations(module: SchemaModule) -> List[InvocationItem]:
    """Return every marker invocation in a top-down scan of top-level items."""
    bindings: Dict[str, str] = {}
    matches: List[InvocationItem] = []
    for item in module.items:
        if isinstance(item, InvocationItem):
            if is_marker(item, bindings):
                matches.append(item)
        elif isinstance(item, ImportItem):
            bindings[item.local] = item.target
    return matches


def models_of(invocation: InvocationItem) -> List[str]:
    """Collect the bare identifier arguments of an invocation, in order."""
    return [token.text for token in invocation.arguments if token.kind is TokenKind.IDENT]


def extract_models(module: SchemaModule) -> List[str]:
    """
    Extract the registered model names from a parsed schema module.

    Only the first marker invocation is used; later ones are reported with a
    warning and otherwise ignored.

    Raises:
        NoRegistrationFoundError: If the module contains no marker invocation
    """
    matches = find_registrations(module)
    if not matches:
        raise NoRegistrationFoundError(path=module.filename)

    first = matches[0]
    for ignored in matches[1:]:
        logger.warning(
            "schema.registration_ignored",
            filename=module.filename,
            lineno=ignored.lineno,
            used_lineno=first.lineno,
        )

    skipped = [t.text for t in first.arguments if t.kind is not TokenKind.IDENT]
    if skipped:
        logger.debug(
            "schema.arguments_skipped",
            filename=module.filename,
            lineno=first.lineno,
            arguments=skipped,
        )
    return models_of(first)


def extract_registered_models(
    schema_source: str, filename: Optional[str] = None
) -> List[str]:
    """
    Parse schema source text and return its registered model names.

    Args:
        schema_source: Source text of the schema package entry file
        filename: File name used in diagnostics

    Returns:
        Model names in the order they appear in the marker invocation

    Raises:
        ParseError: If the source is not valid Python
        NoRegistrationFoundError: If no marker invocation is found

    Example:
        >>> extract_registered_models("import awto\\nawto.register_schemas(A, B)\\n")
        ['A', 'B']
    """
    module = parse_module(schema_source, filename=filename or "<schema>")
    return extract_models(module)


__all__ = [
    "MARKER_NAME",
    "MARKER_QUALIFIED_NAMES",
    "find_registrations",
    "extract_models",
    "extract_registered_models",
]
