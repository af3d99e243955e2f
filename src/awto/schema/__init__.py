"""Runtime side of the schema registration marker."""

from .registry import clear_schemas, get_schema, list_schemas, register_schemas

__all__ = [
    "register_schemas",
    "get_schema",
    "list_schemas",
    "clear_schemas",
]
