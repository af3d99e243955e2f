"""Runtime registry of schema models.

``awto.register_schemas`` is the marker the compiler looks for in the schema
package source. At runtime it records each model class here, keyed by the
module name the compiler generates for it, so that the generated database
package can resolve models with ``awto.orm.include_model``.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from awto.utils.naming import to_snake_case

_SCHEMA_REGISTRY: Dict[str, type] = {}


def register_schemas(*models: type) -> Tuple[type, ...]:
    """Register model classes as persisted entities.

    Registering the same class twice is a no-op; two different classes that
    map to the same module name are rejected.
    """
    for model in models:
        name = to_snake_case(model.__name__)
        existing = _SCHEMA_REGISTRY.get(name)
        if existing is not None and existing is not model:
            raise ValueError(
                f"Schema '{model.__name__}' maps to module '{name}', which is "
                f"already registered by '{existing.__qualname__}'."
            )
        _SCHEMA_REGISTRY[name] = model
    return models


def get_schema(name: str) -> type:
    """Retrieve a registered model by its module name."""
    if name not in _SCHEMA_REGISTRY:
        available = list_schemas()
        raise KeyError(f"Schema '{name}' not found in registry. Available: {available}")
    return _SCHEMA_REGISTRY[name]


def list_schemas() -> List[str]:
    """List all registered module names."""
    return sorted(_SCHEMA_REGISTRY.keys())


def clear_schemas() -> None:
    """Forget every registered model."""
    _SCHEMA_REGISTRY.clear()


__all__ = [
    "register_schemas",
    "get_schema",
    "list_schemas",
    "clear_schemas",
]
