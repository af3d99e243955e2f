"""Source generation for the database package entry file.

The generated ``__init__.py`` re-exports the ORM runtime, pulls in the
bindings produced by the package build hook, and binds one sub-module per
registered model, in registration order.
"""

from __future__ import annotations

import keyword
from typing import Dict, List, Sequence

import awto
from awto.exceptions import InvalidModuleNameError, ModelNameCollisionError
from awto.utils.naming import to_snake_case

GENERATOR_NAME = "awto"

# Names the entry file binds before any model module
RESERVED_MODULE_NAMES = frozenset({"orm", "_app"})


def _check_module_name(model: str, name: str) -> None:
    if not name.isidentifier():
        raise InvalidModuleNameError(model, name, "is not a valid Python identifier")
    if keyword.iskeyword(name):
        raise InvalidModuleNameError(model, name, "is a Python keyword")
    if name in RESERVED_MODULE_NAMES:
        raise InvalidModuleNameError(
            model, name, "is already bound by the generated package"
        )


def module_names(models: Sequence[str]) -> Dict[str, str]:
    """Map each model name to its generated module name, in order.

    Raises:
        InvalidModuleNameError: If a module name is not a usable Python
            identifier or shadows a name the entry file already binds
        ModelNameCollisionError: If two distinct models convert to the same
            module name
    """
    mapping: Dict[str, str] = {}
    owners: Dict[str, List[str]] = {}
    for model in models:
        name = to_snake_case(model)
        _check_module_name(model, name)
        owners.setdefault(name, [])
        if model not in owners[name]:
            owners[name].append(model)
        mapping[model] = name

    for name, models_for_name in owners.items():
        if len(models_for_name) > 1:
            raise ModelNameCollisionError(name, models_for_name)
    return mapping


def render_header() -> str:
    return (
        f"# This file is automatically @generated by {GENERATOR_NAME} "
        f"v{awto.__version__}"
    )


def render_library(models: Sequence[str]) -> str:
    """Generate the database package entry file for the given models.

    Example output for ``["UserAccount"]``::

        # This file is automatically @generated by awto v0.1.0

        from awto import orm  # noqa: F401

        from ._app import *  # noqa: F401,F403


        # UserAccount database model
        user_account = orm.include_model(__name__, "user_account")
    """
    names = module_names(models)

    lines: List[str] = []
    lines.append(render_header())
    lines.append("")
    lines.append("from awto import orm  # noqa: F401")
    lines.append("")
    lines.append("from ._app import *  # noqa: F401,F403")

    for model in models:
        module_name = names[model]
        lines.append("")
        lines.append("")
        lines.append(f"# {model} database model")
        lines.append(f'{module_name} = orm.include_model(__name__, "{module_name}")')

    return "\n".join(lines) + "\n"


__all__ = [
    "GENERATOR_NAME",
    "RESERVED_MODULE_NAMES",
    "module_names",
    "render_header",
    "render_library",
]
