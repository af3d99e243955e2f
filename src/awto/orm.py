"""ORM runtime for generated database packages.

A generated ``database`` package re-exports this module and binds one
sub-module per registered schema model::

    from awto import orm

    user_account = orm.include_model(__name__, "user_account")

Models are SQLAlchemy declarative classes deriving from :class:`Base`.
"""

from __future__ import annotations

import sys
import types
from typing import Any, Optional

import sqlalchemy as sa
from sqlalchemy.orm import DeclarativeBase

from awto.schema import get_schema


class Base(DeclarativeBase):
    """Declarative base shared by all schema models."""


metadata = Base.metadata


def _table_of(model: type) -> Optional[sa.Table]:
    table = getattr(model, "__table__", None)
    return table if isinstance(table, sa.Table) else None


def include_model(package: str, name: str) -> types.ModuleType:
    """Bind the registered model ``name`` as the module ``<package>.<name>``.

    The module exposes:
    - ``Model``: the registered model class
    - ``table``: its SQLAlchemy table (None for unmapped classes)
    - ``select(*criteria)``: a SELECT statement over the model

    Raises:
        KeyError: If no model is registered under ``name``
    """
    model = get_schema(name)
    module = types.ModuleType(
        f"{package}.{name}", f"{model.__name__} database model"
    )

    def select(*criteria: Any) -> sa.Select:
        statement = sa.select(model)
        if criteria:
            statement = statement.where(*criteria)
        return statement

    module.Model = model  # type: ignore[attr-defined]
    module.table = _table_of(model)  # type: ignore[attr-defined]
    module.select = select  # type: ignore[attr-defined]
    module.__all__ = ["Model", "table", "select"]  # type: ignore[attr-defined]

    sys.modules[module.__name__] = module
    return module


__all__ = ["Base", "metadata", "include_model"]
