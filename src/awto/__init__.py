"""
awto - schema-to-package compiler.

Compiles the models registered in a ``schema`` package into a generated
``database`` package that binds each model to the ORM runtime.

Usage in a schema package:
    >>> import awto
    >>> awto.register_schemas(UserAccount, Invoice)
"""

__version__ = "0.1.0"

from awto.schema import register_schemas

__all__ = ["__version__", "register_schemas"]
