"""
Schema-to-package compiler.

This package compiles the models registered in the ``schema`` package into
the generated ``database`` package:
- syntax.py: Typed view of the schema module's top-level statements
- extractor.py: Registered model extraction
- lib_generator.py: Source generation for the package entry file
- materializer.py: Directory reset and file writing
- database.py: Stage orchestration
- templates/: Static files copied into generated packages
"""

from .core import DATABASE_PACKAGE, CompileResult, PackageLayout
from .database import CompileStage, DatabaseCompiler, compile_database
from .extractor import extract_models, extract_registered_models
from .lib_generator import module_names, render_library
from .materializer import materialize
from .syntax import SchemaModule, parse_module

__all__ = [
    "DATABASE_PACKAGE",
    "CompileResult",
    "PackageLayout",
    "CompileStage",
    "DatabaseCompiler",
    "compile_database",
    "extract_models",
    "extract_registered_models",
    "module_names",
    "render_library",
    "materialize",
    "SchemaModule",
    "parse_module",
]
