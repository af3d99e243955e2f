"""Core types and fixed paths of the awto compiler."""

from __future__ import annotations

from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import List, Tuple

# Schema package (input)
REQUIRED_SCHEMA_NAME = "schema"
SCHEMA_DIR = Path("schema")
SCHEMA_MANIFEST_PATH = SCHEMA_DIR / "pyproject.toml"
SCHEMA_LIB_PATH = SCHEMA_DIR / "src" / "schema" / "__init__.py"

# Workspace root shared by every generated package
AWTO_DIR = Path("awto")

TEMPLATES_PACKAGE = "awto.compile.templates"


@dataclass(frozen=True)
class TemplateFile:
    """A static file copied verbatim into a generated package."""

    resource: str
    relative_path: Path

    def read_bytes(self, package: str) -> bytes:
        templates = resources.files(f"{TEMPLATES_PACKAGE}.{package}")
        return templates.joinpath(self.resource).read_bytes()


@dataclass(frozen=True)
class PackageLayout:
    """Fixed layout of a generated package under the workspace root."""

    name: str
    templates: Tuple[TemplateFile, ...] = ()

    @property
    def relative_dir(self) -> Path:
        return AWTO_DIR / self.name

    @property
    def src_dir(self) -> Path:
        return Path("src")

    @property
    def module_dir(self) -> Path:
        return self.src_dir / self.name

    @property
    def lib_path(self) -> Path:
        return self.module_dir / "__init__.py"

    @property
    def workspace_member(self) -> str:
        """Package path as recorded in the workspace manifest."""
        return self.relative_dir.as_posix()


DATABASE_PACKAGE = PackageLayout(
    name="database",
    templates=(
        TemplateFile("pyproject.toml.tmpl", Path("pyproject.toml")),
        TemplateFile("build.py.tmpl", Path("build.py")),
    ),
)


@dataclass
class CompileResult:
    """Outcome of a successful compile run."""

    package: str
    package_dir: Path
    models: List[str] = field(default_factory=list)
    files: List[Path] = field(default_factory=list)


__all__ = [
    "REQUIRED_SCHEMA_NAME",
    "SCHEMA_DIR",
    "SCHEMA_MANIFEST_PATH",
    "SCHEMA_LIB_PATH",
    "AWTO_DIR",
    "TemplateFile",
    "PackageLayout",
    "DATABASE_PACKAGE",
    "CompileResult",
]
