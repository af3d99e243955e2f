"""Pytest configuration: temporary schema projects and collaborator fakes."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Generator, List, Optional

import pytest

from awto.config import get_settings
from awto.schema import clear_schemas

DEFAULT_SCHEMA_SOURCE = '''\
"""App schema."""

import awto


class UserAccount:
    pass


class Invoice:
    pass


awto.register_schemas(UserAccount, Invoice)
'''


class FakeRegistrar:
    """Workspace registrar recording the packages it was asked to add."""

    def __init__(self, error: Optional[Exception] = None):
        self.added: List[str] = []
        self.error = error

    def add_package(self, path: str) -> None:
        if self.error is not None:
            raise self.error
        self.added.append(path)


class FakeBuilder:
    """Build trigger recording the packages it was asked to build."""

    def __init__(self, error: Optional[Exception] = None):
        self.built: List[str] = []
        self.error = error

    def build(self, package: str) -> None:
        if self.error is not None:
            raise self.error
        self.built.append(package)


def write_schema_project(
    root: Path,
    source: str = DEFAULT_SCHEMA_SOURCE,
    name: Optional[str] = "schema",
) -> Path:
    """Create schema/pyproject.toml and schema/src/schema/__init__.py under root."""
    schema_dir = root / "schema"
    (schema_dir / "src" / "schema").mkdir(parents=True, exist_ok=True)

    manifest = "[project]\n"
    if name is not None:
        manifest += f'name = "{name}"\n'
    manifest += 'version = "0.1.0"\n'
    (schema_dir / "pyproject.toml").write_text(manifest, encoding="utf-8")
    (schema_dir / "src" / "schema" / "__init__.py").write_text(source, encoding="utf-8")
    return root


@pytest.fixture(autouse=True)
def _isolate_global_state() -> Generator[None, None, None]:
    """Reset the schema registry and the cached settings around each test."""
    clear_schemas()
    get_settings.cache_clear()
    yield
    clear_schemas()
    get_settings.cache_clear()


@pytest.fixture
def schema_project(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a schema package into a fresh project root."""

    def _factory(source: str = DEFAULT_SCHEMA_SOURCE, name: Optional[str] = "schema") -> Path:
        return write_schema_project(tmp_path, source=source, name=name)

    return _factory


@pytest.fixture
def fake_registrar() -> FakeRegistrar:
    return FakeRegistrar()


@pytest.fixture
def fake_builder() -> FakeBuilder:
    return FakeBuilder()
