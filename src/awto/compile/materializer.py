"""Materialization of a generated package on disk.

The package directory is owned by the compiler: it is deleted and recreated
on every run, so nothing from a previous run survives. There is no rollback;
a failed run leaves the directory in whatever state the failing step left it
and the next successful run resets it.
"""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import List, Sequence

from awto.exceptions import (
    DirectoryCreateError,
    DirectoryDeleteError,
    FileWriteError,
)
from awto.utils.logging import get_logger

from .core import DATABASE_PACKAGE, PackageLayout
from .lib_generator import render_library

logger = get_logger(__name__)


def reset_directory(path: Path) -> None:
    """Delete ``path`` recursively if it exists.

    Raises:
        DirectoryDeleteError: If the directory cannot be removed
    """
    if not path.exists() and not path.is_symlink():
        return
    try:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()
    except OSError as exc:
        raise DirectoryDeleteError(str(path)) from exc
    logger.debug("package.directory_deleted", path=str(path))


def create_directory(path: Path) -> None:
    """Create a single directory whose parent must already exist.

    Raises:
        DirectoryCreateError: If the directory cannot be created
    """
    try:
        path.mkdir()
    except OSError as exc:
        raise DirectoryCreateError(str(path)) from exc


def write_file(path: Path, content: bytes) -> None:
    """Write ``content`` to ``path``.

    Raises:
        FileWriteError: If the file cannot be written
    """
    try:
        path.write_bytes(content)
    except OSError as exc:
        raise FileWriteError(str(path)) from exc
    logger.debug("package.file_written", path=str(path), size=len(content))


def materialize(
    target_dir: Path,
    models: Sequence[str],
    layout: PackageLayout = DATABASE_PACKAGE,
) -> List[Path]:
    """
    Reset ``target_dir`` and write the generated package into it.

    The entry file is rendered before anything is deleted, so a model name
    collision leaves the previous package untouched.

    Args:
        target_dir: Directory of the generated package
        models: Registered model names, in registration order
        layout: Package layout and template payloads

    Returns:
        Paths of every file written, in write order

    Raises:
        ModelNameCollisionError: If two models map to the same module name
        DirectoryDeleteError: If the previous package cannot be removed
        DirectoryCreateError: If a package directory cannot be created
        FileWriteError: If a package file cannot be written
    """
    target_dir = Path(target_dir)
    lib_content = render_library(models).encode("utf-8")

    reset_directory(target_dir)

    create_directory(target_dir)
    create_directory(target_dir / layout.src_dir)
    create_directory(target_dir / layout.module_dir)

    written: List[Path] = []
    for template in layout.templates:
        path = target_dir / template.relative_path
        write_file(path, template.read_bytes(layout.name))
        written.append(path)

    lib_path = target_dir / layout.lib_path
    write_file(lib_path, lib_content)
    written.append(lib_path)

    return written


__all__ = [
    "reset_directory",
    "create_directory",
    "write_file",
    "materialize",
]
