"""
Package manifest (``pyproject.toml``) loading.

Only the ``[project]`` table is modelled; every other table is ignored.
"""

import tomllib
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class ManifestLoadError(Exception):
    """Raised when a package manifest cannot be read or validated."""

    def __init__(self, message: str, path: Path):
        self.path = path
        super().__init__(message)


class PackageMetadata(BaseModel):
    """Schema for the ``[project]`` table of a package manifest."""

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = Field(None, description="Distribution name")
    version: Optional[str] = Field(None, description="Package version")


class PackageManifest(BaseModel):
    """Schema for a package manifest file."""

    model_config = ConfigDict(extra="ignore")

    project: Optional[PackageMetadata] = Field(
        None, description="The [project] table, absent for bare manifests"
    )

    @property
    def name(self) -> Optional[str]:
        """Declared package name, or None when no name is declared."""
        if self.project is None:
            return None
        return self.project.name


def load_package_manifest(path: Union[str, Path]) -> PackageManifest:
    """
    Load and validate a ``pyproject.toml`` file.

    Args:
        path: Path of the manifest file

    Returns:
        Validated PackageManifest

    Raises:
        ManifestLoadError: If the file is missing, is not valid TOML, or has
            a malformed [project] table
    """
    path = Path(path)
    try:
        with open(path, "rb") as f:
            raw = tomllib.load(f)
    except FileNotFoundError as e:
        raise ManifestLoadError(f"manifest file not found: {path}", path) from e
    except tomllib.TOMLDecodeError as e:
        raise ManifestLoadError(f"invalid TOML in manifest: {e}", path) from e
    except OSError as e:
        raise ManifestLoadError(f"could not read manifest: {e}", path) from e

    try:
        return PackageManifest.model_validate(raw)
    except ValidationError as e:
        raise ManifestLoadError(f"invalid manifest: {e}", path) from e


__all__ = [
    "ManifestLoadError",
    "PackageMetadata",
    "PackageManifest",
    "load_package_manifest",
]
