"""Workspace collaborators: package manifests, membership and builds."""

from .builder import BuildTrigger, SubprocessBuildTrigger
from .manifest import (
    ManifestLoadError,
    PackageManifest,
    PackageMetadata,
    load_package_manifest,
)
from .registrar import (
    WorkspaceRegistrar,
    YamlWorkspaceRegistrar,
)

__all__ = [
    "BuildTrigger",
    "SubprocessBuildTrigger",
    "ManifestLoadError",
    "PackageManifest",
    "PackageMetadata",
    "load_package_manifest",
    "WorkspaceRegistrar",
    "YamlWorkspaceRegistrar",
]
