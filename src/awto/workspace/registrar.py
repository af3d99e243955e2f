"""
Workspace membership management.

The workspace manifest (``awto.yml`` at the project root) lists the packages
that belong to the workspace::

    workspace:
      members:
        - schema
        - awto/database

The compiler only ever appends to this list.
"""

from pathlib import Path
from typing import Any, Dict, List, Protocol, Union

import yaml

from awto.exceptions import WorkspaceRegistrationError
from awto.utils.logging import get_logger

logger = get_logger(__name__)


class WorkspaceRegistrar(Protocol):
    """Protocol for adding packages to the enclosing workspace."""

    def add_package(self, path: str) -> None:
        """
        Record ``path`` as a workspace member.

        Args:
            path: Package directory relative to the project root

        Raises:
            WorkspaceRegistrationError: If the workspace manifest cannot be
                updated
        """
        ...


class YamlWorkspaceRegistrar:
    """Workspace registrar backed by a YAML manifest file."""

    def __init__(self, manifest_path: Union[str, Path]):
        self.manifest_path = Path(manifest_path)

    def _load(self) -> Dict[str, Any]:
        if not self.manifest_path.exists():
            return {}
        try:
            raw = yaml.safe_load(self.manifest_path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise WorkspaceRegistrationError(
                f"invalid YAML in workspace manifest: {e}",
                path=str(self.manifest_path),
            ) from e
        except OSError as e:
            raise WorkspaceRegistrationError(
                "could not read workspace manifest", path=str(self.manifest_path)
            ) from e

        if raw is None:
            return {}
        if not isinstance(raw, dict):
            raise WorkspaceRegistrationError(
                "workspace manifest must be a mapping",
                path=str(self.manifest_path),
            )
        return raw

    def members(self) -> List[str]:
        """List the current workspace members."""
        workspace = self._load().get("workspace") or {}
        return list(workspace.get("members") or [])

    def add_package(self, path: str) -> None:
        config = self._load()
        workspace = config.setdefault("workspace", {})
        if workspace is None:
            workspace = config["workspace"] = {}
        if not isinstance(workspace, dict):
            raise WorkspaceRegistrationError(
                "'workspace' must be a mapping", path=str(self.manifest_path)
            )

        members = workspace.setdefault("members", [])
        if members is None:
            members = workspace["members"] = []
        if not isinstance(members, list):
            raise WorkspaceRegistrationError(
                "'workspace.members' must be a list", path=str(self.manifest_path)
            )

        if path in members:
            logger.debug(
                "workspace.member_exists",
                member=path,
                manifest=str(self.manifest_path),
            )
            return

        members.append(path)
        try:
            self.manifest_path.write_text(
                yaml.safe_dump(config, sort_keys=False, allow_unicode=True),
                encoding="utf-8",
            )
        except OSError as e:
            raise WorkspaceRegistrationError(
                "could not write workspace manifest", path=str(self.manifest_path)
            ) from e

        logger.debug(
            "workspace.member_added", member=path, manifest=str(self.manifest_path)
        )


__all__ = [
    "WorkspaceRegistrar",
    "YamlWorkspaceRegistrar",
]
