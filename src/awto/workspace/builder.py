"""
Build invocation for generated packages.

The default trigger runs a configurable shell-style command in the project
root. The command may reference:
- {python}: the running interpreter
- {package}: the package name (e.g. "database")
- {path}: the package directory relative to the project root
"""

import shlex
import subprocess
import sys
from pathlib import Path
from typing import List, Protocol, Union

from awto.exceptions import BuildError
from awto.utils.logging import get_logger

logger = get_logger(__name__)

# Max length of the stderr excerpt included in build errors
_MAX_STDERR_LENGTH = 2000


class BuildTrigger(Protocol):
    """Protocol for building a generated package."""

    def build(self, package: str) -> None:
        """
        Build the generated package named ``package``.

        Raises:
            BuildError: If the build fails
        """
        ...


class SubprocessBuildTrigger:
    """Build trigger running an external command."""

    def __init__(
        self,
        command: str,
        project_root: Union[str, Path] = ".",
        python: str = sys.executable,
        packages_dir: str = "awto",
    ):
        self.command = command
        self.project_root = Path(project_root)
        self.python = python
        self.packages_dir = packages_dir

    def command_for(self, package: str) -> List[str]:
        """Expand the command template for ``package``."""
        path = f"{self.packages_dir}/{package}"
        return [
            arg.format(python=self.python, package=package, path=path)
            for arg in shlex.split(self.command)
        ]

    def build(self, package: str) -> None:
        cmd = self.command_for(package)
        logger.debug("build.started", package=package, command=cmd)

        try:
            result = subprocess.run(
                cmd,
                cwd=self.project_root,
                capture_output=True,
                text=True,
            )
        except FileNotFoundError as e:
            raise BuildError(
                f"build command not found: {cmd[0]}", path=str(self.project_root)
            ) from e
        except OSError as e:
            raise BuildError(f"could not run build command: {e}") from e

        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            if len(stderr) > _MAX_STDERR_LENGTH:
                stderr = "..." + stderr[-_MAX_STDERR_LENGTH:]
            raise BuildError(
                f"build of package '{package}' failed with exit code "
                f"{result.returncode}" + (f":\n{stderr}" if stderr else "")
            )

        logger.debug("build.finished", package=package)


__all__ = ["BuildTrigger", "SubprocessBuildTrigger"]
