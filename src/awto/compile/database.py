"""
Compilation of the ``database`` package from the app schema.

Stages run strictly in order; the first failure aborts the run:

1. validate_schema_identity - schema/pyproject.toml must declare the name "schema"
2. prepare_workspace_root   - create the shared awto/ directory if missing
3. reset_and_build_package  - extract registered models and regenerate awto/database
4. register_in_workspace    - add awto/database to the workspace manifest
5. trigger_build            - build the generated package

Usage:
    >>> from awto.compile import DatabaseCompiler
    >>> result = DatabaseCompiler(project_root=".").run()
    >>> result.models
    ['UserAccount', 'Invoice']
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import List, Optional, Union

from awto.config import Settings, get_settings
from awto.exceptions import (
    AwtoError,
    BuildError,
    DirectoryCreateError,
    InvalidSchemaNameError,
    MissingSchemaNameError,
    SchemaManifestError,
    SchemaReadError,
    WorkspaceRegistrationError,
)
from awto.utils.logging import bind_context, get_logger
from awto.workspace.builder import BuildTrigger, SubprocessBuildTrigger
from awto.workspace.manifest import ManifestLoadError, load_package_manifest
from awto.workspace.registrar import WorkspaceRegistrar, YamlWorkspaceRegistrar

from .core import (
    AWTO_DIR,
    DATABASE_PACKAGE,
    REQUIRED_SCHEMA_NAME,
    SCHEMA_LIB_PATH,
    SCHEMA_MANIFEST_PATH,
    CompileResult,
)
from .extractor import extract_registered_models
from .materializer import materialize

logger = get_logger(__name__)


class CompileStage(str, Enum):
    """Stages of a compile run, in execution order."""

    VALIDATE_SCHEMA_IDENTITY = "validate_schema_identity"
    PREPARE_WORKSPACE_ROOT = "prepare_workspace_root"
    RESET_AND_BUILD_PACKAGE = "reset_and_build_package"
    REGISTER_IN_WORKSPACE = "register_in_workspace"
    TRIGGER_BUILD = "trigger_build"
    DONE = "done"


class DatabaseCompiler:
    """Compile the database package of a project from its schema package.

    Args:
        project_root: Root directory holding the schema package. Defaults to
            the configured project root
        registrar: Workspace registrar. Defaults to the YAML manifest
            registrar on the configured workspace manifest
        builder: Build trigger. Defaults to the configured build command, or
            no build at all when builds are disabled
        settings: Settings instance (defaults to get_settings())
    """

    package = DATABASE_PACKAGE

    def __init__(
        self,
        project_root: Optional[Union[str, Path]] = None,
        registrar: Optional[WorkspaceRegistrar] = None,
        builder: Optional[BuildTrigger] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.project_root = Path(
            project_root if project_root is not None else self.settings.project_root
        )
        self.registrar = registrar or YamlWorkspaceRegistrar(
            self.project_root / self.settings.workspace_manifest
        )
        if builder is None and self.settings.build_enabled:
            builder = SubprocessBuildTrigger(
                self.settings.build_command,
                project_root=self.project_root,
                packages_dir=AWTO_DIR.as_posix(),
            )
        self.builder = builder
        self.stage: Optional[CompileStage] = None

    @property
    def awto_dir(self) -> Path:
        return self.project_root / AWTO_DIR

    @property
    def package_dir(self) -> Path:
        return self.project_root / self.package.relative_dir

    def _enter(self, stage: CompileStage) -> None:
        self.stage = stage
        logger.debug("compile.stage_started", stage=stage.value)

    def run(self) -> CompileResult:
        """
        Run every stage and return the compile result.

        Raises:
            AwtoError: The first error encountered, with ``stage`` set to the
                stage that failed
        """
        try:
            self._enter(CompileStage.VALIDATE_SCHEMA_IDENTITY)
            self.validate_schema_identity()

            self._enter(CompileStage.PREPARE_WORKSPACE_ROOT)
            self.prepare_workspace_root()

            self._enter(CompileStage.RESET_AND_BUILD_PACKAGE)
            models, files = self.reset_and_build_package()

            self._enter(CompileStage.REGISTER_IN_WORKSPACE)
            self.register_in_workspace()

            self._enter(CompileStage.TRIGGER_BUILD)
            self.trigger_build()
        except AwtoError as e:
            stage = self.stage.value if self.stage else None
            if e.stage is None:
                e.stage = stage
            logger.debug("compile.failed", **e.to_dict())
            raise

        self.stage = CompileStage.DONE
        logger.info("compile.completed", package=self.package.name)
        return CompileResult(
            package=self.package.name,
            package_dir=self.package_dir,
            models=models,
            files=files,
        )

    def validate_schema_identity(self) -> None:
        """Check the schema package name; touches nothing on disk."""
        manifest_path = self.project_root / SCHEMA_MANIFEST_PATH
        try:
            manifest = load_package_manifest(manifest_path)
        except ManifestLoadError as e:
            raise SchemaManifestError(
                f"could not load schema manifest: {e}", path=str(manifest_path)
            ) from e

        if manifest.name is None:
            raise MissingSchemaNameError(REQUIRED_SCHEMA_NAME, path=str(manifest_path))
        if manifest.name != REQUIRED_SCHEMA_NAME:
            raise InvalidSchemaNameError(
                manifest.name, REQUIRED_SCHEMA_NAME, path=str(manifest_path)
            )

    def prepare_workspace_root(self) -> None:
        """Create the shared awto/ directory; an existing one is kept."""
        try:
            self.awto_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DirectoryCreateError(str(self.awto_dir)) from e

    def read_schema_source(self) -> str:
        lib_path = self.project_root / SCHEMA_LIB_PATH
        try:
            return lib_path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            raise SchemaReadError("could not read file", path=str(lib_path)) from e

    def reset_and_build_package(self) -> tuple[List[str], List[Path]]:
        """Extract the registered models and regenerate the package directory."""
        source = self.read_schema_source()
        models = extract_registered_models(
            source, filename=str(self.project_root / SCHEMA_LIB_PATH)
        )
        log = bind_context(package=self.package.name)
        log.debug("package.models_extracted", models=models)

        files = materialize(self.package_dir, models, self.package)
        log.debug("package.materialized", files=[str(f) for f in files])
        return models, files

    def register_in_workspace(self) -> None:
        member = self.package.workspace_member
        try:
            self.registrar.add_package(member)
        except AwtoError:
            raise
        except Exception as e:
            raise WorkspaceRegistrationError(
                f"could not add '{member}' to workspace: {e}"
            ) from e

    def trigger_build(self) -> None:
        if self.builder is None:
            logger.debug("build.skipped", package=self.package.name)
            return
        try:
            self.builder.build(self.package.name)
        except AwtoError:
            raise
        except Exception as e:
            raise BuildError(f"could not build package '{self.package.name}': {e}") from e


def compile_database(
    project_root: Optional[Union[str, Path]] = None,
    settings: Optional[Settings] = None,
) -> CompileResult:
    """Compile the database package with the default collaborators."""
    return DatabaseCompiler(project_root=project_root, settings=settings).run()


__all__ = ["CompileStage", "DatabaseCompiler", "compile_database"]
