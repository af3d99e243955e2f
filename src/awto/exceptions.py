"""
Exception hierarchy for the awto compiler.

Every failure that can stop a compile run is an ``AwtoError``. Errors carry
the path or identifier involved so that the CLI can report them without a
stack trace; the orchestrator attaches the name of the stage that failed.
"""

from typing import Dict, Optional


class AwtoError(Exception):
    """
    Base exception for all compiler errors.

    Args:
        message: Error description
        path: File or directory involved in the failure (optional)
        stage: Name of the compile stage that failed (optional, usually set
            by the orchestrator)
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        stage: Optional[str] = None,
    ):
        self.message = message
        self.path = path
        self.stage = stage
        super().__init__(message)

    def __str__(self) -> str:
        text = self.message
        if self.path:
            text = f"{text} (path='{self.path}')"
        if self.stage:
            text = f"{self.stage}: {text}"
        return text

    def to_dict(self) -> Dict[str, Optional[str]]:
        """Convert to structured dict for logging."""
        return {
            "error_type": type(self).__name__,
            "stage": self.stage,
            "path": self.path,
            "message": str(self),
        }


class InvalidSchemaNameError(AwtoError):
    """Raised when the schema package declares a name other than the required one."""

    def __init__(self, actual: str, required: str, path: Optional[str] = None):
        self.actual = actual
        self.required = required
        super().__init__(
            f"schema package must be named '{required}' but is named '{actual}'",
            path=path,
        )


class MissingSchemaNameError(AwtoError):
    """Raised when the schema package manifest declares no package name."""

    def __init__(self, required: str, path: Optional[str] = None):
        self.required = required
        super().__init__(f"schema package must be named '{required}'", path=path)


class SchemaManifestError(AwtoError):
    """Raised when the schema package manifest cannot be loaded."""


class SchemaReadError(AwtoError):
    """Raised when the schema source file cannot be read."""


class ParseError(AwtoError):
    """
    Raised when the schema source is not valid Python.

    Args:
        diagnostic: Message reported by the parser
        lineno: Line of the syntax error (optional)
        offset: Column of the syntax error (optional)
        path: Source file name (optional)
    """

    def __init__(
        self,
        diagnostic: str,
        lineno: Optional[int] = None,
        offset: Optional[int] = None,
        path: Optional[str] = None,
    ):
        self.diagnostic = diagnostic
        self.lineno = lineno
        self.offset = offset

        location = ""
        if lineno is not None:
            location = f" at line {lineno}"
            if offset is not None:
                location += f", column {offset}"
        super().__init__(
            f"could not parse schema source code{location}: {diagnostic}",
            path=path,
        )


class NoRegistrationFoundError(AwtoError):
    """Raised when the schema source registers no models."""

    def __init__(self, path: Optional[str] = None):
        super().__init__(
            "no schemas registered with the 'awto.register_schemas' marker\n\n"
            "   Schemas must be registered:\n"
            "      `awto.register_schemas(SchemaOne, SchemaTwo)`",
            path=path,
        )


class ModelNameCollisionError(AwtoError):
    """Raised when two registered models convert to the same module name."""

    def __init__(self, module_name: str, models: list):
        self.module_name = module_name
        self.models = list(models)
        super().__init__(
            f"models {', '.join(repr(m) for m in self.models)} all map to "
            f"the module name '{module_name}'"
        )


class InvalidModuleNameError(AwtoError):
    """Raised when a model converts to a name the generated package cannot bind."""

    def __init__(self, model: str, module_name: str, reason: str):
        self.model = model
        self.module_name = module_name
        super().__init__(
            f"model '{model}' maps to the module name '{module_name}', "
            f"which {reason}"
        )


class DirectoryDeleteError(AwtoError):
    """Raised when the generated package directory cannot be deleted."""

    def __init__(self, path: str):
        super().__init__("could not delete directory", path=path)


class DirectoryCreateError(AwtoError):
    """Raised when a directory cannot be created."""

    def __init__(self, path: str):
        super().__init__("could not create directory", path=path)


class FileWriteError(AwtoError):
    """Raised when a generated file cannot be written."""

    def __init__(self, path: str):
        super().__init__("could not write file", path=path)


class WorkspaceRegistrationError(AwtoError):
    """Raised when a package cannot be added to the workspace manifest."""


class BuildError(AwtoError):
    """Raised when the build of a generated package fails."""


__all__ = [
    "AwtoError",
    "InvalidSchemaNameError",
    "MissingSchemaNameError",
    "SchemaManifestError",
    "SchemaReadError",
    "ParseError",
    "NoRegistrationFoundError",
    "ModelNameCollisionError",
    "InvalidModuleNameError",
    "DirectoryDeleteError",
    "DirectoryCreateError",
    "FileWriteError",
    "WorkspaceRegistrationError",
    "BuildError",
]
