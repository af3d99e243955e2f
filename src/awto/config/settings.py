"""
Configuration management for awto.

This module provides environment-based configuration using Pydantic
BaseSettings. Values are read from ``AWTO_``-prefixed environment variables
and from an optional ``.env`` file in the current working directory.

Paths of the schema package and of the generated package are fixed by the
compiler; only the project root, workspace manifest name and build command
are configurable.
"""

import os
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SETTINGS_ENV_FILE = Path(os.getenv("AWTO_ENV_FILE", ".env")).expanduser()

DEFAULT_BUILD_COMMAND = "{python} -m pip install --no-deps --editable {path}"


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Environment variables are automatically loaded with the AWTO_ prefix.
    For example, AWTO_PROJECT_ROOT will override the project_root setting.

    Fields without prefix:
    - LOG_LEVEL: Logging level (uppercase)
    """

    LOG_LEVEL: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level (uppercase)",
    )

    project_root: Path = Field(
        default=Path("."),
        description="Root directory of the workspace holding the schema package",
    )
    workspace_manifest: str = Field(
        default="awto.yml",
        description="Workspace manifest file, relative to the project root",
    )
    build_command: str = Field(
        default=DEFAULT_BUILD_COMMAND,
        description=(
            "Command used to build a generated package. Supports the "
            "{python}, {package} and {path} placeholders"
        ),
    )
    build_enabled: bool = Field(
        default=True,
        description="Run the build command after the package is generated",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.upper()

    model_config = SettingsConfigDict(
        env_prefix="AWTO_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()
