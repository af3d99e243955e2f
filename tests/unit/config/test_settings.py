"""Unit tests for environment-based settings."""

from pathlib import Path

import pytest

from awto.config import Settings, get_settings
from awto.config.settings import DEFAULT_BUILD_COMMAND


@pytest.mark.unit
class TestSettingsDefaults:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for var in ("AWTO_PROJECT_ROOT", "AWTO_BUILD_ENABLED", "LOG_LEVEL"):
            monkeypatch.delenv(var, raising=False)

        settings = Settings(_env_file=None)

        assert settings.project_root == Path(".")
        assert settings.workspace_manifest == "awto.yml"
        assert settings.build_command == DEFAULT_BUILD_COMMAND
        assert settings.build_enabled is True
        assert settings.LOG_LEVEL == "INFO"


@pytest.mark.unit
class TestSettingsFromEnvironment:
    def test_prefixed_variables_override_defaults(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        monkeypatch.setenv("AWTO_PROJECT_ROOT", str(tmp_path))
        monkeypatch.setenv("AWTO_BUILD_ENABLED", "false")
        monkeypatch.setenv("AWTO_BUILD_COMMAND", "make {package}")

        settings = Settings(_env_file=None)

        assert settings.project_root == tmp_path
        assert settings.build_enabled is False
        assert settings.build_command == "make {package}"

    def test_log_level_is_read_without_prefix_and_uppercased(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("LOG_LEVEL", "debug")

        assert Settings(_env_file=None).LOG_LEVEL == "DEBUG"

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()
