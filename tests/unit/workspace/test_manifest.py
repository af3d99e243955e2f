"""Unit tests for package manifest loading."""

from pathlib import Path

import pytest

from awto.workspace.manifest import ManifestLoadError, load_package_manifest


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "pyproject.toml"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.unit
class TestLoadPackageManifest:
    def test_reads_project_name(self, tmp_path: Path) -> None:
        path = _write(tmp_path, '[project]\nname = "schema"\nversion = "0.1.0"\n')

        manifest = load_package_manifest(path)

        assert manifest.name == "schema"
        assert manifest.project.version == "0.1.0"

    def test_other_tables_are_ignored(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path,
            '[build-system]\nrequires = ["hatchling"]\n\n'
            '[project]\nname = "schema"\n\n[tool.ruff]\nline-length = 88\n',
        )

        assert load_package_manifest(path).name == "schema"

    def test_missing_project_table(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "[tool.ruff]\nline-length = 88\n")

        assert load_package_manifest(path).name is None

    def test_missing_name(self, tmp_path: Path) -> None:
        path = _write(tmp_path, '[project]\nversion = "1.0"\n')

        assert load_package_manifest(path).name is None

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ManifestLoadError, match="not found") as exc_info:
            load_package_manifest(tmp_path / "pyproject.toml")
        assert exc_info.value.path == tmp_path / "pyproject.toml"

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "[project\nname = \n")

        with pytest.raises(ManifestLoadError, match="invalid TOML"):
            load_package_manifest(path)

    def test_name_must_be_a_string(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "[project]\nname = 42\n")

        with pytest.raises(ManifestLoadError, match="invalid manifest"):
            load_package_manifest(path)
