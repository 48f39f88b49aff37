"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from initgen.config import GeneratorConfig, load_config, parse_python_version
from initgen.exceptions import ConfigError


class TestParsePythonVersion:
    def test_valid(self) -> None:
        assert parse_python_version("3.12") == (3, 12)
        assert parse_python_version(" 3.8 ") == (3, 8)

    @pytest.mark.parametrize("text", ["3", "three.twelve", "2.7", "3.6", "4.0", "3.12.1", ""])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(ConfigError, match="is not valid"):
            parse_python_version(text)


class TestGeneratorConfig:
    def test_with_root_changes_only_root(self, tmp_path: Path) -> None:
        config = GeneratorConfig(root=tmp_path, python_version=(3, 9), sort=False, exclude=("x",))
        child = config.with_root(tmp_path / "child")

        assert child.root == tmp_path / "child"
        assert child.python_version == (3, 9)
        assert child.sort is False
        assert child.exclude == ("x",)
        assert config.root == tmp_path


class TestLoadConfig:
    def test_defaults(self, tmp_path: Path) -> None:
        config = load_config(tmp_path)
        assert config == GeneratorConfig(root=tmp_path)

    def test_pyproject_settings(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text(
            "[tool.initgen]\n"
            'python-version = "3.10"\n'
            "respect-all = false\n"
            "sort = false\n"
            'exclude = ["tests"]\n',
            encoding="utf-8",
        )
        config = load_config(tmp_path / "src", tmp_path)

        assert config.root == tmp_path / "src"
        assert config.python_version == (3, 10)
        assert config.respect_all is False
        assert config.sort is False
        assert config.exclude == ("tests",)

    def test_explicit_values_override_pyproject(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text(
            '[tool.initgen]\npython-version = "3.10"\nsort = false\n', encoding="utf-8"
        )
        config = load_config(tmp_path, python_version="3.11", sort=True)

        assert config.python_version == (3, 11)
        assert config.sort is True

    def test_invalid_toml_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text("[tool.initgen\n", encoding="utf-8")
        assert load_config(tmp_path) == GeneratorConfig(root=tmp_path)

    def test_other_tools_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text("[tool.black]\nline-length = 99\n", encoding="utf-8")
        assert load_config(tmp_path) == GeneratorConfig(root=tmp_path)

    def test_wrong_type_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text('[tool.initgen]\nsort = "yes"\n', encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_unquoted_version_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text(
            "[tool.initgen]\npython-version = 3.10\n", encoding="utf-8"
        )
        with pytest.raises(ConfigError, match="quoted string"):
            load_config(tmp_path)

    def test_warning_with_markup_like_path(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        project_dir = tmp_path / "[" / "x]"
        project_dir.mkdir(parents=True)
        (project_dir / "pyproject.toml").write_text("[tool.initgen\n", encoding="utf-8")

        config = load_config(tmp_path, project_dir)
        assert config == GeneratorConfig(root=tmp_path)
        assert "Warning" in capsys.readouterr().err

    def test_bad_exclude_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text('[tool.initgen]\nexclude = "tests"\n', encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(tmp_path)
