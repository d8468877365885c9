"""Tests for configuration loading."""

import os
from pathlib import Path

import pytest

from cyclospace.config import AnalysisConfig, load_config
from cyclospace.exceptions import CyclospaceError, InvalidConfigError


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep user and project config files out of the tests."""
    home = tmp_path / "home"
    home.mkdir()
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(project)
    for key in list(os.environ):
        if key.startswith("CYCLOSPACE_"):
            monkeypatch.delenv(key)
    return project


class TestAnalysisConfig:
    """Defaults and validation."""

    def test_defaults(self):
        config = AnalysisConfig()
        assert config.workers is None
        assert config.languages is None
        assert config.max_file_size_bytes == 10 * 1024 * 1024
        assert "*.min.js" in config.exclude_patterns
        assert 1 <= config.effective_workers <= 8

    def test_explicit_workers(self):
        assert AnalysisConfig(workers=3).effective_workers == 3

    @pytest.mark.parametrize(
        "kwargs, key",
        [
            ({"workers": 0}, "workers"),
            ({"max_file_size_mb": 0}, "max_file_size_mb"),
            ({"max_files": 0}, "max_files"),
            ({"verbosity": "loud"}, "verbosity"),
            ({"languages": []}, "languages"),
        ],
    )
    def test_invalid_values(self, kwargs, key):
        with pytest.raises(InvalidConfigError) as exc_info:
            AnalysisConfig(**kwargs)
        assert exc_info.value.key == key

    def test_frozen(self):
        config = AnalysisConfig()
        with pytest.raises(AttributeError):
            config.workers = 2


class TestLoadConfig:
    """Merging of files, environment and overrides."""

    def test_no_sources(self):
        assert load_config() == AnalysisConfig()

    def test_project_file(self, isolated_env):
        (isolated_env / "cyclospace.toml").write_text("max_files = 50\nstrict_parsing = true\n")
        config = load_config()
        assert config.max_files == 50
        assert config.strict_parsing is True

    def test_section_table(self, tmp_path):
        path = tmp_path / "custom.toml"
        path.write_text('[cyclospace]\nlanguages = ["rust"]\nworkers = 2\n')
        config = load_config(config_file=path)
        assert config.languages == ["rust"]
        assert config.workers == 2

    def test_explicit_file_overrides_project(self, isolated_env, tmp_path):
        (isolated_env / "cyclospace.toml").write_text("max_files = 50\n")
        path = tmp_path / "custom.toml"
        path.write_text("max_files = 7\n")
        assert load_config(config_file=path).max_files == 7

    def test_missing_file(self, tmp_path):
        with pytest.raises(CyclospaceError, match="not found"):
            load_config(config_file=tmp_path / "nope.toml")

    def test_malformed_file(self, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text("max_files = = 3\n")
        with pytest.raises(CyclospaceError, match="Invalid config file"):
            load_config(config_file=path)

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "unknown.toml"
        path.write_text("colour = 'red'\n")
        with pytest.raises(CyclospaceError, match="Invalid configuration"):
            load_config(config_file=path)

    def test_env_vars(self, monkeypatch):
        monkeypatch.setenv("CYCLOSPACE_WORKERS", "4")
        monkeypatch.setenv("CYCLOSPACE_LANGUAGES", "python, rust")
        monkeypatch.setenv("CYCLOSPACE_FOLLOW_SYMLINKS", "yes")
        monkeypatch.setenv("CYCLOSPACE_MAX_FILE_SIZE_MB", "0.5")
        config = load_config()
        assert config.workers == 4
        assert config.languages == ["python", "rust"]
        assert config.follow_symlinks is True
        assert config.max_file_size_mb == 0.5

    def test_env_var_bad_bool(self, monkeypatch):
        monkeypatch.setenv("CYCLOSPACE_STRICT_PARSING", "maybe")
        with pytest.raises(CyclospaceError, match="CYCLOSPACE_STRICT_PARSING"):
            load_config()

    def test_overrides_beat_env(self, monkeypatch):
        monkeypatch.setenv("CYCLOSPACE_WORKERS", "4")
        assert load_config(workers=2).workers == 2

    def test_none_override_ignored(self, isolated_env):
        (isolated_env / "cyclospace.toml").write_text("workers = 3\n")
        assert load_config(workers=None).workers == 3

    @pytest.mark.parametrize(
        "flags, verbosity",
        [
            ({"verbose": True}, "verbose"),
            ({"quiet": True}, "quiet"),
            ({"verbose": False, "quiet": False}, "normal"),
        ],
    )
    def test_verbosity_flags(self, flags, verbosity):
        assert load_config(**flags).verbosity == verbosity

    def test_config_file_path_is_path(self, tmp_path):
        path = Path(tmp_path) / "empty.toml"
        path.write_text("")
        assert load_config(config_file=path) == AnalysisConfig()
