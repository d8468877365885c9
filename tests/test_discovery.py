"""Tests for source file discovery."""

import os
from pathlib import Path

import pytest

from cyclospace.config import AnalysisConfig
from cyclospace.discovery import discover_files, should_skip_file
from cyclospace.exceptions import InvalidPathError


@pytest.fixture
def tree(tmp_path):
    """Small mixed-language project."""
    files = [
        "main.py",
        "lib/util.rs",
        "lib/helper.c",
        "web/app.js",
        "web/app.min.js",
        "web/node_modules/dep/index.js",
        ".hidden/secret.py",
        "notes.txt",
        "proto/msg_pb2.py",
    ]
    for rel in files:
        path = tmp_path / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("x = 1\n")
    return tmp_path


def rel(paths, root):
    return [p.relative_to(root).as_posix() for p in paths]


class TestShouldSkipFile:
    def test_matches_glob(self):
        assert should_skip_file(Path("web/app.min.js"), ["*.min.js"])
        assert not should_skip_file(Path("web/app.js"), ["*.min.js"])


class TestDiscoverFiles:
    """Walking, filtering and limits."""

    def test_default_filters(self, tree):
        found = discover_files([tree], AnalysisConfig())
        assert rel(found, tree) == ["lib/helper.c", "lib/util.rs", "main.py", "web/app.js"]

    def test_hidden_allowed(self, tree):
        found = discover_files([tree], AnalysisConfig(allow_hidden_files=True))
        assert ".hidden/secret.py" in rel(found, tree)

    def test_language_filter(self, tree):
        found = discover_files([tree], AnalysisConfig(languages=["rust", "c"]))
        assert rel(found, tree) == ["lib/helper.c", "lib/util.rs"]

    def test_explicit_file(self, tree):
        found = discover_files([tree / "web" / "app.js"], AnalysisConfig())
        assert found == [tree / "web" / "app.js"]

    def test_unknown_extension_dropped(self, tree):
        assert discover_files([tree / "notes.txt"], AnalysisConfig()) == []

    def test_duplicates_collapsed(self, tree):
        found = discover_files([tree / "main.py", tree], AnalysisConfig())
        assert rel(found, tree).count("main.py") == 1

    def test_missing_path(self, tmp_path):
        with pytest.raises(InvalidPathError):
            discover_files([tmp_path / "missing"], AnalysisConfig())

    def test_max_files(self, tree):
        found = discover_files([tree], AnalysisConfig(max_files=2))
        assert rel(found, tree) == ["lib/helper.c", "lib/util.rs"]

    def test_size_limit(self, tree):
        (tree / "big.py").write_text("x = 1\n" * 400_000)
        found = discover_files([tree], AnalysisConfig(max_file_size_mb=1))
        assert "big.py" not in rel(found, tree)
        assert "main.py" in rel(found, tree)

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_symlinks_skipped_by_default(self, tree):
        (tree / "link.py").symlink_to(tree / "main.py")
        assert "link.py" not in rel(discover_files([tree], AnalysisConfig()), tree)
        found = discover_files([tree], AnalysisConfig(follow_symlinks=True))
        assert "link.py" in rel(found, tree)
