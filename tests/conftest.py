"""Shared pytest fixtures for test files."""

from __future__ import annotations

from pathlib import Path

import pytest

from last_access_scanner.config import ENV_FILE_VAR, MAX_DEPTH_VAR, SKIP_HIDDEN_VAR


@pytest.fixture(autouse=True)
def isolated_env(tmp_path_factory, monkeypatch):
    """Keep the user's LAS_* settings and ~/.env out of every test."""
    env_dir = tmp_path_factory.mktemp("env")
    env_file = env_dir / ".env"
    env_file.write_text("")
    monkeypatch.setenv(ENV_FILE_VAR, str(env_file))
    monkeypatch.delenv(MAX_DEPTH_VAR, raising=False)
    monkeypatch.delenv(SKIP_HIDDEN_VAR, raising=False)
    yield env_file


@pytest.fixture(name="sample_tree")
def fixture_sample_tree(tmp_path) -> Path:
    """Create a small tree:

    scan_root/
        a.txt
        .git/config
        docs/guide.md
        docs/deep/notes.txt
    """
    root = tmp_path / "scan_root"
    (root / ".git").mkdir(parents=True)
    (root / ".git" / "config").write_text("[core]\n")
    (root / "docs" / "deep").mkdir(parents=True)
    (root / "docs" / "guide.md").write_text("# guide\n")
    (root / "docs" / "deep" / "notes.txt").write_text("notes\n")
    (root / "a.txt").write_text("a\n")
    return root

