"""Pytest configuration and fixtures."""

import os
import subprocess
from pathlib import Path

import pytest
import structlog

from forgelink.config.settings import get_settings
from forgelink.forges import registry


@pytest.fixture(autouse=True)
def _isolated_state(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Reset cached settings and the forge registry around every test."""
    for key in list(os.environ):
        if key.startswith("FORGELINK_"):
            monkeypatch.delenv(key)
    # Keep a developer's .env out of the settings
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    registry._registry = None
    yield
    get_settings.cache_clear()
    registry._registry = None
    structlog.reset_defaults()


def run(cwd: Path, *args: str) -> str:
    """Run a command in ``cwd`` and return its stdout."""
    result = subprocess.run(list(args), cwd=cwd, capture_output=True, text=True, check=True)
    return result.stdout.strip()


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Create a temporary Git repository with one commit and two remotes."""
    repo_path = tmp_path / "test-repo"
    repo_path.mkdir()

    run(repo_path, "git", "init")
    run(repo_path, "git", "config", "user.email", "test@test.com")
    run(repo_path, "git", "config", "user.name", "Test")

    (repo_path / "src").mkdir()
    (repo_path / "src" / "lib.py").write_text("a = 1\nb = 2\nc = 3\n")
    (repo_path / "README.md").write_text("# Test Repo\n")

    run(repo_path, "git", "add", ".")
    run(repo_path, "git", "commit", "-m", "Initial commit")
    run(repo_path, "git", "remote", "add", "origin", "git@gitlab.com:group/proj.git")

    return repo_path
