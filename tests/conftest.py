"""Shared fixtures: temp git repos, redirected home directory."""

from __future__ import annotations

from pathlib import Path

import git
import pytest

from statefile.utils.paths import STATE_FOLDER_ENV


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def _default_state_folder(monkeypatch):
    monkeypatch.delenv(STATE_FOLDER_ENV, raising=False)


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """Create a temporary git repository."""
    repo_dir = tmp_path / "project"
    repo_dir.mkdir()
    repo = git.Repo.init(repo_dir)
    # Need at least one commit for HEAD to be valid
    readme = repo_dir / "README.md"
    readme.write_text("# Test\n")
    repo.index.add(["README.md"])
    repo.index.commit("initial")
    return repo_dir


@pytest.fixture
def project_dir(tmp_git_repo: Path, monkeypatch) -> Path:
    """chdir into a temp git repo."""
    monkeypatch.chdir(tmp_git_repo)
    return tmp_git_repo.resolve()


@pytest.fixture
def fake_home(tmp_path: Path, monkeypatch) -> Path:
    """Redirect the home directory to a temp directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home
