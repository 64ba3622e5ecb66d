"""Path utilities: state folder name, home directory and project root discovery."""

from __future__ import annotations

import os
from pathlib import Path

from anyio import to_thread

from statefile.core.errors import ProjectNotFoundError

STATE_FOLDER = ".statefile"
STATE_FOLDER_ENV = "STATEFILE_STATE_FOLDER"


def state_folder() -> str:
    """Return the hidden state folder name, honoring STATEFILE_STATE_FOLDER."""
    return os.environ.get(STATE_FOLDER_ENV) or STATE_FOLDER


def home_dir() -> Path:
    return Path.home()


def find_project_root(start: Path | None = None, folder: str | None = None) -> Path | None:
    """Walk up from start to find a directory containing the state folder or .git/."""
    marker = folder or state_folder()
    current = (start or Path.cwd()).resolve()
    for parent in [current, *current.parents]:
        if (parent / marker).is_dir():
            return parent
        if (parent / ".git").exists():
            return parent
    return None


async def resolve_project_root(start: Path | None = None) -> Path:
    """Return the project root, raising ProjectNotFoundError if there is none."""
    root = await to_thread.run_sync(find_project_root, start)
    if root is None:
        raise ProjectNotFoundError("Not inside a project directory (no .git or state folder found)")
    return root
