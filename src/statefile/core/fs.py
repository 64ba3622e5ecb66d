"""Async filesystem primitives used by Config.

Each call opens and releases its own handle. Blocking work runs on a worker
thread through anyio, so callers under asyncio or trio never block the loop.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from typing import Any

import anyio
from anyio import to_thread


@dataclass(frozen=True)
class AccessResult:
    """Outcome of a permission check. ``error`` holds the cause on failure."""

    ok: bool
    error: OSError | None = None

    def __bool__(self) -> bool:
        return self.ok


async def access(path: str, mode: int) -> None:
    """Raise PermissionError or FileNotFoundError unless ``mode`` is granted."""
    if not await to_thread.run_sync(os.path.lexists, path):
        raise FileNotFoundError(2, "No such file or directory", path)
    if not await to_thread.run_sync(os.access, path, mode):
        raise PermissionError(13, "Permission denied", path)


async def check_access(path: str, mode: int) -> AccessResult:
    try:
        await access(path, mode)
    except OSError as e:
        return AccessResult(ok=False, error=e)
    return AccessResult(ok=True)


async def read_file(path: str) -> str:
    return await anyio.Path(path).read_text(encoding="utf-8")


async def read_json(path: str) -> Any:
    return json.loads(await read_file(path))


async def write_file(path: str, data: str) -> None:
    await anyio.Path(path).write_text(data, encoding="utf-8")


async def mkdirp(path: str) -> None:
    await anyio.Path(path).mkdir(parents=True, exist_ok=True)


async def stat(path: str) -> os.stat_result:
    return await anyio.Path(path).stat()


async def unlink(path: str) -> None:
    await anyio.Path(path).unlink()
