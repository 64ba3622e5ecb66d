"""Typer app: inspect and edit a JSON config file from the command line."""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, Optional, TypeVar

import anyio
import typer

from statefile.core.config import Config, ConfigOptions
from statefile.core.errors import ConfigError
from statefile.utils.output import error, info, output, output_fields, success

app = typer.Typer(
    name="statefile",
    help="Read and write JSON config and state files for a project or the current user.",
    no_args_is_help=True,
)

FORMAT_OPTION = typer.Option(None, "--format", "-F", help="Output format: json or text")
DEFAULT_FILENAME = "config.json"

T = TypeVar("T")


@app.callback()
def main(
    ctx: typer.Context,
    filename: str = typer.Option(DEFAULT_FILENAME, "--file", "-f", help="Config filename"),
    is_global: bool = typer.Option(False, "--global", "-g", help="Use the config in the home directory"),
    is_state: bool = typer.Option(False, "--state", "-s", help="Nest a local config in the state folder"),
    file_path: Optional[str] = typer.Option(None, "--path", "-p", help="Sub-directory below the root"),
    root_folder: Optional[str] = typer.Option(None, "--root", help="Root folder override"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    if verbose:
        from rich.logging import RichHandler

        logging.basicConfig(level=logging.DEBUG, format="%(message)s", handlers=[RichHandler(show_path=False)])
    ctx.obj = ConfigOptions(
        filename=filename,
        is_global=is_global,
        is_state=is_state,
        file_path=file_path,
        root_folder=root_folder,
    )


def _run(func: Callable[..., Awaitable[T]], *args: Any) -> T:
    """Run an async command body, turning config and I/O errors into exit code 1."""
    try:
        return anyio.run(func, *args)
    except (ConfigError, OSError, ValueError) as e:
        error(str(e))
        raise typer.Exit(1)


def _parse_value(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


async def _load(options: ConfigOptions) -> Config:
    config = await Config.create(options)
    await config.read()
    return config


@app.command()
def path(ctx: typer.Context) -> None:
    """Print the resolved config file path."""

    async def _path() -> str:
        config = await Config.create(ctx.obj)
        return config.get_path()

    print(_run(_path))


@app.command()
def show(ctx: typer.Context, fmt: Optional[str] = FORMAT_OPTION) -> None:
    """Show the whole config file."""
    config = _run(_load, ctx.obj)
    contents = config.get_contents()
    if fmt != "json" and not contents:
        info("No configuration values set.")
        return
    output(contents, fmt=fmt)


@app.command()
def get(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Configuration key"),
    fmt: Optional[str] = FORMAT_OPTION,
) -> None:
    """Get a configuration value."""
    config = _run(_load, ctx.obj)
    value = config.get(key)
    if fmt == "json":
        output({"key": key, "value": value}, fmt="json")
    elif not config.has(key):
        info(f"{key}: (not set)")
    else:
        info(f"{key}: {json.dumps(value)}")


@app.command("set")
def set_value(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Configuration key"),
    value: str = typer.Argument(..., help="Value to set, parsed as JSON when possible"),
    fmt: Optional[str] = FORMAT_OPTION,
) -> None:
    """Set a configuration value and write the file."""
    parsed = _parse_value(value)

    async def _set() -> Config:
        config = await _load(ctx.obj)
        config.set(key, parsed)
        await config.write()
        return config

    _run(_set)
    if fmt == "json":
        output({"key": key, "value": parsed}, fmt="json")
    else:
        success(f"{key} = {json.dumps(parsed)}")


@app.command()
def unset(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Configuration key"),
) -> None:
    """Remove a configuration value."""

    async def _unset() -> bool:
        config = await _load(ctx.obj)
        if not config.unset(key):
            return False
        await config.write()
        return True

    if not _run(_unset):
        error(f"Key not set: {key}")
        raise typer.Exit(1)
    success(f"Removed {key}")


@app.command()
def exists(ctx: typer.Context, fmt: Optional[str] = FORMAT_OPTION) -> None:
    """Exit 0 if the config file exists and is readable, 1 otherwise."""

    async def _exists() -> tuple[str, bool]:
        config = await Config.create(ctx.obj)
        return config.get_path(), await config.exists()

    config_path, found = _run(_exists)
    if fmt == "json":
        output({"path": config_path, "exists": found}, fmt="json")
    else:
        info(f"{config_path}: {'exists' if found else 'missing'}")
    if not found:
        raise typer.Exit(1)


@app.command()
def stat(ctx: typer.Context, fmt: Optional[str] = FORMAT_OPTION) -> None:
    """Show file metadata for the config file."""

    async def _stat() -> tuple[str, os.stat_result]:
        config = await Config.create(ctx.obj)
        return config.get_path(), await config.stat()

    config_path, st = _run(_stat)
    modified = datetime.fromtimestamp(st.st_mtime, tz=timezone.utc).isoformat()
    fields = {
        "path": config_path,
        "size": st.st_size,
        "mode": oct(st.st_mode & 0o777),
        "modified": modified,
    }
    output_fields(fields, fmt=fmt)


@app.command()
def rm(ctx: typer.Context) -> None:
    """Delete the config file."""

    async def _rm() -> str:
        config = await Config.create(ctx.obj)
        await config.unlink()
        return config.get_path()

    removed = _run(_rm)
    success(f"Deleted {removed}")


if __name__ == "__main__":
    app()
