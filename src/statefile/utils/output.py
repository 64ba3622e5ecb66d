"""Console helpers: plain JSON when piped, rich rendering on a terminal.

Messages are escaped before printing, so keys and paths containing
``[...]`` are shown literally instead of being read as rich markup.
"""

from __future__ import annotations

import json
import sys
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()
error_console = Console(stderr=True)


def _resolve_format(fmt: str | None) -> str:
    if fmt is not None:
        return fmt
    return "text" if sys.stdout.isatty() else "json"


def output(data: Any, fmt: str | None = None) -> None:
    """Print data as JSON or as rich-highlighted text."""
    if _resolve_format(fmt) == "json":
        print(json.dumps(data, indent=2, default=str))
    elif isinstance(data, (dict, list)):
        console.print_json(json.dumps(data, default=str))
    else:
        console.print(str(data), markup=False, highlight=False)


def output_fields(fields: dict[str, Any], fmt: str | None = None) -> None:
    """Print name/value pairs: a JSON object, or a two-column table."""
    if _resolve_format(fmt) == "json":
        print(json.dumps(fields, indent=2, default=str))
        return
    table = Table(show_header=False, box=None)
    table.add_column(style="bold")
    table.add_column()
    for name, value in fields.items():
        table.add_row(escape(name), escape(str(value)))
    console.print(table)


def _styled(target: Console, style: str, msg: str, prefix: str = "") -> None:
    target.print(f"{prefix}[{style}]{escape(msg)}[/{style}]")


def error(msg: str) -> None:
    _styled(error_console, "red", msg, prefix="[bold red]Error:[/bold red] ")


def success(msg: str) -> None:
    _styled(console, "green", msg)


def info(msg: str) -> None:
    _styled(console, "dim", msg)
