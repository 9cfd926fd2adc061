"""Shared utility functions for Exemplar.

Provides JSON output, file-system helpers, identifier helpers and Rich-based
console reporting.
"""

from __future__ import annotations

import asyncio
import json
import re
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape

console = Console()

# ---------------------------------------------------------------------------
# Identifier helpers
# ---------------------------------------------------------------------------


def to_identifier(name: str) -> str:
    """Convert a component name to a valid JavaScript/TypeScript identifier.

    Examples::

        to_identifier("FHECounter")   -> "FHECounter"
        to_identifier("my-contract")  -> "my_contract"
        to_identifier("2Fast")        -> "_2Fast"
    """
    ident = re.sub(r"[^A-Za-z0-9_$]", "_", name)
    if not ident or ident[0].isdigit():
        ident = f"_{ident}"
    return ident


# ---------------------------------------------------------------------------
# JSON output
# ---------------------------------------------------------------------------


def dump_json(data: dict[str, Any] | list[Any]) -> str:
    """Serialise *data* the way every generated JSON file is written."""
    return json.dumps(data, indent=2, ensure_ascii=False, default=str) + "\n"


async def save_json(data: dict[str, Any] | list[Any], path: str | Path) -> None:
    """Save data as pretty-printed JSON.

    Parent directories are created automatically.  The write itself is
    performed in a worker thread to avoid blocking the event loop.

    Args:
        data: Serialisable data (dict or list).
        path: Destination file path.
    """
    await write_text(path, dump_json(data))


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


async def write_text(path: str | Path, content: str) -> Path:
    """Write *content* to *path*, creating parent directories first."""
    file_path = Path(path)
    await asyncio.to_thread(_write_file, file_path, content)
    return file_path


def read_text_if_exists(path: str | Path) -> str:
    """Return the file's text, or an empty string when it does not exist.

    Bytes that are not valid UTF-8 are replaced with U+FFFD, so any payload
    can be scanned.
    """
    file_path = Path(path)
    if not file_path.is_file():
        return ""
    return file_path.read_text(encoding="utf-8", errors="replace")


def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------
# Messages are plain text: ids and paths inside them are escaped, never
# interpreted as markup.


def print_step(message: str) -> None:
    """Print a completed-step line (``+ message``)."""
    console.print(f"  [green]+[/green] {escape(message)}")


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")
