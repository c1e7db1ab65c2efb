"""Shared utility functions for rn-setup.

Provides async command execution, text/JSON file I/O that maps OS failures
onto the setup error taxonomy, and Rich-based progress reporting.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .errors import NotFoundError, ParseError, WriteError

console = Console()
err_console = Console(stderr=True)

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    timeout: int = 120,
    capture: bool = True,
) -> tuple[int, str, str]:
    """Run a command asynchronously.

    Args:
        cmd: List of arguments; the first is the executable.
        cwd: Working directory for the child process.
        timeout: Maximum wall-clock seconds before the process is killed.
        capture: Whether to capture stdout/stderr (if ``False`` they inherit
            the parent's streams, so the operator sees installer output).

    Returns:
        A ``(returncode, stdout, stderr)`` tuple.  A timeout is reported as
        return code ``-1``.

    Raises:
        OSError: If the executable cannot be started.
    """
    stdout_pipe = asyncio.subprocess.PIPE if capture else None
    stderr_pipe = asyncio.subprocess.PIPE if capture else None

    process = await asyncio.create_subprocess_exec(
        *cmd,
        stdout=stdout_pipe,
        stderr=stderr_pipe,
        cwd=str(cwd) if cwd else None,
    )

    try:
        stdout_bytes, stderr_bytes = await asyncio.wait_for(
            process.communicate(), timeout=timeout
        )
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        return (-1, "", f"Command timed out after {timeout}s: {' '.join(cmd)}")

    stdout_str = (stdout_bytes or b"").decode("utf-8", errors="replace").strip()
    stderr_str = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
    return (process.returncode or 0, stdout_str, stderr_str)


# ---------------------------------------------------------------------------
# File I/O
# ---------------------------------------------------------------------------


async def read_text(path: Path, step: str) -> str:
    """Read a required UTF-8 file.

    Raises:
        NotFoundError: If *path* does not exist.
    """
    try:
        return await asyncio.to_thread(path.read_text, encoding="utf-8")
    except FileNotFoundError as exc:
        raise NotFoundError(step, path) from exc


async def write_text(path: Path, content: str, step: str) -> None:
    """Replace the contents of *path*.

    Raises:
        WriteError: If the file or its directory is not writable.
    """
    try:
        await asyncio.to_thread(path.write_text, content, encoding="utf-8")
    except OSError as exc:
        raise WriteError(step, f"cannot write {path}: {exc.strerror or exc}") from exc


async def load_json(path: Path, step: str) -> dict[str, Any]:
    """Load a JSON file whose top level must be an object.

    Raises:
        NotFoundError: If the file does not exist.
        ParseError: If the file is not valid JSON or is not an object.
    """
    raw = await read_text(path, step)
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ParseError(step, f"{path.name} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ParseError(step, f"{path.name} must contain a JSON object")
    return data


async def save_json(data: dict[str, Any], path: Path, step: str) -> None:
    """Write *data* as 2-space indented JSON, keeping key order.

    Missing parent directories are created.

    Raises:
        WriteError: If the directory or file cannot be written.
    """
    content = json.dumps(data, indent=2, ensure_ascii=False)
    try:
        await asyncio.to_thread(path.parent.mkdir, parents=True, exist_ok=True)
    except OSError as exc:
        raise WriteError(step, f"cannot create {path.parent}: {exc.strerror or exc}") from exc
    await write_text(path, content, step)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_step(message: str) -> None:
    """Print a completed-step line."""
    console.print(f"  [green]✓[/green] {escape(message)}", soft_wrap=True)


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]", soft_wrap=True)


def print_error(message: str) -> None:
    """Print a red error message to stderr."""
    err_console.print(f"[bold red]{escape(message)}[/bold red]", soft_wrap=True)


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]", soft_wrap=True)
