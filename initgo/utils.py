"""Shared utility functions for initgo.

Provides async command execution and Rich-based console reporting.  All
progress output of the tool goes through the module-level ``console`` so
tests and embedding callers can redirect it in one place.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()
err_console = Console(stderr=True)

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    capture: bool = True,
) -> tuple[int, str, str]:
    """Run a command and wait for it to exit.

    Args:
        cmd: Program and arguments.
        cwd: Working directory for the child process.
        capture: Whether to capture stdout/stderr.  When ``False`` the child
            inherits the parent's streams and its output is shown unmodified.

    Returns:
        A ``(returncode, stdout, stderr)`` tuple.  If *capture* is ``False``
        the stdout/stderr strings will be empty.

    Raises:
        FileNotFoundError: If *cmd* names a program that does not exist.
    """
    stdout_pipe = asyncio.subprocess.PIPE if capture else None
    stderr_pipe = asyncio.subprocess.PIPE if capture else None

    process = await asyncio.create_subprocess_exec(
        *cmd,
        stdout=stdout_pipe,
        stderr=stderr_pipe,
        cwd=str(cwd) if cwd else None,
    )
    stdout_bytes, stderr_bytes = await process.communicate()

    stdout_str = (stdout_bytes or b"").decode("utf-8", errors="replace").strip()
    stderr_str = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
    return (process.returncode or 0, stdout_str, stderr_str)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def printable(text: str) -> str:
    """Return *text* with lone surrogates shown as ``\\udcXX`` escapes.

    Names derived from a non UTF-8 directory carry surrogate escapes, which
    no output stream can encode.
    """
    return text.encode("utf-8", "backslashreplace").decode("utf-8")


def print_step(message: str) -> None:
    """Print a plain progress line."""
    console.print(escape(printable(message)))


def print_created(path: str | Path) -> None:
    """Print the per-file confirmation emitted while materializing."""
    console.print(f"  [green]✓[/green] Created {escape(printable(str(path)))}")


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(printable(message))}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message on stderr."""
    err_console.print(f"[bold red]{escape(printable(message))}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(printable(message))}[/bold yellow]")


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, escape(printable(str(value))))

    console.print(table)
    console.print()
