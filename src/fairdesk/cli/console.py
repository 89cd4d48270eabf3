"""Console construction and error rendering shared by the CLI layer.

Rich is imported lazily so bootstrap paths (``--help``, ``--version``)
keep working, and so the process-level error boundary can still report
a problem when Rich itself is missing.
"""

from __future__ import annotations

import sys
from typing import IO, Any

from fairdesk.exceptions import EnvironmentError, FairdeskError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def make_console(*, stderr: bool = False, file: IO[str] | None = None) -> Any:
    """Create a Rich console on stdout, stderr, or an explicit *file*."""
    console_class = _load_rich_console_class()
    if file is not None:
        return console_class(file=file)
    return console_class(stderr=stderr)


def _escape(text: str) -> str:
    from rich.markup import escape

    return escape(text)


def report_error(error: FairdeskError, target: Any | None = None) -> None:
    """Render *error* as one ``Error:`` line plus an optional ``Hint:`` line.

    *target* is a Rich console; when omitted a stderr console is built,
    falling back to plain stderr output if Rich is unavailable.
    """
    if target is None:
        try:
            target = make_console(stderr=True)
        except EnvironmentError:
            print(f"Error: {error}", file=sys.stderr)
            if error.hint:
                print(f"Hint: {error.hint}", file=sys.stderr)
            return

    target.print(f"[bold red]Error:[/bold red] {_escape(str(error))}")
    if error.hint:
        target.print(f"[yellow]Hint:[/yellow] {_escape(error.hint)}")


def report(message: str) -> None:
    """Print a markup *message* to stderr, plain if Rich is unavailable."""
    try:
        target = make_console(stderr=True)
    except EnvironmentError:
        print(message, file=sys.stderr)
        return
    target.print(message)
