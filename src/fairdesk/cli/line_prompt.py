"""Reading command lines from the user.

Interactive terminals get a questionary text prompt (history-free,
arrow-key editing).  When stdin is not a TTY (a pipe or a redirected
file), lines are read straight from stdin so sessions can be scripted.

Both paths return ``None`` to signal the end of the session.
"""

from __future__ import annotations

import sys
from typing import IO, Any

from fairdesk.exceptions import EnvironmentError

PROMPT: str = "fairdesk ›"


def _import_questionary() -> Any:
    """Import questionary lazily for interactive input."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def read_line(stream: IO[str] | None = None) -> str | None:
    """Return the next command line, or ``None`` when input is over.

    Parameters
    ----------
    stream:
        Source to read from.  Defaults to ``sys.stdin``; questionary is
        used only when that stream is an interactive terminal.
    """
    source = stream if stream is not None else sys.stdin
    if source.isatty():
        questionary = _import_questionary()
        # ``ask`` returns None on Ctrl+C / Ctrl+D.
        answer: str | None = questionary.text(PROMPT, qmark="").ask()
        return answer

    line = source.readline()
    if line == "":
        return None
    return line.rstrip("\r\n")
