"""CLI application entry point and command routing for fairdesk.

This module is the **process-level error boundary**.  Per-command
errors are handled inside the session loop; anything that escapes it
(a corrupt snapshot at startup, Ctrl+C, an unexpected exception) is
caught here and turned into a clean message and a well-defined exit
code.

Architecture notes
------------------
* No business logic lives here — work is delegated to the session,
  the core, and the infrastructure layer.
* This module is the only place that translates between the domain
  world and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from fairdesk.cli import exit_codes
from fairdesk.cli.console import report, report_error
from fairdesk.config import get_settings
from fairdesk.exceptions import FairdeskError
from fairdesk.utils.logging_setup import setup_logging
from fairdesk.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``fairdesk``                 — interactive session
    * ``fairdesk <command ...>``   — run one roster command and exit
    * ``fairdesk doctor``          — environment diagnostics
    * ``fairdesk --version``
    """
    parser = argparse.ArgumentParser(
        prog="fairdesk",
        description="Career fair company roster assistant.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--data-file",
        type=Path,
        default=None,
        help="Roster snapshot to use (default: $FAIRDESK_DATA_FILE or data/fairdesk.json).",
    )
    parser.add_argument(
        "words",
        nargs="*",
        help="A roster command to run once, e.g. 'list companies', or 'doctor'.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_session(data_file: Path, words: list[str]) -> int:
    """Load the roster and run either one command or the interactive loop."""
    from fairdesk.cli.presenter import RichPresenter
    from fairdesk.cli.session import Session
    from fairdesk.infra.json_store import JsonRosterStore

    store = JsonRosterStore(data_file)
    roster = store.load()
    session = Session(roster, store, RichPresenter())

    if words:
        return session.run_once(" ".join(words))
    return session.run()


def _handle_doctor(data_file: Path) -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from fairdesk.cli.doctor import run_doctor

    return run_doctor(data_file)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the fairdesk CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file)

    data_file: Path = args.data_file or settings.data_file
    words: list[str] = args.words
    logger.debug("Using data file %s", data_file)

    if words == ["doctor"]:
        return _handle_doctor(data_file)

    return _handle_session(data_file, words)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except FairdeskError as exc:
        report_error(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        report("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        logger.exception("Unexpected error")
        report(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
