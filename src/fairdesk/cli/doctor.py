"""``fairdesk doctor`` — environment diagnostics command.

Gathers system information and renders a Rich table summarising
whether the runtime environment satisfies fairdesk's requirements and
whether the configured data file can be loaded.

This module lives in the CLI layer — it may import from ``infra``
and ``core``, and it renders via Rich.  No business logic resides
here; it purely collects and displays diagnostic data.
"""

from __future__ import annotations

import importlib.metadata
import platform
import sys
from pathlib import Path

from fairdesk.cli import exit_codes
from fairdesk.cli.console import report
from fairdesk.exceptions import PersistenceError
from fairdesk.infra.json_store import JsonRosterStore
from fairdesk.version import __version__

Check = tuple[str, str, str]


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _fairdesk_version_check() -> Check:
    return "fairdesk", __version__, "[green]OK[/green]"


def _python_version_check() -> Check:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _package_check(distribution: str) -> Check:
    """Return (label, value, status) for an installed UI dependency."""
    try:
        version = importlib.metadata.version(distribution)
    except importlib.metadata.PackageNotFoundError:
        return distribution, "NOT INSTALLED", "[red]FAIL[/red]"
    return distribution, version, "[green]OK[/green]"


def _data_file_check(data_file: Path) -> Check:
    """Return (label, value, status) for the roster snapshot row."""
    if not data_file.exists():
        return "Data file", f"{data_file} (not created yet)", "[green]OK[/green]"
    try:
        roster = JsonRosterStore(data_file).load()
    except PersistenceError as exc:
        return "Data file", f"{data_file}: {exc}", "[red]FAIL[/red]"
    return "Data file", f"{data_file} ({len(roster)} companies)", "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    if "FAIL" in status:
        return "FAIL"
    if "OK" in status:
        return "OK"
    return status


def _print_plain_doctor_table(checks: list[Check]) -> None:
    """Render doctor output without Rich."""
    print("\nfairdesk doctor", file=sys.stderr)
    print("=" * 64, file=sys.stderr)
    print(f"{'Component':<12} {'Value':<40} {'Status':<8}", file=sys.stderr)
    print("-" * 64, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<12} {value:<40} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor(data_file: Path) -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all critical checks pass,
        :data:`exit_codes.GENERAL_ERROR` if a critical check fails.
    """
    checks = [
        _fairdesk_version_check(),
        _python_version_check(),
        _package_check("rich"),
        _package_check("questionary"),
        _data_file_check(data_file),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    try:
        from rich.console import Console
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_doctor_table(checks)
    else:
        table = Table(
            title="fairdesk doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)
        for label, value, status in checks:
            table.add_row(label, value, status)

        console = Console(stderr=True)
        console.print()
        console.print(table)
        console.print()

    if has_failure:
        report("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR

    report("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
