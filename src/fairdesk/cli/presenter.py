"""Rich rendering of session output.

:class:`RichPresenter` satisfies the
:class:`~fairdesk.core.protocols.Presenter` protocol.  It turns
:class:`~fairdesk.core.commands.CommandResult` objects into messages and
tables.  It holds no business logic and never touches the roster.

User-supplied text (company names, emails, search terms) is escaped
before it reaches Rich markup.
"""

from __future__ import annotations

from typing import Any

from fairdesk.cli.console import make_console, report_error
from fairdesk.core.commands import CommandResult
from fairdesk.core.models import CompanyView, VenueView
from fairdesk.exceptions import EnvironmentError, FairdeskError
from fairdesk.version import __version__


def _import_rich_table() -> type[Any]:
    """Import rich table lazily for listings."""
    try:
        from rich.table import Table
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Table


def _escape(text: str) -> str:
    from rich.markup import escape

    return escape(text)


# ---------------------------------------------------------------------------
# Presentation helpers (pure, no I/O)
# ---------------------------------------------------------------------------

def _format_status(confirmed: bool) -> str:
    return "[green]Confirmed[/green]" if confirmed else "[yellow]Unconfirmed[/yellow]"


def _format_assignment(company_index: int | None, names: dict[int, str]) -> str:
    if company_index is None:
        return "[dim]—[/dim]"
    name = names.get(company_index)
    if name is None:
        return f"#{company_index + 1}"
    return f"{company_index + 1}. {_escape(name)}"


class RichPresenter:
    """Render results and errors to a Rich console.

    Parameters
    ----------
    console:
        Rich console to draw on.  Defaults to a stdout console; tests
        pass one writing to a ``StringIO``.
    """

    def __init__(self, console: Any | None = None) -> None:
        self._console: Any = console if console is not None else make_console()

    # ------------------------------------------------------------------
    # Presenter protocol
    # ------------------------------------------------------------------

    def show_welcome(self) -> None:
        self._console.print(
            f"[bold cyan]fairdesk[/bold cyan] {__version__} — career fair roster"
        )
        self._console.print("Type [bold]help[/bold] to see what you can do.\n")

    def show_result(self, result: CommandResult) -> None:
        if result.usage:
            self._render_usage(result)
        elif result.venues is not None:
            self._render_venues(result.message, result.venues, result.companies)
        elif result.companies is not None:
            self._render_companies(result.message, result.companies)
        elif result.message:
            self._console.print(_escape(result.message))

    def show_error(self, error: FairdeskError) -> None:
        report_error(error, self._console)

    def show_farewell(self) -> None:
        self._console.print("[bold]Bye![/bold] See you at the fair.")

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def _render_companies(self, title: str, companies: CompanyView) -> None:
        rows = list(companies)
        if not rows:
            self._console.print(f"[dim]{_escape(title)}: nothing to show.[/dim]")
            return

        table = self._new_table(title)
        table.add_column("#", justify="right", style="dim", width=4)
        table.add_column("Company", min_width=12)
        table.add_column("Industry", min_width=10)
        table.add_column("Contact", justify="right", min_width=8)
        table.add_column("Email", min_width=12)
        table.add_column("Status", justify="center", min_width=11)

        for index, company in rows:
            table.add_row(
                str(index + 1),
                _escape(company.name),
                _escape(company.industry),
                company.contact_number,
                _escape(company.contact_email),
                _format_status(company.confirmed),
            )
        self._console.print(table)

    def _render_venues(
        self,
        title: str,
        venues: VenueView,
        companies: CompanyView | None,
    ) -> None:
        rows = list(venues)
        if not rows:
            self._console.print(f"[dim]{_escape(title)}: nothing to show.[/dim]")
            return

        names = {index: company.name for index, company in (companies or ())}
        table = self._new_table(title)
        table.add_column("#", justify="right", style="dim", width=4)
        table.add_column("Venue", min_width=12)
        table.add_column("Assigned to", min_width=12)

        for index, venue in rows:
            table.add_row(
                str(index + 1),
                _escape(venue.name),
                _format_assignment(venue.assigned_company_index, names),
            )
        self._console.print(table)

    def _render_usage(self, result: CommandResult) -> None:
        table = self._new_table(result.message)
        table.add_column("Command", style="bold")
        table.add_column("What it does")
        for usage, description in result.usage:
            table.add_row(_escape(usage), description)
        self._console.print(table)

    @staticmethod
    def _new_table(title: str) -> Any:
        table_class = _import_rich_table()
        return table_class(
            title=_escape(title),
            show_header=True,
            header_style="bold magenta",
            border_style="dim",
        )
