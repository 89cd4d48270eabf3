"""The read → parse → execute → present loop.

The session is the per-command error boundary: every
:class:`~fairdesk.exceptions.FairdeskError` raised while parsing,
executing or presenting one line is rendered by the presenter and the
loop carries on.
Anything else propagates to the process-level boundary in
:mod:`fairdesk.cli.app`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from fairdesk.cli import exit_codes
from fairdesk.cli.line_prompt import read_line
from fairdesk.core.commands import CommandResult, execute
from fairdesk.core.parser import parse
from fairdesk.core.protocols import Presenter, RosterStore
from fairdesk.core.roster import Roster
from fairdesk.exceptions import FairdeskError

logger = logging.getLogger(__name__)


class Session:
    """One interactive run over a loaded roster.

    Parameters
    ----------
    roster:
        Roster loaded from *store* at startup.
    store:
        Persistence backend; saved after every mutating command.
    presenter:
        Receives results and errors.
    read_line:
        Callable returning the next line, or ``None`` at end of input.
    """

    def __init__(
        self,
        roster: Roster,
        store: RosterStore,
        presenter: Presenter,
        read_line: Callable[[], str | None] = read_line,
    ) -> None:
        self.roster: Roster = roster
        self._store = store
        self._presenter = presenter
        self._read_line = read_line

    def handle(self, line: str) -> CommandResult | None:
        """Parse and execute one *line*.

        Returns the presented result, or ``None`` when an error was
        reported instead.
        """
        try:
            command = parse(line)
            result = execute(command, self.roster, self._store)
            self._presenter.show_result(result)
        except FairdeskError as exc:
            logger.info("Command %r failed: %s", line, exc)
            self._presenter.show_error(exc)
            return None
        return result

    def run(self) -> int:
        """Loop until ``exit`` or end of input.  Returns the exit code."""
        self._presenter.show_welcome()
        while True:
            line = self._read_line()
            if line is None:
                break
            result = self.handle(line)
            if result is not None and result.should_exit:
                break
        self._presenter.show_farewell()
        return exit_codes.SUCCESS

    def run_once(self, line: str) -> int:
        """Execute a single *line* without the welcome/farewell framing."""
        result = self.handle(line)
        return exit_codes.SUCCESS if result is not None else exit_codes.GENERAL_ERROR
