"""Core / service layer — pure parsing, commands and roster logic.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O (persistence goes through
  :class:`~fairdesk.core.protocols.RosterStore`).
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from fairdesk.core.commands import Command, CommandResult, execute
from fairdesk.core.models import CompanyRecord, RecordView, VenueRecord
from fairdesk.core.parser import parse
from fairdesk.core.protocols import Presenter, RosterStore
from fairdesk.core.roster import Roster

__all__: list[str] = [
    "Command",
    "CommandResult",
    "CompanyRecord",
    "Presenter",
    "RecordView",
    "Roster",
    "RosterStore",
    "VenueRecord",
    "execute",
    "parse",
]
