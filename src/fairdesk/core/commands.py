"""Command variants and their execution against a :class:`Roster`.

Every variant is a frozen dataclass carrying only parser-validated data.
The set is closed: :data:`Command` is the union of all variants and
:func:`execute` dispatches over it with a single ``match`` statement, so
adding a variant without teaching :func:`execute` about it is caught by
the trailing ``TypeError``.

Guarantees
----------
* No ``print()`` and no text parsing; rendering is the presenter's job.
* Mutating variants save through the injected :class:`RosterStore`
  right after the in-memory change.  A failed save is NOT rolled back.
* Only :class:`~fairdesk.exceptions.FairdeskError` subclasses escape.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from fairdesk.core.models import CompanyRecord, CompanyView, VenueView
from fairdesk.core.protocols import RosterStore
from fairdesk.core.roster import Roster
from fairdesk.core.samples import SAMPLE_COMPANIES, SAMPLE_VENUES
from fairdesk.exceptions import EmptyListError, InvalidIndexError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Add:
    name: str
    industry: str
    contact_number: str
    contact_email: str


@dataclass(frozen=True, slots=True)
class Delete:
    index: int


@dataclass(frozen=True, slots=True)
class Confirm:
    index: int


@dataclass(frozen=True, slots=True)
class Unconfirm:
    index: int


@dataclass(frozen=True, slots=True)
class ChooseVenue:
    """Assign a venue to a company.

    When *company_index* is ``None`` the roster's current selection (the
    company most recently added, confirmed, unconfirmed or assigned) is
    used.
    """

    venue_index: int
    company_index: int | None = None


@dataclass(frozen=True, slots=True)
class ListCompanies:
    pass


@dataclass(frozen=True, slots=True)
class ListVenues:
    pass


@dataclass(frozen=True, slots=True)
class ListUnconfirmed:
    pass


@dataclass(frozen=True, slots=True)
class FindCompany:
    term: str


@dataclass(frozen=True, slots=True)
class FindIndustry:
    term: str


@dataclass(frozen=True, slots=True)
class Purge:
    pass


@dataclass(frozen=True, slots=True)
class LoadSamples:
    pass


@dataclass(frozen=True, slots=True)
class Help:
    pass


@dataclass(frozen=True, slots=True)
class Exit:
    pass


@dataclass(frozen=True, slots=True)
class Unrecognized:
    """No-op produced for input that carries no command (e.g. a blank line)."""

    text: str = ""


Command = Union[
    Add,
    Delete,
    Confirm,
    Unconfirm,
    ChooseVenue,
    ListCompanies,
    ListVenues,
    ListUnconfirmed,
    FindCompany,
    FindIndustry,
    Purge,
    LoadSamples,
    Help,
    Exit,
    Unrecognized,
]

MUTATING_COMMANDS: tuple[type, ...] = (
    Add,
    Delete,
    Confirm,
    Unconfirm,
    ChooseVenue,
    Purge,
    LoadSamples,
)


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CommandResult:
    """What a command hands back to the presenter."""

    message: str = ""
    companies: CompanyView | None = None
    venues: VenueView | None = None
    usage: tuple[tuple[str, str], ...] = ()
    should_exit: bool = False


COMMAND_USAGE: tuple[tuple[str, str], ...] = (
    ("add n/NAME i/INDUSTRY c/NUMBER e/EMAIL", "Add a company (8-digit number)"),
    ("delete INDEX", "Remove the company at INDEX"),
    ("confirm INDEX", "Mark a company as attending"),
    ("unconfirm INDEX", "Clear a company's attendance"),
    ("choose venue INDEX [for COMPANY]", "Assign a venue to the selected or named company"),
    ("list companies", "Show every company"),
    ("list unconfirmed", "Show companies yet to confirm"),
    ("list venues", "Show venues and their assignments"),
    ("find company TERM", "Companies whose name contains TERM"),
    ("find industry TERM", "Companies in industry TERM (any case)"),
    ("load samples", "Add the sample companies and venues"),
    ("purge", "Delete every company and venue"),
    ("help", "Show this table"),
    ("exit", "Leave fairdesk"),
)


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

def is_mutating(command: Command) -> bool:
    return isinstance(command, MUTATING_COMMANDS)


def execute(command: Command, roster: Roster, store: RosterStore) -> CommandResult:
    """Apply *command* to *roster*, saving through *store* when it mutates.

    Raises
    ------
    EmptyListError
        Indexed command on an empty company list.
    InvalidIndexError
        Company or venue index out of range.
    PersistenceError
        The save after a successful mutation failed.  The in-memory
        change is kept.
    """
    logger.debug("Executing %r", command)
    result = _apply(command, roster)
    if is_mutating(command):
        store.save(roster)
    return result


def _apply(command: Command, roster: Roster) -> CommandResult:
    match command:
        case Add():
            record = CompanyRecord(
                name=command.name,
                industry=command.industry,
                contact_number=command.contact_number,
                contact_email=command.contact_email,
            )
            position = roster.add(record)
            return CommandResult(
                message=f"Added {record.name} as company {position + 1}. "
                f"Now tracking {len(roster)} companies.",
            )

        case Delete():
            removed = roster.delete(command.index)
            return CommandResult(
                message=f"Deleted {removed.name}. {len(roster)} companies left.",
            )

        case Confirm():
            record = roster.set_confirmed(command.index, True)
            return CommandResult(message=f"{record.name} has confirmed attendance.")

        case Unconfirm():
            record = roster.set_confirmed(command.index, False)
            return CommandResult(message=f"{record.name} is now unconfirmed.")

        case ChooseVenue():
            return _choose_venue(command, roster)

        case ListCompanies():
            return CommandResult(message="Companies", companies=roster.iter_companies())

        case ListUnconfirmed():
            return CommandResult(
                message="Unconfirmed companies",
                companies=roster.iter_unconfirmed(),
            )

        case ListVenues():
            # Companies ride along so assignments can be shown by name.
            return CommandResult(
                message="Venues",
                venues=roster.iter_venues(),
                companies=roster.iter_companies(),
            )

        case FindCompany():
            return CommandResult(
                message=f"Companies matching '{command.term}'",
                companies=roster.find_by_name(command.term),
            )

        case FindIndustry():
            return CommandResult(
                message=f"Companies in {command.term}",
                companies=roster.find_by_industry(command.term),
            )

        case Purge():
            roster.purge()
            return CommandResult(message="All companies and venues have been removed.")

        case LoadSamples():
            added = roster.extend(SAMPLE_COMPANIES)
            seeded = 0 if roster.venues else roster.seed_venues(SAMPLE_VENUES)
            return CommandResult(
                message=f"Loaded {added} sample companies and {seeded} venues.",
            )

        case Help():
            return CommandResult(message="Available commands", usage=COMMAND_USAGE)

        case Exit():
            return CommandResult(should_exit=True)

        case Unrecognized():
            return CommandResult()

        case _:
            raise TypeError(f"Unsupported command: {command!r}")


def _choose_venue(command: ChooseVenue, roster: Roster) -> CommandResult:
    company_index = command.company_index
    if company_index is None:
        if not len(roster):
            raise EmptyListError(
                "The company list is empty.",
                hint="Add a company first, or run 'load samples'.",
            )
        company_index = roster.selected_index
        if company_index is None:
            raise InvalidIndexError(
                "No company is selected.",
                hint="Name one explicitly: choose venue INDEX for COMPANY",
            )
    venue = roster.assign_venue(command.venue_index, company_index)
    company = roster.company(company_index)
    return CommandResult(message=f"{venue.name} is now assigned to {company.name}.")
