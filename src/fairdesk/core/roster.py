"""In-memory roster of companies and venues.

The :class:`Roster` is the only mutable object in the core.  It owns an
ordered list of :class:`CompanyRecord` and an ordered list of
:class:`VenueRecord`, and it enforces the index rules every indexed
command relies on:

* Indices are 0-based and never wrap: ``-1`` is out of range.
* An empty company list is reported before an out-of-range index.
* A failed check leaves the roster untouched.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import replace

from fairdesk.core.models import CompanyRecord, CompanyView, RecordView, VenueRecord, VenueView
from fairdesk.exceptions import EmptyListError, InvalidIndexError


class Roster:
    """Ordered company records plus the venue list for one session.

    Parameters
    ----------
    companies:
        Initial company records, in display order.
    venues:
        Initial venue records.  Their ``index`` fields are renumbered to
        match list positions.
    """

    def __init__(
        self,
        companies: Iterable[CompanyRecord] = (),
        venues: Iterable[VenueRecord] = (),
    ) -> None:
        self._companies: list[CompanyRecord] = list(companies)
        self._venues: list[VenueRecord] = [
            replace(venue, index=i) for i, venue in enumerate(venues)
        ]
        self.selected_index: int | None = None
        """Company most recently added or referenced; not persisted."""

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def companies(self) -> tuple[CompanyRecord, ...]:
        return tuple(self._companies)

    @property
    def venues(self) -> tuple[VenueRecord, ...]:
        return tuple(self._venues)

    def __len__(self) -> int:
        return len(self._companies)

    def company(self, index: int) -> CompanyRecord:
        """Return the company at *index* after the emptiness/bounds checks."""
        self._check_company_index(index)
        return self._companies[index]

    def iter_companies(self) -> CompanyView:
        return RecordView(lambda: iter(enumerate(self._companies)))

    def iter_unconfirmed(self) -> CompanyView:
        def _source() -> Iterator[tuple[int, CompanyRecord]]:
            return (
                (i, company)
                for i, company in enumerate(self._companies)
                if not company.confirmed
            )

        return RecordView(_source)

    def iter_venues(self) -> VenueView:
        return RecordView(lambda: iter(enumerate(self._venues)))

    def find_by_name(self, term: str) -> CompanyView:
        """Companies whose name contains *term* (case-sensitive)."""
        def _source() -> Iterator[tuple[int, CompanyRecord]]:
            return (
                (i, company)
                for i, company in enumerate(self._companies)
                if term in company.name
            )

        return RecordView(_source)

    def find_by_industry(self, term: str) -> CompanyView:
        """Companies whose industry equals *term*, ignoring case."""
        key = term.upper()

        def _source() -> Iterator[tuple[int, CompanyRecord]]:
            return (
                (i, company)
                for i, company in enumerate(self._companies)
                if company.industry_key == key
            )

        return RecordView(_source)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add(self, company: CompanyRecord) -> int:
        """Append *company* and select it.  Returns its index."""
        self._companies.append(company)
        self.selected_index = len(self._companies) - 1
        return self.selected_index

    def extend(self, companies: Iterable[CompanyRecord]) -> int:
        """Append several companies without changing the selection."""
        before = len(self._companies)
        self._companies.extend(companies)
        return len(self._companies) - before

    def delete(self, index: int) -> CompanyRecord:
        """Remove and return the company at *index*, closing the gap.

        Venue assignments and the selection shift with the records that
        move down; references to the removed company are cleared.
        """
        self._check_company_index(index)
        removed = self._companies.pop(index)
        self._venues = [
            replace(venue, assigned_company_index=_shift_after_delete(
                venue.assigned_company_index, index,
            ))
            for venue in self._venues
        ]
        self.selected_index = _shift_after_delete(self.selected_index, index)
        return removed

    def set_confirmed(self, index: int, confirmed: bool) -> CompanyRecord:
        """Set the attendance flag of the company at *index*.

        Idempotent: setting the current value again is not an error.
        """
        self._check_company_index(index)
        updated = replace(self._companies[index], confirmed=confirmed)
        self._companies[index] = updated
        self.selected_index = index
        return updated

    def assign_venue(self, venue_index: int, company_index: int) -> VenueRecord:
        """Point the venue at *venue_index* to the company at *company_index*."""
        self._check_company_index(company_index)
        if not 0 <= venue_index < len(self._venues):
            raise InvalidIndexError(
                f"There is no venue {venue_index + 1}.",
                hint=_range_hint("venue", len(self._venues)),
            )
        updated = replace(self._venues[venue_index], assigned_company_index=company_index)
        self._venues[venue_index] = updated
        self.selected_index = company_index
        return updated

    def seed_venues(self, names: Iterable[str]) -> int:
        """Append venues named *names*.  Returns how many were added."""
        start = len(self._venues)
        self._venues.extend(
            VenueRecord(name=name, index=start + offset)
            for offset, name in enumerate(names)
        )
        return len(self._venues) - start

    def purge(self) -> None:
        """Drop every company and venue."""
        self._companies.clear()
        self._venues.clear()
        self.selected_index = None

    # ------------------------------------------------------------------
    # Index checks
    # ------------------------------------------------------------------

    def _check_company_index(self, index: int) -> None:
        if not self._companies:
            raise EmptyListError(
                "The company list is empty.",
                hint="Add a company first, or run 'load samples'.",
            )
        if not 0 <= index < len(self._companies):
            raise InvalidIndexError(
                f"There is no company {index + 1}.",
                hint=_range_hint("company", len(self._companies)),
            )


def _shift_after_delete(reference: int | None, removed: int) -> int | None:
    if reference is None or reference == removed:
        return None
    return reference - 1 if reference > removed else reference


def _range_hint(noun: str, count: int) -> str:
    if count == 0:
        return f"The {noun} list is empty."
    return f"Pick a {noun} number from 1 to {count}."
