"""Domain models for fairdesk.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  State changes (confirming a company,
assigning a venue) are expressed by building a replacement record with
:func:`dataclasses.replace`, never by mutating in place.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar


# ---------------------------------------------------------------------------
# Company record
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CompanyRecord:
    """A single company taking part in the event."""

    name: str
    """Display name.  Uniqueness is not enforced."""

    industry: str
    """Industry label as typed.  Compared upper-cased."""

    contact_number: str
    """Exactly eight ASCII digits, kept as text."""

    contact_email: str
    """Contact address containing exactly one ``@``."""

    confirmed: bool = False
    """Whether the company has confirmed attendance."""

    @property
    def industry_key(self) -> str:
        """Upper-cased industry used for matching."""
        return self.industry.upper()


# ---------------------------------------------------------------------------
# Venue record
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class VenueRecord:
    """A venue slot that may be assigned to one company."""

    name: str

    index: int
    """0-based position in the venue list."""

    assigned_company_index: int | None = None
    """0-based company index, or ``None`` while unassigned."""


# ---------------------------------------------------------------------------
# Lazy restartable views
# ---------------------------------------------------------------------------

T = TypeVar("T")


class RecordView(Generic[T]):
    """Lazy, finite, restartable sequence of ``(index, record)`` pairs.

    Each call to :meth:`__iter__` asks *source* for a fresh iterator, so
    the view can be consumed any number of times and always reflects the
    roster as it is at iteration time.
    """

    __slots__ = ("_source",)

    def __init__(self, source: Callable[[], Iterator[tuple[int, T]]]) -> None:
        self._source = source

    def __iter__(self) -> Iterator[tuple[int, T]]:
        return self._source()

    def records(self) -> list[T]:
        """Materialise the records, dropping their indices."""
        return [record for _, record in self]


CompanyView = RecordView[CompanyRecord]
VenueView = RecordView[VenueRecord]
