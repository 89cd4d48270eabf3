"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure and CLI adapters must
satisfy.  Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from fairdesk.core.commands import CommandResult
    from fairdesk.core.roster import Roster
    from fairdesk.exceptions import FairdeskError


class RosterStore(Protocol):
    """Contract for roster persistence backends.

    Any object that implements :meth:`load` and :meth:`save` with the
    correct signatures satisfies this protocol structurally (no explicit
    inheritance required).
    """

    def load(self) -> Roster:
        """Return the persisted roster, or an empty one if none exists.

        Raises
        ------
        SnapshotCorruptError
            When a snapshot exists but cannot be decoded.
        PersistenceError
            When the snapshot cannot be read.
        """
        ...  # pragma: no cover

    def save(self, roster: Roster) -> None:
        """Persist a snapshot of *roster*.

        Implementations must map all I/O failures to
        :class:`~fairdesk.exceptions.PersistenceError`.
        """
        ...  # pragma: no cover


class Presenter(Protocol):
    """Contract for rendering session output to the user."""

    def show_welcome(self) -> None:
        ...  # pragma: no cover

    def show_result(self, result: CommandResult) -> None:
        """Render the outcome of one successfully executed command."""
        ...  # pragma: no cover

    def show_error(self, error: FairdeskError) -> None:
        """Render one explanatory line (plus optional hint) for *error*."""
        ...  # pragma: no cover

    def show_farewell(self) -> None:
        ...  # pragma: no cover
