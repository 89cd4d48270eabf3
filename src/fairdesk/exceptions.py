"""Custom exception hierarchy for fairdesk.

All exceptions that cross layer boundaries must inherit from
:class:`FairdeskError`.  Raw ``OSError`` / ``json`` failures must NEVER
propagate beyond the infrastructure layer — they are caught there and
re-raised as a typed subclass defined here.

Hierarchy
---------
FairdeskError
├── ParseFailure
├── InvalidIndexError
├── EmptyListError
├── PersistenceError
│   └── SnapshotCorruptError
└── EnvironmentError
"""

from __future__ import annotations

import enum


class FairdeskError(Exception):
    """Base exception for all fairdesk errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the session loop and the CLI error boundary can
    render a single clean line without leaking stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Input parsing ---------------------------------------------------------

class ParseFailureReason(enum.Enum):
    """Why a line of input could not become a command."""

    UNKNOWN_COMMAND = "unknown_command"
    MISSING_ARGUMENT = "missing_argument"
    UNKNOWN_KEYWORD = "unknown_keyword"
    MISSING_TAG = "missing_tag"
    DUPLICATE_TAG = "duplicate_tag"
    TAG_ORDER = "tag_order"
    EMPTY_FIELD = "empty_field"
    INVALID_CONTACT_NUMBER = "invalid_contact_number"
    INVALID_EMAIL = "invalid_email"
    INVALID_INTEGER = "invalid_integer"
    INVALID_INDEX = "invalid_index"


class ParseFailure(FairdeskError):
    """Raised when a line of input is malformed or unrecognized."""

    def __init__(
        self,
        message: str,
        *,
        reason: ParseFailureReason,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.reason: ParseFailureReason = reason


# --- Roster access ---------------------------------------------------------

class InvalidIndexError(FairdeskError):
    """Raised when an index falls outside the target list."""


class EmptyListError(FairdeskError):
    """Raised when an indexed operation targets an empty company list."""


# --- Persistence -----------------------------------------------------------

class PersistenceError(FairdeskError):
    """Raised when the roster snapshot cannot be read or written."""


class SnapshotCorruptError(PersistenceError):
    """Raised when an existing snapshot cannot be decoded at startup."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(FairdeskError):
    """Raised when a required runtime dependency is not available."""
