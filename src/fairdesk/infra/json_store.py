"""JSON-file implementation of :class:`~fairdesk.core.protocols.RosterStore`.

This module is the **only** place in the codebase that touches the
snapshot file.  ``OSError`` and decoding failures (bad UTF-8, bad JSON,
records that break the input rules) are caught here and re-raised as
:class:`~fairdesk.exceptions.PersistenceError` subclasses, so nothing raw
escapes the infrastructure boundary.

Snapshot layout::

    {
      "version": 1,
      "companies": [{"name": ..., "industry": ..., "contact_number": ...,
                     "contact_email": ..., "confirmed": false}, ...],
      "venues": [{"name": ..., "assigned_company_index": null}, ...]
    }
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from dataclasses import asdict
from pathlib import Path
from typing import Any

from fairdesk.core.models import CompanyRecord, VenueRecord
from fairdesk.core.parser import is_valid_contact_number, is_valid_email
from fairdesk.core.roster import Roster
from fairdesk.exceptions import PersistenceError, SnapshotCorruptError

logger = logging.getLogger(__name__)

SNAPSHOT_VERSION: int = 1


class JsonRosterStore:
    """Concrete :class:`RosterStore` writing one JSON document.

    Saves go to a temporary sibling file that then replaces the
    snapshot, so a crash mid-write leaves the previous snapshot intact.
    """

    def __init__(self, path: Path) -> None:
        self.path: Path = Path(path)

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def load(self) -> Roster:
        """Read the snapshot, or return an empty roster if there is none.

        Raises
        ------
        SnapshotCorruptError
            When the file exists but is not a valid snapshot.
        PersistenceError
            When the file cannot be read.
        """
        if not self.path.exists():
            logger.info("No snapshot at %s; starting with an empty roster", self.path)
            return Roster()

        try:
            raw = self.path.read_bytes()
        except OSError as exc:
            logger.error("Could not read snapshot %s: %s", self.path, exc)
            raise PersistenceError(
                f"Could not read {self.path}: {exc.strerror or exc}",
            ) from exc

        try:
            document = json.loads(raw.decode("utf-8"))
            roster = decode_roster(document)
        except (ValueError, KeyError, TypeError, AttributeError) as exc:
            logger.error("Snapshot %s is corrupt: %s", self.path, exc)
            raise SnapshotCorruptError(
                f"The data file {self.path} is damaged and cannot be loaded.",
                hint="Move the file aside to start with an empty roster.",
            ) from exc

        logger.info(
            "Loaded %d companies and %d venues from %s",
            len(roster), len(roster.venues), self.path,
        )
        return roster

    def save(self, roster: Roster) -> None:
        """Write a snapshot of *roster*.

        Raises
        ------
        PersistenceError
            For any filesystem error.  The in-memory roster is unaffected.
        """
        payload = json.dumps(encode_roster(roster), indent=2, ensure_ascii=False)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                dir=self.path.parent,
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(payload)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            logger.error("Could not save snapshot %s: %s", self.path, exc)
            raise PersistenceError(
                f"Could not save to {self.path}: {exc.strerror or exc}",
                hint="The change is kept for this session but is not on disk yet.",
            ) from exc

        logger.info("Saved %d companies to %s", len(roster), self.path)


# ---------------------------------------------------------------------------
# Encoding (pure)
# ---------------------------------------------------------------------------

def encode_roster(roster: Roster) -> dict[str, Any]:
    return {
        "version": SNAPSHOT_VERSION,
        "companies": [asdict(company) for company in roster.companies],
        "venues": [
            {
                "name": venue.name,
                "assigned_company_index": venue.assigned_company_index,
            }
            for venue in roster.venues
        ],
    }


def decode_roster(document: Any) -> Roster:
    """Rebuild a :class:`Roster` from a decoded snapshot document.

    Raises ``ValueError``, ``KeyError``, ``TypeError`` or
    ``AttributeError`` for malformed input; the caller maps those to
    :class:`SnapshotCorruptError`.
    """
    if not isinstance(document, dict):
        raise TypeError("snapshot root must be an object")
    version = document.get("version")
    if version != SNAPSHOT_VERSION:
        raise ValueError(f"unsupported snapshot version: {version!r}")

    companies = [_decode_company(entry) for entry in document.get("companies", [])]

    venues: list[VenueRecord] = []
    for position, entry in enumerate(document.get("venues", [])):
        assigned = entry.get("assigned_company_index")
        if assigned is not None and not 0 <= int(assigned) < len(companies):
            raise ValueError(f"venue {position} references missing company {assigned}")
        venues.append(
            VenueRecord(
                name=str(entry["name"]),
                index=position,
                assigned_company_index=None if assigned is None else int(assigned),
            )
        )

    return Roster(companies, venues)


def _decode_company(entry: Any) -> CompanyRecord:
    """Rebuild one company, holding it to the same rules as typed input."""
    confirmed = entry.get("confirmed", False)
    if not isinstance(confirmed, bool):
        raise ValueError(f"confirmed must be true or false, got {confirmed!r}")

    company = CompanyRecord(
        name=str(entry["name"]),
        industry=str(entry["industry"]),
        contact_number=str(entry["contact_number"]),
        contact_email=str(entry["contact_email"]),
        confirmed=confirmed,
    )
    if not company.name.strip() or not company.industry.strip():
        raise ValueError(f"company {company.name!r} has an empty name or industry")
    if not is_valid_contact_number(company.contact_number):
        raise ValueError(f"invalid contact number {company.contact_number!r}")
    if not is_valid_email(company.contact_email):
        raise ValueError(f"invalid contact email {company.contact_email!r}")
    return company
