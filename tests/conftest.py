"""Shared pytest fixtures and configuration for the fairdesk test suite.

Guidelines
----------
* No test touches the user's real data file — snapshots live in
  ``tmp_path``.
* Core tests use the in-memory store below, never the filesystem.
* Tests must not depend on OS state or environment variables.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from fairdesk.config import get_settings
from fairdesk.core.models import CompanyRecord
from fairdesk.core.roster import Roster
from fairdesk.exceptions import PersistenceError


class MemoryStore:
    """In-memory :class:`RosterStore` that records every save."""

    def __init__(self, roster: Roster | None = None) -> None:
        self._roster = roster if roster is not None else Roster()
        self.saves: list[tuple[CompanyRecord, ...]] = []

    def load(self) -> Roster:
        return self._roster

    def save(self, roster: Roster) -> None:
        self.saves.append(roster.companies)


class FailingStore(MemoryStore):
    """Store whose every save fails like a full disk."""

    def save(self, roster: Roster) -> None:
        raise PersistenceError("Could not save to roster.json: No space left on device")


def make_company(**overrides: object) -> CompanyRecord:
    """Factory with sensible defaults for concise tests."""
    defaults: dict[str, object] = {
        "name": "Acme",
        "industry": "Tech",
        "contact_number": "91234567",
        "contact_email": "x@y.com",
    }
    defaults.update(overrides)
    return CompanyRecord(**defaults)  # type: ignore[arg-type]


@pytest.fixture()
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture()
def failing_store() -> FailingStore:
    return FailingStore()


@pytest.fixture()
def three_companies() -> Roster:
    return Roster(
        [
            make_company(name="Acme", industry="Tech"),
            make_company(name="Beta Bank", industry="Finance", contact_number="62345678"),
            make_company(name="Cobalt", industry="tech", contact_email="hr@cobalt.io"),
        ]
    )


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Point configuration at a throwaway data file for every test."""
    monkeypatch.setenv("FAIRDESK_DATA_FILE", str(tmp_path / "roster.json"))
    monkeypatch.delenv("FAIRDESK_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FAIRDESK_LOG_FILE", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
