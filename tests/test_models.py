"""Tests for domain models (core/models.py).

Records are frozen dataclasses — these tests verify immutability,
defaults, and the restartable behaviour of :class:`RecordView`.
"""

from __future__ import annotations

from dataclasses import replace

import pytest

from fairdesk.core.models import CompanyRecord, RecordView, VenueRecord


def _company(**overrides: object) -> CompanyRecord:
    defaults: dict[str, object] = {
        "name": "Acme",
        "industry": "Tech",
        "contact_number": "91234567",
        "contact_email": "x@y.com",
    }
    defaults.update(overrides)
    return CompanyRecord(**defaults)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# CompanyRecord
# ---------------------------------------------------------------------------

class TestCompanyRecord:
    def test_new_record_is_unconfirmed(self) -> None:
        assert _company().confirmed is False

    def test_industry_key_is_upper_case(self) -> None:
        assert _company(industry="Fin Tech").industry_key == "FIN TECH"

    def test_industry_is_stored_as_typed(self) -> None:
        assert _company(industry="Fin Tech").industry == "Fin Tech"

    def test_frozen(self) -> None:
        c = _company()
        with pytest.raises(AttributeError):
            c.confirmed = True  # type: ignore[misc]

    def test_replace_produces_new_record(self) -> None:
        c = _company()
        confirmed = replace(c, confirmed=True)
        assert confirmed.confirmed is True
        assert c.confirmed is False

    def test_equality(self) -> None:
        assert _company() == _company()


# ---------------------------------------------------------------------------
# VenueRecord
# ---------------------------------------------------------------------------

class TestVenueRecord:
    def test_unassigned_by_default(self) -> None:
        assert VenueRecord(name="Hall 1", index=0).assigned_company_index is None

    def test_frozen(self) -> None:
        v = VenueRecord(name="Hall 1", index=0)
        with pytest.raises(AttributeError):
            v.assigned_company_index = 2  # type: ignore[misc]


# ---------------------------------------------------------------------------
# RecordView
# ---------------------------------------------------------------------------

class TestRecordView:
    def test_can_be_iterated_more_than_once(self) -> None:
        items = [_company(name="A"), _company(name="B")]
        view = RecordView(lambda: iter(enumerate(items)))
        assert list(view) == list(view)
        assert [i for i, _ in view] == [0, 1]

    def test_is_lazy(self) -> None:
        items: list[CompanyRecord] = []
        view = RecordView(lambda: iter(enumerate(items)))
        items.append(_company(name="Late"))
        assert view.records() == [_company(name="Late")]

    def test_records_drops_indices(self) -> None:
        items = [_company(name="A")]
        view = RecordView(lambda: iter(enumerate(items)))
        assert view.records() == items
