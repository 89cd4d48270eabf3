"""Canned sample data used by ``load samples``.

Plain constants only.  Every record here passes the same validation
rules the parser applies to typed input.
"""

from __future__ import annotations

from fairdesk.core.models import CompanyRecord

SAMPLE_COMPANIES: tuple[CompanyRecord, ...] = (
    CompanyRecord("Shopee", "E-Commerce", "61234567", "careers@shopee.sg"),
    CompanyRecord("Grab", "Technology", "62345678", "talent@grab.com"),
    CompanyRecord("DBS Bank", "Finance", "63456789", "campus@dbs.com"),
    CompanyRecord("Sea Group", "Technology", "64567890", "hr@sea.com"),
    CompanyRecord("Singtel", "Telecommunications", "65678901", "recruit@singtel.com"),
    CompanyRecord("Keppel", "Engineering", "66789012", "jobs@keppel.com"),
    CompanyRecord("OCBC", "Finance", "67890123", "graduates@ocbc.com"),
    CompanyRecord("Lazada", "E-Commerce", "68901234", "people@lazada.sg"),
)

SAMPLE_VENUES: tuple[str, ...] = (
    "Multi-Purpose Hall 1",
    "Multi-Purpose Hall 2",
    "Auditorium Foyer",
    "Seminar Room A",
    "Seminar Room B",
    "Atrium Booth Row",
)
