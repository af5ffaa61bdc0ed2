"""Builders for Case / ContactEvent entities used across the tests."""
from datetime import datetime, timedelta, timezone

from casa_cases.models.entities import Case, ContactEvent

REFERENCE = datetime(2024, 3, 15, 12, 0, tzinfo=timezone.utc)


def make_contact(occurred_at, contact_made=True, **extra) -> ContactEvent:
    return ContactEvent(occurred_at=occurred_at, contact_made=contact_made, **extra)


def make_case(case_number="CINA-24-001", contacts=(), **fields) -> Case:
    fields.setdefault("updated_at", REFERENCE - timedelta(days=1))
    return Case(case_number=case_number, case_contacts=tuple(contacts), **fields)
