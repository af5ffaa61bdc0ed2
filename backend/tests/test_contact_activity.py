from datetime import date, datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

from casa_cases.core.config import settings
from casa_cases.core.errors import MissingOccurredAtError
from casa_cases.services.contact_activity import (
    ContactWindow,
    contact_window,
    count_contacts_in_window,
    no_attempt_in_days,
    successful_contacts_this_week,
    unsuccessful_contacts_this_week,
    weekly_window,
)
from factories import make_case, make_contact


def test_weekly_window_for_datetime_reference(reference):
    window = weekly_window(reference)
    assert window == ContactWindow(start=reference - timedelta(days=7), end=reference)


def test_weekly_window_for_date_reference_covers_whole_days():
    window = weekly_window(date(2024, 3, 15))
    assert window.start == datetime(2024, 3, 8, 0, 0)
    assert window.end == datetime(2024, 3, 15, 23, 59, 59, 999999)


def test_weekly_window_defaults_to_today():
    before = date.today()
    window = weekly_window()
    after = date.today()

    assert window.end.date() in (before, after)
    assert window.start.date() == window.end.date() - timedelta(days=7)


def test_weekly_window_ignores_configured_default_length(monkeypatch, reference):
    monkeypatch.setattr(settings, "CONTACT_WINDOW_DAYS", 3)

    assert weekly_window(reference).start == reference - timedelta(days=7)
    assert contact_window(reference).start == reference - timedelta(days=3)


def test_contact_window_custom_length(reference):
    window = contact_window(reference, days=14)
    assert window.start == reference - timedelta(days=14)


def test_scenario_today_three_and_ten_days_ago(reference):
    case = make_case(contacts=[
        make_contact(reference, True),
        make_contact(reference - timedelta(days=3), True),
        make_contact(reference - timedelta(days=10), True),
    ])

    assert successful_contacts_this_week(case, reference) == 2
    assert unsuccessful_contacts_this_week(case, reference) == 0


def test_window_start_is_inclusive(reference):
    start = reference - timedelta(days=7)
    on_boundary = make_case(contacts=[make_contact(start, True)])
    just_outside = make_case(contacts=[make_contact(start - timedelta(seconds=1), True)])

    assert successful_contacts_this_week(on_boundary, reference) == 1
    assert successful_contacts_this_week(just_outside, reference) == 0


def test_window_end_is_inclusive(reference):
    case = make_case(contacts=[
        make_contact(reference, False),
        make_contact(reference + timedelta(seconds=1), False),
    ])
    assert unsuccessful_contacts_this_week(case, reference) == 1


def test_counts_partition_in_window_events(reference):
    contacts = [
        make_contact(reference - timedelta(days=d, hours=h), made)
        for d in range(0, 12)
        for h, made in ((1, True), (5, False), (9, d % 2 == 0))
    ]
    case = make_case(contacts=contacts)
    window = weekly_window(reference)
    in_window = [c for c in contacts if window.start <= c.occurred_at <= window.end]

    successful = successful_contacts_this_week(case, reference)
    unsuccessful = unsuccessful_contacts_this_week(case, reference)

    assert successful == sum(1 for c in in_window if c.contact_made)
    assert unsuccessful == sum(1 for c in in_window if not c.contact_made)
    assert successful + unsuccessful == len(in_window)
    assert count_contacts_in_window(case, window) == len(in_window)


def test_empty_contact_log_counts_zero(reference):
    case = make_case(contacts=[])
    assert successful_contacts_this_week(case, reference) == 0
    assert unsuccessful_contacts_this_week(case, reference) == 0


def test_date_reference_against_aware_timestamps():
    # Logged late on the reference day and early on the first day of the window
    case = make_case(contacts=[
        make_contact(datetime(2024, 3, 15, 22, 30, tzinfo=timezone.utc), True),
        make_contact(datetime(2024, 3, 8, 0, 5, tzinfo=timezone.utc), True),
        make_contact(datetime(2024, 3, 7, 23, 59, tzinfo=timezone.utc), True),
    ])
    assert successful_contacts_this_week(case, date(2024, 3, 15)) == 2


def test_naive_reference_against_naive_timestamps():
    reference = datetime(2024, 3, 15, 12, 0)
    case = make_case(contacts=[make_contact(datetime(2024, 3, 10, 8, 0), False)])
    assert unsuccessful_contacts_this_week(case, reference) == 1


def test_missing_occurred_at_is_fatal(reference):
    broken = SimpleNamespace(
        case_number="CINA-24-009",
        case_contacts=[SimpleNamespace(occurred_at=None, contact_made=True)],
    )

    with pytest.raises(MissingOccurredAtError) as excinfo:
        successful_contacts_this_week(broken, reference)

    assert excinfo.value.case_number == "CINA-24-009"
    assert "CINA-24-009" in str(excinfo.value)


def test_missing_occurred_at_outside_window_still_raises(reference):
    broken = SimpleNamespace(
        case_number="CINA-24-010",
        case_contacts=[
            SimpleNamespace(occurred_at=reference, contact_made=True),
            SimpleNamespace(occurred_at=None, contact_made=False),
        ],
    )
    with pytest.raises(MissingOccurredAtError):
        unsuccessful_contacts_this_week(broken, reference)


def test_no_attempt_in_days(reference):
    quiet = make_case(contacts=[make_contact(reference - timedelta(days=15), False)])
    busy = make_case(contacts=[make_contact(reference - timedelta(days=13), False)])

    assert no_attempt_in_days(quiet, reference=reference) is True
    assert no_attempt_in_days(busy, reference=reference) is False
    assert no_attempt_in_days(busy, days=7, reference=reference) is True
    assert no_attempt_in_days(make_case(), reference=reference) is True
