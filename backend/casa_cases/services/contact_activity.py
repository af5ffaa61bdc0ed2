"""
contact_activity.py — Rolling-window contact counts for a case.

HOW THE WINDOW WORKS:
  weekly_window(reference) spans reference - 7 days .. reference, and BOTH
  ends are inclusive.  An event exactly on either boundary is counted; an
  event one second before the start is not.

  The reference may be:
    • a datetime – the bounds are exact instants
                   (start = reference - 7 days, end = reference)
    • a date     – the bounds cover whole calendar days
                   (00:00 on reference - 7 days .. 23:59:59.999999 on reference)
                   A plain date-range query on a timestamp column would
                   stop at 00:00 on the reference day instead; here
                   contacts logged later that day still count as "today".
    • None       – today's local date

  Passing the reference explicitly keeps the counts deterministic; nothing
  in this module reads the clock except the None default.

TIMEZONES:
  occurred_at is usually timezone-aware (TIMESTAMPTZ) while a date
  reference produces naive bounds.  A naive value is read in the zone of
  the value it is compared with, so "the 7 days up to today" means the
  same calendar days the contact was logged on.  contact_history.py uses
  align_zone() the same way when ordering a log that mixes the two.

MISSING TIMESTAMPS:
  A contact without occurred_at is a broken row from the persistence layer.
  It raises MissingOccurredAtError rather than being skipped, since
  skipping would quietly under-count.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

from casa_cases.core.config import settings
from casa_cases.core.errors import MissingOccurredAtError

logger = logging.getLogger(__name__)

# Length of the "this week" window used by the weekly contact counts
WEEK_DAYS = 7


@dataclass(frozen=True)
class ContactWindow:
    """Inclusive [start, end] span of contact timestamps."""
    start: datetime
    end: datetime

    def contains(self, moment: datetime) -> bool:
        return align_zone(self.start, moment) <= moment <= align_zone(self.end, moment)


def align_zone(value: datetime, other: datetime) -> datetime:
    """
    Make `value` comparable with `other`.

    A naive value takes the zone of an aware `other`; an aware value
    paired with a naive `other` drops its zone.  The wall-clock reading
    is kept either way.
    """
    if value.tzinfo is None and other.tzinfo is not None:
        return value.replace(tzinfo=other.tzinfo)
    if value.tzinfo is not None and other.tzinfo is None:
        return value.replace(tzinfo=None)
    return value


def contact_window(reference: date | datetime | None = None, days: int | None = None) -> ContactWindow:
    """Window of `days` days (default CONTACT_WINDOW_DAYS) ending at `reference`."""
    if days is None:
        days = settings.CONTACT_WINDOW_DAYS
    if reference is None:
        reference = date.today()

    # datetime is a subclass of date, so check it first
    if isinstance(reference, datetime):
        return ContactWindow(start=reference - timedelta(days=days), end=reference)

    return ContactWindow(
        start=datetime.combine(reference - timedelta(days=days), time.min),
        end=datetime.combine(reference, time.max),
    )


def weekly_window(reference: date | datetime | None = None) -> ContactWindow:
    """
    The "this week" window: WEEK_DAYS days ending at `reference`.

    Always seven days, whatever CONTACT_WINDOW_DAYS is set to.
    """
    return contact_window(reference, WEEK_DAYS)


def occurred_at(event, case=None) -> datetime:
    """Return the event's occurred_at, raising if the row arrived without one."""
    moment = getattr(event, "occurred_at", None)
    if moment is None:
        case_number = getattr(case, "case_number", None)
        logger.warning("Contact event without occurred_at (case=%s)", case_number)
        raise MissingOccurredAtError(case_number)
    return moment


def count_contacts_in_window(case, window: ContactWindow, contact_made: bool | None = None) -> int:
    """
    Count the case's contacts inside `window`.

    contact_made=True / False restricts the count to successful /
    unsuccessful attempts; None counts every attempt.
    """
    count = 0
    for event in case.case_contacts:
        if not window.contains(occurred_at(event, case)):
            continue
        if contact_made is None or bool(event.contact_made) is contact_made:
            count += 1
    return count


def successful_contacts_this_week(case, reference: date | datetime | None = None) -> int:
    """Successful contact attempts in the weekly window ending at `reference`."""
    return count_contacts_in_window(case, weekly_window(reference), contact_made=True)


def unsuccessful_contacts_this_week(case, reference: date | datetime | None = None) -> int:
    """Failed contact attempts in the weekly window ending at `reference`."""
    return count_contacts_in_window(case, weekly_window(reference), contact_made=False)


def no_attempt_in_days(case, days: int | None = None, reference: date | datetime | None = None) -> bool:
    """
    True when nobody attempted contact on the case in the last `days` days
    (default NO_ATTEMPT_DAYS), successful or not.
    """
    if days is None:
        days = settings.NO_ATTEMPT_DAYS
    return count_contacts_in_window(case, contact_window(reference, days)) == 0
