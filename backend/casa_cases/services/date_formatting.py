"""
date_formatting.py — The date-formatting collaborator used by case views.

The views never decide how a timestamp looks.  They ask a DateFormatter
for a named style ("full", "standard") and pass None through untouched
when the timestamp is unset.  Swap in another DateFormatter to localise.
"""

from datetime import datetime
from typing import Protocol

from casa_cases.core.config import settings
from casa_cases.core.errors import UnknownDateStyleError

FULL = "full"
STANDARD = "standard"


class DateFormatter(Protocol):
    def format(self, value: datetime, style: str) -> str: ...


class StrftimeDateFormatter:
    """Formats timestamps with strftime patterns keyed by style name."""

    def __init__(self, patterns: dict[str, str] | None = None):
        if patterns is None:
            patterns = {
                FULL: settings.DATE_FORMAT_FULL,
                STANDARD: settings.DATE_FORMAT_STANDARD,
            }
        self.patterns = dict(patterns)

    def format(self, value: datetime, style: str) -> str:
        try:
            pattern = self.patterns[style]
        except KeyError:
            raise UnknownDateStyleError(style) from None
        return value.strftime(pattern)


default_formatter = StrftimeDateFormatter()


def format_optional(value: datetime | None, style: str, formatter: DateFormatter | None = None) -> str | None:
    if value is None:
        return None
    return (formatter or default_formatter).format(value, style)


def court_report_submitted_date(case, formatter: DateFormatter | None = None) -> str | None:
    return format_optional(case.court_report_submitted_at, FULL, formatter)


def formatted_updated_at(case, formatter: DateFormatter | None = None) -> str | None:
    return format_optional(case.updated_at, STANDARD, formatter)
