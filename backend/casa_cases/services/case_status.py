"""
case_status.py — Status strings and flags derived from a case's booleans.

Every function here is a pure mapping from case attributes to a display
string.  None of them render HTML; the caller decides what to do with the
returned text (e.g. put inactive_class() on a table row).
"""

import re

ACTIVE = "Active"
INACTIVE = "Inactive"

# Caterpillar + butterfly marks a transition-aged youth in case tables
TRANSITION_EMBLEM = "🐛🦋"

INACTIVE_ROW_CLASS = "table-secondary"


def status(case) -> str:
    """"Active" when the case is open, "Inactive" otherwise."""
    return ACTIVE if case.active else INACTIVE


def transition_aged_youth_icon(case) -> str:
    """Emblem with a Yes/No word, for columns that need the context."""
    return f"Yes {TRANSITION_EMBLEM}" if case.transition_aged_youth else "No"


def transition_aged_youth_only_icon(case) -> str:
    """Emblem alone, or an empty string when the youth is not transition-aged."""
    return TRANSITION_EMBLEM if case.transition_aged_youth else ""


def inactive_class(case) -> str:
    """Row style token for inactive cases, empty for active ones."""
    return INACTIVE_ROW_CLASS if not case.active else ""


def humanize(value) -> str:
    """
    Turn an enum value or snake_case key into a label.

    "not_submitted" -> "Not submitted",  "court_report_id" -> "Court report".
    Accepts str-valued enums as well as plain strings.
    """
    text = str(getattr(value, "value", value))
    text = re.sub(r"_id$", "", text)
    text = text.replace("_", " ").strip().lower()
    return text[:1].upper() + text[1:]


def court_report_submission(case) -> str:
    """Humanized court report status, e.g. "In review"."""
    return humanize(case.court_report_status)
