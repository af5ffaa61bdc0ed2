"""
contact_history.py — Ordering and selection helpers over a case's contacts.

  case_contacts_ordered_by_occurred_at – newest first, stable on ties
  case_contacts_latest                 – the most recent contact (or None)
  court_report_select_option           – label/value pair for the court
                                         report case picker
"""

from datetime import date, datetime
from operator import itemgetter

from pydantic import BaseModel, ConfigDict

from casa_cases.services.contact_activity import align_zone, occurred_at


class SelectOption(BaseModel):
    """
    One entry in the court report case picker.

    label        – "<case number> - transition" / "<case number> - non-transition"
    value        – the bare case number submitted by the form
    transitioned – lets the page toggle transition-only report fields
    """
    model_config = ConfigDict(frozen=True)

    label: str
    value: str
    transitioned: bool

    def data_attributes(self) -> dict[str, bool]:
        return {"data-transitioned": self.transitioned}


def _timeline(case) -> list[tuple[datetime, object]]:
    """
    (comparable timestamp, contact) pairs in input order.

    A log can mix naive and aware occurred_at values; naive ones are read
    in the zone of the first aware contact, as ContactWindow does.
    """
    stamped = [(occurred_at(event, case), event) for event in case.case_contacts]
    anchor = next((moment for moment, _ in stamped if moment.tzinfo is not None), None)
    if anchor is None:
        return stamped
    return [(align_zone(moment, anchor), event) for moment, event in stamped]


def case_contacts_ordered_by_occurred_at(case) -> list:
    """
    All contacts, most recent first.

    sorted() is stable even with reverse=True, so contacts sharing a
    timestamp keep the order the persistence layer gave them and repeated
    calls return the same sequence.
    """
    ordered = sorted(_timeline(case), key=itemgetter(0), reverse=True)
    return [event for _, event in ordered]


def case_contacts_latest(case):
    """
    The contact with the greatest occurred_at, or None for an empty log.

    On ties max() keeps the first one it meets, i.e. the earliest in input order.
    """
    latest = max(_timeline(case), key=itemgetter(0), default=None)
    return latest[1] if latest is not None else None


def court_report_select_option(case, today: date | None = None) -> SelectOption:
    """
    Picker entry for the court report form.

    `today` decides whether the youth has transitioned; None means today.
    """
    transitioned = bool(case.has_transitioned(today))
    tag = "transition" if transitioned else "non-transition"
    return SelectOption(
        label=f"{case.case_number} - {tag}",
        value=case.case_number,
        transitioned=transitioned,
    )
