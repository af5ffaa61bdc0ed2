"""
case_summary.py — Gather every derived case field into one projection.

The API (and any other presentation layer) calls summarize_case() once per
case instead of stitching together the individual view functions.  The
reference date and formatter are passed straight through, so a summary
built for a given (case, as_of) pair is always the same.
"""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict

from casa_cases.models.entities import ContactEvent
from casa_cases.services import case_status, contact_activity, contact_history, date_formatting
from casa_cases.services.contact_history import SelectOption
from casa_cases.services.date_formatting import DateFormatter


class CaseSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    case_number: str
    status: str
    inactive_class: str
    transition_aged_youth_label: str
    transition_aged_youth_icon: str
    court_report_submission: str
    court_report_submitted_date: str | None
    updated_at: str | None
    successful_contacts_this_week: int
    unsuccessful_contacts_this_week: int
    no_attempt_in_days: bool
    latest_contact: ContactEvent | None
    court_report_option: SelectOption


class CaseDetail(CaseSummary):
    """A summary plus the full contact log, newest first."""
    contacts: tuple[ContactEvent, ...] = ()


def _as_of_date(reference: date | datetime | None) -> date | None:
    if isinstance(reference, datetime):
        return reference.date()
    return reference


def _summary_fields(case, reference, formatter) -> dict:
    return {
        "case_number": case.case_number,
        "status": case_status.status(case),
        "inactive_class": case_status.inactive_class(case),
        "transition_aged_youth_label": case_status.transition_aged_youth_icon(case),
        "transition_aged_youth_icon": case_status.transition_aged_youth_only_icon(case),
        "court_report_submission": case_status.court_report_submission(case),
        "court_report_submitted_date": date_formatting.court_report_submitted_date(case, formatter),
        "updated_at": date_formatting.formatted_updated_at(case, formatter),
        "successful_contacts_this_week": contact_activity.successful_contacts_this_week(case, reference),
        "unsuccessful_contacts_this_week": contact_activity.unsuccessful_contacts_this_week(case, reference),
        "no_attempt_in_days": contact_activity.no_attempt_in_days(case, reference=reference),
        "latest_contact": contact_history.case_contacts_latest(case),
        "court_report_option": contact_history.court_report_select_option(
            case, _as_of_date(reference)
        ),
    }


def summarize_case(
    case,
    reference: date | datetime | None = None,
    formatter: DateFormatter | None = None,
) -> CaseSummary:
    """All derived display fields for one case as of `reference`."""
    return CaseSummary(**_summary_fields(case, reference, formatter))


def describe_case(
    case,
    reference: date | datetime | None = None,
    formatter: DateFormatter | None = None,
) -> CaseDetail:
    """Summary plus the full contact log, newest first."""
    return CaseDetail(
        **_summary_fields(case, reference, formatter),
        contacts=tuple(contact_history.case_contacts_ordered_by_occurred_at(case)),
    )


def summarize_cases(cases, reference=None, formatter=None) -> list[CaseSummary]:
    """summarize_case() for each case, in the given order."""
    return [summarize_case(case, reference, formatter) for case in cases]


def filter_by_status(cases, active: bool = True, inactive: bool = True) -> list:
    """
    Keep cases whose status is selected.

    Mirrors the status filter on case tables: with both boxes unchecked
    nothing is shown.
    """
    return [case for case in cases if (active if case.active else inactive)]
