"""
entities.py — Immutable case and contact values handed to the case views.

The persistence layer owns the real rows (see tables.py).  Everything in
services/ works on these frozen snapshots instead, so a view function can
never write back to the database by accident.

from_attributes=True lets the repository build a Case directly from an
ORM row:   Case.model_validate(casa_case_record)
"""

from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict

from casa_cases.core.config import settings


class CourtReportStatus(str, Enum):
    """Workflow state of the case's court report."""
    NOT_SUBMITTED = "not_submitted"
    SUBMITTED = "submitted"
    IN_REVIEW = "in_review"
    COMPLETED = "completed"


def years_before(day: date, years: int) -> date:
    """Same calendar day `years` earlier; Feb 29 falls back to Feb 28."""
    try:
        return day.replace(year=day.year - years)
    except ValueError:
        return day.replace(year=day.year - years, day=28)


class ContactEvent(BaseModel):
    """
    One logged attempt to reach the youth or someone in their life.

    occurred_at   – when the attempt took place
    contact_made  – True when the attempt succeeded
    """
    model_config = ConfigDict(frozen=True, from_attributes=True)

    occurred_at: datetime
    contact_made: bool
    contact_types: tuple[str, ...] = ()
    medium_type: str | None = None
    duration_minutes: int | None = None
    notes: str | None = None


class Case(BaseModel):
    """
    Read-only snapshot of a CASA case and its contact log.

    case_contacts is always a tuple (empty when the case has no contacts),
    in whatever order the persistence layer supplied it.
    """
    model_config = ConfigDict(frozen=True, from_attributes=True)

    case_number: str
    active: bool = True
    transition_aged_youth: bool = False
    court_report_status: CourtReportStatus = CourtReportStatus.NOT_SUBMITTED
    court_report_submitted_at: datetime | None = None
    updated_at: datetime
    birth_month_year_youth: date | None = None
    case_contacts: tuple[ContactEvent, ...] = ()

    def has_transitioned(self, today: date | None = None) -> bool:
        """True once the youth has reached TRANSITION_AGE_YEARS."""
        if self.birth_month_year_youth is None:
            return False
        today = today or date.today()
        return self.birth_month_year_youth <= years_before(
            today, settings.TRANSITION_AGE_YEARS
        )
