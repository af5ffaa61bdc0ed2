"""
cases.py — GET /api/cases, /api/cases/court-report-options, /api/cases/{case_number}

Read-only JSON views over CASA cases.  Every derived field (status, weekly
contact counts, latest contact, court report option) comes from
services/case_summary.py; this module only loads cases and picks the
reference date.

THE as_of QUERY PARAM:
  Weekly counts are computed for the 7 days ending on `as_of` (inclusive).
  Omit it to use today's date.  Passing it makes responses reproducible,
  e.g.  GET /api/cases/?as_of=2024-03-15
"""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException

from casa_cases.services.case_repository import CaseRepository, get_case_repository
from casa_cases.services.case_summary import (
    CaseDetail,
    CaseSummary,
    describe_case,
    filter_by_status,
    summarize_cases,
)
from casa_cases.services.contact_history import SelectOption, court_report_select_option

router = APIRouter(prefix="/api/cases", tags=["cases"])


@router.get("/", response_model=list[CaseSummary])
async def list_cases(
    as_of: date | None = None,
    active: bool = True,
    inactive: bool = True,
    repo: CaseRepository = Depends(get_case_repository),
):
    """
    Return a summary for every case, sorted by case_number.

    `active` / `inactive` select which statuses to include; with both
    false the list is empty.
    """
    cases = filter_by_status(await repo.list_cases(), active=active, inactive=inactive)
    return summarize_cases(cases, reference=as_of or date.today())


@router.get("/court-report-options", response_model=list[SelectOption])
async def court_report_options(
    as_of: date | None = None,
    repo: CaseRepository = Depends(get_case_repository),
):
    """
    Options for the court report case picker.

    Only active cases are offered: a court report is not filed for a
    closed case, so inactive cases are left out even though
    GET /api/cases/ lists them.
    """
    today = as_of or date.today()
    cases = filter_by_status(await repo.list_cases(), active=True, inactive=False)
    return [court_report_select_option(case, today) for case in cases]


@router.get("/{case_number}", response_model=CaseDetail)
async def get_case(
    case_number: str,
    as_of: date | None = None,
    repo: CaseRepository = Depends(get_case_repository),
):
    """One case's summary plus its full contact log, newest first."""
    case = await repo.get_case(case_number)
    if case is None:
        raise HTTPException(status_code=404, detail=f"Case '{case_number}' not found")
    return describe_case(case, reference=as_of or date.today())
