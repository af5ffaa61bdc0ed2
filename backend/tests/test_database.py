from datetime import datetime, timezone

from casa_cases.core.database import prepare_asyncpg_url
from casa_cases.models.entities import Case, CourtReportStatus
from casa_cases.models.tables import CasaCaseRecord, CaseContactRecord


def test_libpq_params_are_moved_to_connect_args():
    url, connect_args = prepare_asyncpg_url(
        "postgresql+asyncpg://u:p@host/db?sslmode=require&channel_binding=require"
    )
    assert url == "postgresql+asyncpg://u:p@host/db"
    assert connect_args == {"ssl": True}


def test_other_params_survive_and_ssl_stays_off():
    url, connect_args = prepare_asyncpg_url(
        "postgresql+asyncpg://u:p@host/db?sslmode=disable&application_name=casa"
    )
    assert url == "postgresql+asyncpg://u:p@host/db?application_name=casa"
    assert connect_args == {}


def test_entities_validate_from_orm_rows():
    stamp = datetime(2024, 3, 15, 12, 0, tzinfo=timezone.utc)
    record = CasaCaseRecord(
        case_number="CINA-24-001",
        active=True,
        transition_aged_youth=False,
        court_report_status="completed",
        updated_at=stamp,
        case_contacts=[
            CaseContactRecord(occurred_at=stamp, contact_made=True, contact_types=["youth"]),
        ],
    )

    case = Case.model_validate(record)

    assert case.court_report_status is CourtReportStatus.COMPLETED
    assert case.case_contacts[0].contact_types == ("youth",)
    assert case.case_contacts[0].occurred_at == stamp
