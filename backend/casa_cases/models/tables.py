"""
tables.py — SQLAlchemy ORM rows for CASA cases and their contact log.

TABLE RELATIONSHIPS:
  casa_cases ──< case_contacts   (one case has many logged contact attempts)

These rows belong to the persistence layer.  The API converts them into the
frozen entities in entities.py before any view function sees them, so the
services/ code never holds a live ORM object.

case_contacts.occurred_at is NOT NULL here; the views still raise
MissingOccurredAtError if a row ever arrives without it.
"""

import uuid
from datetime import date, datetime

from sqlalchemy import (
    ARRAY,
    BOOLEAN,
    DATE,
    INTEGER,
    TEXT,
    UUID,
    VARCHAR,
    DateTime,
    ForeignKey,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from casa_cases.core.database import Base


class CasaCaseRecord(Base):
    """
    A child-advocacy case.

    case_number             – display identifier, e.g. "CINA-24-001"
    transition_aged_youth   – youth is approaching the age the program ends
    birth_month_year_youth  – first of the youth's birth month (drives
                              has_transitioned)
    court_report_status     – not_submitted | submitted | in_review | completed
    """
    __tablename__ = "casa_cases"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, server_default=func.gen_random_uuid()
    )
    case_number: Mapped[str] = mapped_column(VARCHAR(50), unique=True, nullable=False)
    active: Mapped[bool] = mapped_column(BOOLEAN, nullable=False, server_default="true")
    transition_aged_youth: Mapped[bool] = mapped_column(
        BOOLEAN, nullable=False, server_default="false"
    )
    birth_month_year_youth: Mapped[date | None] = mapped_column(DATE, nullable=True)
    court_report_status: Mapped[str] = mapped_column(
        VARCHAR(30), nullable=False, server_default="not_submitted"
    )
    court_report_submitted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    case_contacts: Mapped[list["CaseContactRecord"]] = relationship(
        "CaseContactRecord", back_populates="casa_case", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<CasaCase {self.case_number} active={self.active}>"


class CaseContactRecord(Base):
    """
    One logged attempt to reach the youth or a related party.

    contact_made   – True when the attempt got through
    contact_types  – who was contacted ("youth", "school", "therapist", …)
    medium_type    – "in-person", "text/email", "video", "voice-only", "letter"
    """
    __tablename__ = "case_contacts"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, server_default=func.gen_random_uuid()
    )
    casa_case_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("casa_cases.id", ondelete="CASCADE"), nullable=False
    )
    occurred_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    contact_made: Mapped[bool] = mapped_column(BOOLEAN, nullable=False, server_default="false")
    contact_types: Mapped[list[str]] = mapped_column(
        ARRAY(VARCHAR(50)), nullable=False, server_default="{}"
    )
    medium_type: Mapped[str | None] = mapped_column(VARCHAR(30), nullable=True)
    duration_minutes: Mapped[int | None] = mapped_column(INTEGER, nullable=True)
    notes: Mapped[str | None] = mapped_column(TEXT, nullable=True)

    casa_case: Mapped["CasaCaseRecord"] = relationship(
        "CasaCaseRecord", back_populates="case_contacts"
    )

    def __repr__(self) -> str:
        return f"<CaseContact {self.occurred_at} made={self.contact_made}>"
