"""
case_repository.py — Read casa_cases rows and return frozen Case entities.

The repository is the only place that touches the ORM.  Contacts are loaded
eagerly with selectinload (one extra query for all cases, no N+1) and the
whole graph is converted with Case.model_validate() before returning, so
callers get plain immutable values.

Routes receive a CaseRepository through the get_case_repository dependency,
which tests override with an in-memory implementation.
"""

import logging

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from casa_cases.core.database import get_db
from casa_cases.models.entities import Case
from casa_cases.models.tables import CasaCaseRecord

logger = logging.getLogger(__name__)


class CaseRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_cases(self) -> list[Case]:
        """All cases ordered by case_number, contacts included."""
        result = await self.db.execute(
            select(CasaCaseRecord)
            .options(selectinload(CasaCaseRecord.case_contacts))
            .order_by(CasaCaseRecord.case_number)
        )
        records = result.scalars().all()
        logger.debug("Loaded %d cases", len(records))
        return [Case.model_validate(record) for record in records]

    async def get_case(self, case_number: str) -> Case | None:
        """One case by its case number, or None when no row matches."""
        result = await self.db.execute(
            select(CasaCaseRecord)
            .where(CasaCaseRecord.case_number == case_number)
            .options(selectinload(CasaCaseRecord.case_contacts))
        )
        record = result.scalar_one_or_none()
        if record is None:
            logger.debug("Case %s not found", case_number)
            return None
        return Case.model_validate(record)


async def get_case_repository(db: AsyncSession = Depends(get_db)) -> CaseRepository:
    """FastAPI dependency: one repository per request, sharing its session."""
    return CaseRepository(db)
