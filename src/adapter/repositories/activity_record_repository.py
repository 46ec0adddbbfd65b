"""SQLAlchemy implementation of ActivityRecordRepository

Writes are flushed into the session transaction; the unit of work commits
them together with the derived ledger entries.
"""

from datetime import date
from typing import List, Optional
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.activity_record_repository import ActivityRecordRepository
from src.domain.activity_record import ActivityRecord, ModuleName
from .batching import batched


class SqlAlchemyActivityRecordRepository(ActivityRecordRepository):
    """
    SQLAlchemy implementation of ActivityRecordRepository

    Features:
    - Upsert through session.add (insert or update by primary key)
    - Module and date range filtering for module listings
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, activity_id: str) -> Optional[ActivityRecord]:
        stmt = select(ActivityRecord).where(ActivityRecord.id == activity_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_module(
        self,
        tenant_id: str,
        module_name: ModuleName,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[ActivityRecord]:
        stmt = (
            select(ActivityRecord)
            .where(ActivityRecord.tenant_id == tenant_id)
            .where(ActivityRecord.module_name == module_name)
        )

        if start_date:
            stmt = stmt.where(ActivityRecord.effective_date >= start_date)
        if end_date:
            stmt = stmt.where(ActivityRecord.effective_date <= end_date)

        stmt = stmt.order_by(ActivityRecord.effective_date.desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_by_tenant(self, tenant_id: str) -> List[ActivityRecord]:
        stmt = select(ActivityRecord).where(ActivityRecord.tenant_id == tenant_id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_all(self) -> List[ActivityRecord]:
        result = await self.session.execute(select(ActivityRecord))
        return list(result.scalars().all())

    async def get_existing_ids(self, activity_ids: List[str]) -> List[str]:
        existing: List[str] = []
        for batch in batched(activity_ids):
            stmt = select(ActivityRecord.id).where(ActivityRecord.id.in_(batch))
            result = await self.session.execute(stmt)
            existing.extend(result.scalars().all())
        return existing

    async def save(self, record: ActivityRecord) -> ActivityRecord:
        """
        Stage insert or update of the record

        Note:
            Flushes so the delete/insert of ledger entries that follows runs in
            the same transaction, after the record row exists.
        """
        self.session.add(record)
        await self.session.flush()
        return record

    async def delete(self, record: ActivityRecord) -> None:
        await self.session.delete(record)
        await self.session.flush()
