"""SQLAlchemy implementation of LedgerEntryRepository

Provides the replace-by-source primitives used by the synchronizer and the
windowed queries used by reporting.
"""

from datetime import date
from typing import Collection, List, Optional, Tuple
from sqlalchemy import delete
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.ledger_entry_repository import LedgerEntryRepository
from src.domain.activity_record import ModuleName
from src.domain.ledger_entry import LedgerEntry, EntryKind
from .batching import batched


class SqlAlchemyLedgerEntryRepository(LedgerEntryRepository):
    """
    SQLAlchemy implementation of LedgerEntryRepository

    Features:
    - Bulk delete by source activity inside the caller's transaction
    - Window, module and kind filtering
    - Audit lookups batched into bounded IN lists
    - Unique (source_activity_id, source_line_item_id) enforced by the table
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def add_many(self, entries: List[LedgerEntry]) -> List[LedgerEntry]:
        self.session.add_all(entries)
        await self.session.flush()
        return entries

    async def delete_by_source_activity(self, source_activity_id: str) -> int:
        stmt = delete(LedgerEntry).where(LedgerEntry.source_activity_id == source_activity_id)
        result = await self.session.execute(stmt)
        return result.rowcount or 0

    async def get_by_source_activity(self, source_activity_id: str) -> List[LedgerEntry]:
        stmt = select(LedgerEntry).where(LedgerEntry.source_activity_id == source_activity_id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def find_in_window(
        self,
        tenant_id: str,
        start_date: date,
        end_date: date,
        modules: Optional[Collection[ModuleName]] = None,
        kind: Optional[EntryKind] = None,
    ) -> List[LedgerEntry]:
        stmt = (
            select(LedgerEntry)
            .where(LedgerEntry.tenant_id == tenant_id)
            .where(LedgerEntry.entry_date >= start_date)
            .where(LedgerEntry.entry_date <= end_date)
        )

        if modules:
            stmt = stmt.where(LedgerEntry.source_module.in_(list(modules)))
        if kind:
            stmt = stmt.where(LedgerEntry.kind == kind)

        stmt = stmt.order_by(LedgerEntry.entry_date.asc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_by_tenant(
        self,
        tenant_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        modules: Optional[Collection[ModuleName]] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> Tuple[List[LedgerEntry], int]:
        conditions = [LedgerEntry.tenant_id == tenant_id]
        if start_date:
            conditions.append(LedgerEntry.entry_date >= start_date)
        if end_date:
            conditions.append(LedgerEntry.entry_date <= end_date)
        if modules:
            conditions.append(LedgerEntry.source_module.in_(list(modules)))

        count_stmt = select(func.count()).select_from(LedgerEntry).where(*conditions)
        total = (await self.session.execute(count_stmt)).scalar_one()

        stmt = (
            select(LedgerEntry)
            .where(*conditions)
            .order_by(LedgerEntry.entry_date.desc(), LedgerEntry.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all()), total

    async def list_all_by_tenant(self, tenant_id: str) -> List[LedgerEntry]:
        stmt = (
            select(LedgerEntry)
            .where(LedgerEntry.tenant_id == tenant_id)
            .order_by(LedgerEntry.entry_date.asc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_source_activity_ids(self, tenant_id: Optional[str] = None) -> List[str]:
        stmt = select(LedgerEntry.source_activity_id).distinct()
        if tenant_id:
            stmt = stmt.where(LedgerEntry.tenant_id == tenant_id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_source_activities(self, source_activity_ids: List[str]) -> List[LedgerEntry]:
        entries: List[LedgerEntry] = []
        for batch in batched(source_activity_ids):
            stmt = select(LedgerEntry).where(LedgerEntry.source_activity_id.in_(batch))
            result = await self.session.execute(stmt)
            entries.extend(result.scalars().all())
        return entries
