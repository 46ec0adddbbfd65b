"""Ledger API Routes

Read-only access to the operational ledger and its consistency audit.
"""

from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.api.error import ClientError
from src.api.params import resolve_module_filter
from src.app.use_cases.ledger import (
    AuditLedgerConsistency,
    LedgerAuditResultDTO,
    ListLedgerEntries,
    ListLedgerEntriesResponseDTO,
)
from src.adapter.repositories import SqlAlchemyActivityRecordRepository, SqlAlchemyLedgerEntryRepository
from src.depends import get_session

router = APIRouter(prefix="/ledger", tags=["Ledger"])


@router.get("/entries", response_model=ListLedgerEntriesResponseDTO)
async def list_entries(
    tenant_id: str = Query(..., min_length=1),
    start_date: Optional[date] = Query(default=None),
    end_date: Optional[date] = Query(default=None),
    modules: Optional[List[str]] = Query(default=None, description="Module names, slugs or groups"),
    limit: int = Query(default=ApplicationConfig.LEDGER_PAGE_SIZE, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    session: AsyncSession = Depends(get_session),
):
    """
    Ledger transactions of a tenant, newest first.

    **Returns:**
    - 200: Page of entries with the total count
    - 400: INVALID_WINDOW when start_date is after end_date
    - 404: MODULE_NOT_FOUND for an unknown module filter
    """
    module_filter = resolve_module_filter(modules)
    use_case = ListLedgerEntries(SqlAlchemyLedgerEntryRepository(session))
    result = await use_case.execute(
        tenant_id=tenant_id,
        start_date=start_date,
        end_date=end_date,
        modules=module_filter,
        limit=limit,
        offset=offset,
    )
    if result.is_err():
        raise ClientError.from_error(result.error)
    return result.value


@router.get("/audit", response_model=LedgerAuditResultDTO)
async def audit_ledger(
    tenant_id: str = Query(..., min_length=1),
    session: AsyncSession = Depends(get_session),
):
    """Orphan entries and total drift found for a tenant. Nothing is repaired."""
    use_case = AuditLedgerConsistency(
        SqlAlchemyActivityRecordRepository(session),
        SqlAlchemyLedgerEntryRepository(session),
    )
    result = await use_case.execute(tenant_id=tenant_id)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return result.value
