"""Activity API Routes

FastAPI routes for the operational modules. Every save or delete goes
through the synchronizer, so the ledger always mirrors the stored records.
"""

from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.error import ClientError
from src.api.params import resolve_module
from src.api.schemas.activity_request import ActivityRequestSchema
from src.app.modules import MODULES, MODULE_GROUPS
from src.app.use_cases.ledger import (
    ActivityRecordResponseDTO,
    DeleteActivityRecord,
    DeleteActivityResponseDTO,
    GetActivityRecord,
    ListActivityRecords,
    SaveActivityCommandDTO,
    SaveActivityRecord,
)
from src.adapter.repositories import SqlAlchemyActivityRecordRepository, SqlAlchemyLedgerEntryRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session

router = APIRouter(prefix="/activities", tags=["Activities"])


@router.get("")
async def list_modules():
    """Operational modules and the module groups usable as report filters."""
    return {
        "modules": [
            {"name": m.name.value, "slug": m.slug, "records_sales": m.records_sales}
            for m in MODULES.values()
        ],
        "groups": {name: sorted(m.value for m in members) for name, members in MODULE_GROUPS.items()},
    }


async def _save(
    module_key: str,
    request: ActivityRequestSchema,
    activity_id: Optional[str],
    session: AsyncSession,
) -> ActivityRecordResponseDTO:
    module = resolve_module(module_key)

    uow = SqlAlchemyUnitOfWork(session)
    activity_repo = SqlAlchemyActivityRecordRepository(session)
    ledger_repo = SqlAlchemyLedgerEntryRepository(session)

    command = SaveActivityCommandDTO(
        tenant_id=request.tenant_id,
        module_name=module.name,
        activity_id=activity_id,
        effective_date=request.effective_date,
        farming_year_id=request.farming_year_id,
        season_id=request.season_id,
        details=request.details,
        line_items=request.line_items,
        sale_items=request.sale_items,
    )

    result = await SaveActivityRecord(uow, activity_repo, ledger_repo).execute(command)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return result.value


@router.post(
    "/{module_key}",
    response_model=ActivityRecordResponseDTO,
    status_code=status.HTTP_201_CREATED,
)
async def create_activity(
    module_key: str,
    request: ActivityRequestSchema,
    session: AsyncSession = Depends(get_session),
):
    """
    Create an activity record and its ledger entries in one transaction.

    **Returns:**
    - 201: Record saved, ledger synchronized
    - 400: SALES_NOT_SUPPORTED, DUPLICATE_LINE_ITEM, INVALID_DETAILS,
      PERSISTENCE_FAILED or VALIDATION_ERROR
    - 404: MODULE_NOT_FOUND
    """
    return await _save(module_key, request, None, session)


@router.put(
    "/{module_key}/{activity_id}",
    response_model=ActivityRecordResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def update_activity(
    module_key: str,
    activity_id: str,
    request: ActivityRequestSchema,
    session: AsyncSession = Depends(get_session),
):
    """
    Replace an activity record and every ledger entry derived from it.

    Saving the same content twice leaves the ledger unchanged.
    """
    return await _save(module_key, request, activity_id, session)


@router.get("/{module_key}", response_model=List[ActivityRecordResponseDTO])
async def list_activities(
    module_key: str,
    tenant_id: str = Query(..., min_length=1),
    start_date: Optional[date] = Query(default=None),
    end_date: Optional[date] = Query(default=None),
    session: AsyncSession = Depends(get_session),
):
    module = resolve_module(module_key)
    use_case = ListActivityRecords(SqlAlchemyActivityRecordRepository(session))
    result = await use_case.execute(tenant_id, module.name, start_date, end_date)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return result.value


@router.get("/{module_key}/{activity_id}", response_model=ActivityRecordResponseDTO)
async def get_activity(
    module_key: str,
    activity_id: str,
    tenant_id: str = Query(..., min_length=1),
    session: AsyncSession = Depends(get_session),
):
    module = resolve_module(module_key)
    use_case = GetActivityRecord(SqlAlchemyActivityRecordRepository(session))
    result = await use_case.execute(tenant_id, module.name, activity_id)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return result.value


@router.delete("/{module_key}/{activity_id}", response_model=DeleteActivityResponseDTO)
async def delete_activity(
    module_key: str,
    activity_id: str,
    tenant_id: str = Query(..., min_length=1),
    session: AsyncSession = Depends(get_session),
):
    """Delete an activity record together with all of its ledger entries."""
    module = resolve_module(module_key)

    uow = SqlAlchemyUnitOfWork(session)
    use_case = DeleteActivityRecord(
        uow,
        SqlAlchemyActivityRecordRepository(session),
        SqlAlchemyLedgerEntryRepository(session),
    )
    result = await use_case.execute(tenant_id, module.name, activity_id)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return result.value
