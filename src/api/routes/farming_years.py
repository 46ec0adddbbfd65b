"""Farming Year API Routes"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.error import ClientError
from src.api.schemas.reference_request import FarmingYearRequestSchema
from src.app.use_cases.seasons import (
    DeleteFarmingYear,
    DeleteFarmingYearResponseDTO,
    FarmingYearResponseDTO,
    GetFarmingYear,
    ListFarmingYears,
    SaveFarmingYear,
    SaveFarmingYearCommandDTO,
)
from src.adapter.repositories import SqlAlchemyFarmingYearRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session

router = APIRouter(prefix="/farming-years", tags=["Farming Years"])


async def _save(request: FarmingYearRequestSchema, year_id: Optional[str], session: AsyncSession):
    command = SaveFarmingYearCommandDTO(
        tenant_id=request.tenant_id,
        year_id=year_id,
        name=request.name,
        start_date=request.start_date,
        end_date=request.end_date,
        seasons=request.seasons,
    )
    use_case = SaveFarmingYear(SqlAlchemyUnitOfWork(session), SqlAlchemyFarmingYearRepository(session))
    result = await use_case.execute(command)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return result.value


@router.post("", response_model=FarmingYearResponseDTO, status_code=status.HTTP_201_CREATED)
async def create_farming_year(request: FarmingYearRequestSchema, session: AsyncSession = Depends(get_session)):
    """
    Create a farming year with its seasons.

    **Returns:**
    - 201: Year saved
    - 400: SEASON_OUT_OF_RANGE when a season leaves the year, INVALID_WINDOW
    """
    return await _save(request, None, session)


@router.put("/{year_id}", response_model=FarmingYearResponseDTO)
async def update_farming_year(
    year_id: str,
    request: FarmingYearRequestSchema,
    session: AsyncSession = Depends(get_session),
):
    return await _save(request, year_id, session)


@router.get("", response_model=List[FarmingYearResponseDTO])
async def list_farming_years(
    tenant_id: str = Query(..., min_length=1),
    session: AsyncSession = Depends(get_session),
):
    result = await ListFarmingYears(SqlAlchemyFarmingYearRepository(session)).execute(tenant_id)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return result.value


@router.get("/{year_id}", response_model=FarmingYearResponseDTO)
async def get_farming_year(
    year_id: str,
    tenant_id: str = Query(..., min_length=1),
    session: AsyncSession = Depends(get_session),
):
    result = await GetFarmingYear(SqlAlchemyFarmingYearRepository(session)).execute(tenant_id, year_id)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return result.value


@router.delete("/{year_id}", response_model=DeleteFarmingYearResponseDTO)
async def delete_farming_year(
    year_id: str,
    tenant_id: str = Query(..., min_length=1),
    session: AsyncSession = Depends(get_session),
):
    use_case = DeleteFarmingYear(SqlAlchemyUnitOfWork(session), SqlAlchemyFarmingYearRepository(session))
    result = await use_case.execute(tenant_id, year_id)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return result.value
