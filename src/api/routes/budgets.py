"""Budget API Routes"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.error import ClientError
from src.api.schemas.reference_request import BudgetRequestSchema
from src.app.use_cases.budgeting import (
    BudgetResponseDTO,
    DeleteBudget,
    DeleteBudgetResponseDTO,
    GetBudget,
    ListBudgets,
    ReconcileBudget,
    ReconciliationDTO,
    SaveBudget,
    SaveBudgetCommandDTO,
)
from src.adapter.repositories import SqlAlchemyBudgetRepository, SqlAlchemyLedgerEntryRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session

router = APIRouter(prefix="/budgets", tags=["Budgets"])


async def _save(request: BudgetRequestSchema, budget_id: Optional[str], session: AsyncSession):
    command = SaveBudgetCommandDTO(
        tenant_id=request.tenant_id,
        budget_id=budget_id,
        name=request.name,
        budget_type=request.budget_type,
        start_date=request.start_date,
        end_date=request.end_date,
        categories=request.categories,
        notes=request.notes,
    )
    use_case = SaveBudget(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyBudgetRepository(session),
        SqlAlchemyLedgerEntryRepository(session),
    )
    result = await use_case.execute(command)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return result.value


@router.post("", response_model=BudgetResponseDTO, status_code=status.HTTP_201_CREATED)
async def create_budget(request: BudgetRequestSchema, session: AsyncSession = Depends(get_session)):
    return await _save(request, None, session)


@router.put("/{budget_id}", response_model=BudgetResponseDTO)
async def update_budget(
    budget_id: str,
    request: BudgetRequestSchema,
    session: AsyncSession = Depends(get_session),
):
    return await _save(request, budget_id, session)


@router.get("", response_model=List[BudgetResponseDTO])
async def list_budgets(
    tenant_id: str = Query(..., min_length=1),
    session: AsyncSession = Depends(get_session),
):
    """Budgets of a tenant, each with its live reconciliation."""
    use_case = ListBudgets(SqlAlchemyBudgetRepository(session), SqlAlchemyLedgerEntryRepository(session))
    result = await use_case.execute(tenant_id)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return result.value


@router.get("/{budget_id}", response_model=BudgetResponseDTO)
async def get_budget(
    budget_id: str,
    tenant_id: str = Query(..., min_length=1),
    session: AsyncSession = Depends(get_session),
):
    use_case = GetBudget(SqlAlchemyBudgetRepository(session), SqlAlchemyLedgerEntryRepository(session))
    result = await use_case.execute(tenant_id, budget_id)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return result.value


@router.get("/{budget_id}/reconciliation", response_model=ReconciliationDTO)
async def get_budget_reconciliation(
    budget_id: str,
    tenant_id: str = Query(..., min_length=1),
    session: AsyncSession = Depends(get_session),
):
    """
    Budget-wide actual spending for the budget's own window.

    **Returns:**
    - 200: total_budgeted_amount, total_actual_spending, total_variance, utilization
    - 404: BUDGET_NOT_FOUND
    """
    use_case = ReconcileBudget(SqlAlchemyBudgetRepository(session), SqlAlchemyLedgerEntryRepository(session))
    result = await use_case.execute(tenant_id, budget_id)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return result.value.reconciliation


@router.delete("/{budget_id}", response_model=DeleteBudgetResponseDTO)
async def delete_budget(
    budget_id: str,
    tenant_id: str = Query(..., min_length=1),
    session: AsyncSession = Depends(get_session),
):
    use_case = DeleteBudget(SqlAlchemyUnitOfWork(session), SqlAlchemyBudgetRepository(session))
    result = await use_case.execute(tenant_id, budget_id)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return result.value
