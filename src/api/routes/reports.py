"""Report API Routes

Dashboard summary and supplementary financial reports. All read-only.
"""

from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from pydantic import ValidationError
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from libs.result import Error
from src.api.error import ClientError
from src.api.params import resolve_module_filter
from src.app.use_cases.reporting import (
    AggregateLedger,
    HarvestProfitability,
    HarvestProfitabilityResponseDTO,
    LedgerSummaryDTO,
    ResolveWindow,
    ScopeMode,
    WindowScopeDTO,
    YearlyCashflow,
    YearlyCashflowResponseDTO,
)
from src.adapter.repositories import (
    SqlAlchemyActivityRecordRepository,
    SqlAlchemyFarmingYearRepository,
    SqlAlchemyLedgerEntryRepository,
)
from src.depends import get_session

router = APIRouter(prefix="/reports", tags=["Reports"])


@router.get("/summary", response_model=LedgerSummaryDTO)
async def ledger_summary(
    tenant_id: str = Query(..., min_length=1),
    scope: ScopeMode = Query(default=ScopeMode.ROLLING12),
    start_date: Optional[date] = Query(default=None),
    end_date: Optional[date] = Query(default=None),
    year_id: Optional[str] = Query(default=None),
    season_id: Optional[str] = Query(default=None),
    modules: Optional[List[str]] = Query(default=None, description="Module names, slugs or groups"),
    session: AsyncSession = Depends(get_session),
):
    """
    Income, expense, profit margin, monthly trend and expense categories.

    **Scopes:**
    - `explicit`: requires `start_date` and `end_date`
    - `rolling12`: the current month and the 11 before it
    - `farmingYear`: requires `year_id`
    - `season`: requires `year_id` and `season_id`

    An unknown year or season returns an empty summary with
    `scope_found=false`.
    """
    try:
        window_scope = WindowScopeDTO(
            mode=scope,
            start_date=start_date,
            end_date=end_date,
            year_id=year_id,
            season_id=season_id,
        )
    except ValidationError as e:
        raise ClientError(
            Error(code="VALIDATION_ERROR", message=e.errors()[0]["msg"], reason=str(e))
        )

    module_filter = resolve_module_filter(modules)

    resolver = ResolveWindow(
        SqlAlchemyFarmingYearRepository(session),
        rolling_months=ApplicationConfig.ROLLING_WINDOW_MONTHS,
    )
    use_case = AggregateLedger(resolver, SqlAlchemyLedgerEntryRepository(session))
    result = await use_case.execute(tenant_id, window_scope, modules=module_filter)
    if result.is_err():
        raise ClientError.from_error(result.error)
    summary = result.value
    summary.currency = ApplicationConfig.REPORT_CURRENCY
    return summary


@router.get("/yearly-cashflow", response_model=YearlyCashflowResponseDTO)
async def yearly_cashflow(
    tenant_id: str = Query(..., min_length=1),
    session: AsyncSession = Depends(get_session),
):
    """Income, expense and net per farming year, oldest first."""
    use_case = YearlyCashflow(
        SqlAlchemyFarmingYearRepository(session),
        SqlAlchemyLedgerEntryRepository(session),
    )
    result = await use_case.execute(tenant_id)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return result.value


@router.get("/harvest-profitability", response_model=HarvestProfitabilityResponseDTO)
async def harvest_profitability(
    tenant_id: str = Query(..., min_length=1),
    session: AsyncSession = Depends(get_session),
):
    """Net profit and cost per yield unit of each harvest, newest first."""
    use_case = HarvestProfitability(SqlAlchemyActivityRecordRepository(session))
    result = await use_case.execute(tenant_id)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return result.value
