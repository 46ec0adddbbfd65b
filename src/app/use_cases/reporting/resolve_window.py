"""ResolveWindow Use Case

Turns a reporting scope into a concrete inclusive [start, end] date pair.
"""

from datetime import date
from typing import Optional
from libs.result import Result, Return, Error
from src.app.repositories.farming_year_repository import FarmingYearRepository
from .dtos import ReportingWindowDTO, ScopeMode, WindowScopeDTO


def first_day_months_back(today: date, months: int) -> date:
    """First day of the month `months` months before today's month"""
    index = today.year * 12 + (today.month - 1) - months
    return date(index // 12, index % 12 + 1, 1)


class ResolveWindow:
    """
    Use Case: Resolve a reporting window

    Scopes:
    - explicit: [start_date, end_date] as given (start after end is INVALID_WINDOW)
    - rolling12: [first day of (today - 11 months), today]
    - farmingYear: the year's [start_date, end_date]
    - season: the season's [start_date, end_date]

    Errors:
        SCOPE_NOT_FOUND: Unknown year or season; report callers degrade it
            to an empty result
        INVALID_WINDOW: Explicit window with start after end
    """

    def __init__(self, farming_year_repo: FarmingYearRepository, rolling_months: int = 12):
        self.farming_year_repo = farming_year_repo
        self.rolling_months = rolling_months

    async def execute(
        self, tenant_id: str, scope: WindowScopeDTO, today: Optional[date] = None
    ) -> Result[ReportingWindowDTO]:
        if scope.mode == ScopeMode.EXPLICIT:
            if scope.start_date > scope.end_date:
                return Return.err(
                    Error(
                        code="INVALID_WINDOW",
                        message="start_date must not be after end_date",
                        reason=f"start_date={scope.start_date}, end_date={scope.end_date}",
                    )
                )
            return Return.ok(ReportingWindowDTO(start_date=scope.start_date, end_date=scope.end_date))

        if scope.mode == ScopeMode.ROLLING12:
            today = today or date.today()
            return Return.ok(
                ReportingWindowDTO(
                    start_date=first_day_months_back(today, self.rolling_months - 1),
                    end_date=today,
                )
            )

        year = await self.farming_year_repo.get_by_id(scope.year_id)
        if not year or year.tenant_id != tenant_id:
            return Return.err(
                Error(
                    code="SCOPE_NOT_FOUND",
                    message=f"Farming year {scope.year_id} not found",
                )
            )

        if scope.mode == ScopeMode.FARMING_YEAR:
            return Return.ok(ReportingWindowDTO(start_date=year.start_date, end_date=year.end_date))

        season = year.find_season(scope.season_id)
        if not season:
            return Return.err(
                Error(
                    code="SCOPE_NOT_FOUND",
                    message=f"Season {scope.season_id} not found in farming year {scope.year_id}",
                )
            )

        return Return.ok(ReportingWindowDTO(start_date=season.start_date, end_date=season.end_date))
