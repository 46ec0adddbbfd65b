"""ListFarmingYears and GetFarmingYear Use Cases"""

from typing import List
from libs.result import Result, Return, Error
from src.app.repositories.farming_year_repository import FarmingYearRepository
from .dtos import FarmingYearResponseDTO


class ListFarmingYears:
    """Use Case: Farming years of a tenant, oldest first"""

    def __init__(self, farming_year_repo: FarmingYearRepository):
        self.farming_year_repo = farming_year_repo

    async def execute(self, tenant_id: str) -> Result[List[FarmingYearResponseDTO]]:
        years = await self.farming_year_repo.list_by_tenant(tenant_id)
        return Return.ok([FarmingYearResponseDTO.from_year(y) for y in years])


class GetFarmingYear:
    def __init__(self, farming_year_repo: FarmingYearRepository):
        self.farming_year_repo = farming_year_repo

    async def execute(self, tenant_id: str, year_id: str) -> Result[FarmingYearResponseDTO]:
        year = await self.farming_year_repo.get_by_id(year_id)
        if not year or year.tenant_id != tenant_id:
            return Return.err(
                Error(code="FARMING_YEAR_NOT_FOUND", message=f"Farming year {year_id} not found")
            )
        return Return.ok(FarmingYearResponseDTO.from_year(year))
