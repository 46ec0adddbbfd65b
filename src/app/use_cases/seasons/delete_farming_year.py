"""DeleteFarmingYear Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.repositories.farming_year_repository import FarmingYearRepository
from src.app.services.unit_of_work import UnitOfWork
from .dtos import DeleteFarmingYearResponseDTO

logger = logging.getLogger(__name__)


class DeleteFarmingYear:
    """Use Case: Delete a farming year. Tagged activity records keep their tags."""

    def __init__(self, uow: UnitOfWork, farming_year_repo: FarmingYearRepository):
        self.uow = uow
        self.farming_year_repo = farming_year_repo

    async def execute(self, tenant_id: str, year_id: str) -> Result[DeleteFarmingYearResponseDTO]:
        try:
            year = await self.farming_year_repo.get_by_id(year_id)
            if not year or year.tenant_id != tenant_id:
                return Return.err(
                    Error(code="FARMING_YEAR_NOT_FOUND", message=f"Farming year {year_id} not found")
                )

            await self.farming_year_repo.delete(year)
            await self.uow.commit()

            logger.info(f"Deleted farming year {year_id} for tenant {tenant_id}")
            return Return.ok(DeleteFarmingYearResponseDTO(year_id=year_id))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to delete farming year {year_id}: {e}")
            return Return.err(
                Error(
                    code="PERSISTENCE_FAILED",
                    message="Failed to delete farming year",
                    reason=str(e),
                )
            )
