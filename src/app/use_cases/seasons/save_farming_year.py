"""SaveFarmingYear Use Case"""

import logging
from datetime import datetime
from libs.result import Result, Return, Error
from src.app.repositories.farming_year_repository import FarmingYearRepository
from src.app.services.unit_of_work import UnitOfWork
from src.domain.farming_year import FarmingYear
from .dtos import FarmingYearResponseDTO, SaveFarmingYearCommandDTO

logger = logging.getLogger(__name__)


class SaveFarmingYear:
    """
    Use Case: Create or update a farming year

    Business Rules:
    1. start_date <= end_date for the year and every season (INVALID_WINDOW)
    2. Every season lies inside the year (SEASON_OUT_OF_RANGE)
    3. Updating a year of another tenant is FARMING_YEAR_NOT_FOUND

    Activity records tagged with a year are not re-validated when the year
    changes; reports resolve windows from the current dates.
    """

    def __init__(self, uow: UnitOfWork, farming_year_repo: FarmingYearRepository):
        self.uow = uow
        self.farming_year_repo = farming_year_repo

    async def execute(self, command: SaveFarmingYearCommandDTO) -> Result[FarmingYearResponseDTO]:
        # Step 1: Validate ranges
        if command.start_date > command.end_date:
            return Return.err(
                Error(
                    code="INVALID_WINDOW",
                    message="start_date must not be after end_date",
                    reason=f"start_date={command.start_date}, end_date={command.end_date}",
                )
            )

        for season in command.seasons:
            if season.start_date > season.end_date:
                return Return.err(
                    Error(
                        code="INVALID_WINDOW",
                        message=f"Season '{season.name}' starts after it ends",
                    )
                )
            if season.start_date < command.start_date or season.end_date > command.end_date:
                return Return.err(
                    Error(
                        code="SEASON_OUT_OF_RANGE",
                        message=f"Season '{season.name}' lies outside the farming year",
                        reason=f"season={season.start_date}..{season.end_date}, "
                               f"year={command.start_date}..{command.end_date}",
                    )
                )

        seasons = [s.model_dump(mode="json") for s in command.seasons]

        try:
            # Step 2: Upsert
            if command.year_id:
                year = await self.farming_year_repo.get_by_id(command.year_id)
                if not year or year.tenant_id != command.tenant_id:
                    return Return.err(
                        Error(
                            code="FARMING_YEAR_NOT_FOUND",
                            message=f"Farming year {command.year_id} not found",
                        )
                    )
                year.name = command.name
                year.start_date = command.start_date
                year.end_date = command.end_date
                year.seasons = seasons
                year.updated_at = datetime.utcnow()
            else:
                year = FarmingYear(
                    tenant_id=command.tenant_id,
                    name=command.name,
                    start_date=command.start_date,
                    end_date=command.end_date,
                    seasons=seasons,
                )

            year = await self.farming_year_repo.save(year)

            # Step 3: Commit
            await self.uow.commit()

            logger.info(f"Saved farming year {year.id} ({len(seasons)} seasons) for tenant {year.tenant_id}")
            return Return.ok(FarmingYearResponseDTO.from_year(year))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to save farming year for tenant {command.tenant_id}: {e}")
            return Return.err(
                Error(
                    code="PERSISTENCE_FAILED",
                    message="Failed to save farming year",
                    reason=str(e),
                )
            )
