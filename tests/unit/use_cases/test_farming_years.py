"""Unit tests for farming year use cases"""

import pytest
from datetime import date
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.seasons import (
    DeleteFarmingYear,
    GetFarmingYear,
    SaveFarmingYear,
    SaveFarmingYearCommandDTO,
)
from src.domain.farming_year import FarmingYear, Season


@pytest.fixture
def mock_farming_year_repo():
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=None)
    repo.save = AsyncMock(side_effect=lambda year: year)
    repo.delete = AsyncMock()
    return repo


def command(seasons, **overrides):
    fields = dict(
        tenant_id="farm_1",
        name="2024",
        start_date=date(2024, 1, 1),
        end_date=date(2024, 12, 31),
        seasons=seasons,
    )
    fields.update(overrides)
    return SaveFarmingYearCommandDTO(**fields)


@pytest.mark.asyncio
class TestSaveFarmingYear:

    async def test_creates_year_with_season_ids(self, mock_uow, mock_farming_year_repo):
        seasons = [Season(name="Major", start_date=date(2024, 3, 1), end_date=date(2024, 7, 31))]

        result = await SaveFarmingYear(mock_uow, mock_farming_year_repo).execute(command(seasons))

        assert result.is_ok()
        assert len(result.value.seasons) == 1
        assert result.value.seasons[0].id
        mock_uow.commit.assert_called_once()

    async def test_season_outside_year(self, mock_uow, mock_farming_year_repo):
        seasons = [Season(name="Late", start_date=date(2024, 11, 1), end_date=date(2025, 2, 28))]

        result = await SaveFarmingYear(mock_uow, mock_farming_year_repo).execute(command(seasons))

        assert result.is_err()
        assert result.error.code == "SEASON_OUT_OF_RANGE"
        mock_farming_year_repo.save.assert_not_called()

    async def test_year_start_after_end(self, mock_uow, mock_farming_year_repo):
        result = await SaveFarmingYear(mock_uow, mock_farming_year_repo).execute(
            command([], start_date=date(2025, 1, 1))
        )

        assert result.is_err()
        assert result.error.code == "INVALID_WINDOW"

    async def test_update_unknown_year(self, mock_uow, mock_farming_year_repo):
        result = await SaveFarmingYear(mock_uow, mock_farming_year_repo).execute(command([], year_id="fy-x"))

        assert result.is_err()
        assert result.error.code == "FARMING_YEAR_NOT_FOUND"


@pytest.mark.asyncio
class TestReadAndDeleteFarmingYear:

    async def test_get_foreign_year(self, mock_farming_year_repo):
        mock_farming_year_repo.get_by_id.return_value = FarmingYear(
            id="fy-1", tenant_id="farm_2", name="2024", start_date=date(2024, 1, 1), end_date=date(2024, 12, 31)
        )

        result = await GetFarmingYear(mock_farming_year_repo).execute("farm_1", "fy-1")

        assert result.is_err()
        assert result.error.code == "FARMING_YEAR_NOT_FOUND"

    async def test_delete(self, mock_uow, mock_farming_year_repo):
        year = FarmingYear(
            id="fy-1", tenant_id="farm_1", name="2024", start_date=date(2024, 1, 1), end_date=date(2024, 12, 31)
        )
        mock_farming_year_repo.get_by_id.return_value = year

        result = await DeleteFarmingYear(mock_uow, mock_farming_year_repo).execute("farm_1", "fy-1")

        assert result.is_ok()
        mock_farming_year_repo.delete.assert_called_once_with(year)
        mock_uow.commit.assert_called_once()
