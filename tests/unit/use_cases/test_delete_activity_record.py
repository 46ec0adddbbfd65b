"""Unit tests for DeleteActivityRecord use case"""

import pytest
from datetime import date
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.ledger.delete_activity_record import DeleteActivityRecord
from src.domain.activity_record import ActivityRecord, ModuleName


@pytest.fixture
def existing_record():
    return ActivityRecord(
        id="act_1",
        tenant_id="farm_1",
        module_name=ModuleName.PLANTING,
        effective_date=date(2024, 4, 2),
    )


@pytest.fixture
def mock_activity_repo(existing_record):
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=existing_record)
    repo.delete = AsyncMock()
    return repo


@pytest.fixture
def mock_ledger_repo():
    repo = MagicMock()
    repo.delete_by_source_activity = AsyncMock(return_value=4)
    return repo


@pytest.fixture
def delete_use_case(mock_uow, mock_activity_repo, mock_ledger_repo):
    return DeleteActivityRecord(mock_uow, mock_activity_repo, mock_ledger_repo)


@pytest.mark.asyncio
class TestDeleteActivityRecord:

    async def test_deletes_record_and_its_entries(
        self, delete_use_case, mock_uow, mock_activity_repo, mock_ledger_repo, existing_record
    ):
        result = await delete_use_case.execute("farm_1", ModuleName.PLANTING, "act_1")

        assert result.is_ok()
        assert result.value.activity_id == "act_1"
        assert result.value.module_name == "Planting"
        assert result.value.ledger_entries_deleted == 4
        mock_ledger_repo.delete_by_source_activity.assert_called_once_with("act_1")
        mock_activity_repo.delete.assert_called_once_with(existing_record)
        mock_uow.commit.assert_called_once()

    async def test_missing_record(self, delete_use_case, mock_activity_repo, mock_ledger_repo):
        mock_activity_repo.get_by_id.return_value = None

        result = await delete_use_case.execute("farm_1", ModuleName.PLANTING, "missing")

        assert result.is_err()
        assert result.error.code == "ACTIVITY_NOT_FOUND"
        mock_ledger_repo.delete_by_source_activity.assert_not_called()

    @pytest.mark.parametrize("tenant_id, module_name", [
        ("farm_2", ModuleName.PLANTING),
        ("farm_1", ModuleName.HARVESTING),
    ])
    async def test_record_outside_tenant_or_module(
        self, delete_use_case, mock_activity_repo, tenant_id, module_name
    ):
        result = await delete_use_case.execute(tenant_id, module_name, "act_1")

        assert result.is_err()
        assert result.error.code == "ACTIVITY_NOT_FOUND"
        mock_activity_repo.delete.assert_not_called()

    async def test_commit_failure_rolls_back(self, delete_use_case, mock_uow):
        mock_uow.commit.side_effect = Exception("connection reset")

        result = await delete_use_case.execute("farm_1", ModuleName.PLANTING, "act_1")

        assert result.is_err()
        assert result.error.code == "PERSISTENCE_FAILED"
        mock_uow.rollback.assert_called_once()
