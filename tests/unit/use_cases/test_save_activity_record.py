"""Unit tests for SaveActivityRecord use case

Tests cover:
- Create: record upsert, ledger replace and a single commit
- Update: full replace of the record's ledger entries
- Sum invariant between total_cost and Expense entries
- Module-level rejections before any write
- Rollback when the commit fails
"""

import pytest
from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.ledger.save_activity_record import SaveActivityRecord
from src.app.use_cases.ledger.dtos import SaveActivityCommandDTO
from src.domain.activity_record import ActivityRecord, ModuleName
from src.domain.ledger_entry import EntryKind
from src.domain.line_item import CostCategory, LineItem, PaymentSource, SaleItem


@pytest.fixture
def mock_activity_repo():
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=None)
    repo.save = AsyncMock(side_effect=lambda record: record)
    return repo


@pytest.fixture
def mock_ledger_repo():
    repo = MagicMock()
    repo.delete_by_source_activity = AsyncMock(return_value=0)
    repo.add_many = AsyncMock(side_effect=lambda entries: entries)
    return repo


@pytest.fixture
def save_use_case(mock_uow, mock_activity_repo, mock_ledger_repo):
    return SaveActivityRecord(
        uow=mock_uow,
        activity_repo=mock_activity_repo,
        ledger_repo=mock_ledger_repo,
    )


def feeding_command(activity_id=None, line_items=None):
    return SaveActivityCommandDTO(
        tenant_id="farm_1",
        module_name=ModuleName.FEEDING,
        activity_id=activity_id,
        effective_date=date(2024, 1, 10),
        details={"animal_group": "Broilers", "feed_type": "Starter mash"},
        line_items=line_items if line_items is not None else [
            LineItem(
                id="li_1",
                description="Starter mash",
                category=CostCategory.MATERIAL_INPUT,
                payment_source=PaymentSource.CASH,
                quantity=Decimal("2"),
                unit_price=Decimal("50.00"),
            ),
            LineItem(
                id="li_2",
                description="Loading",
                category=CostCategory.LABOR,
                payment_source=PaymentSource.MOBILE_MONEY,
                quantity=Decimal("1"),
                unit_price=Decimal("20.00"),
            ),
        ],
    )


@pytest.mark.asyncio
class TestSaveActivityRecordSuccess:

    async def test_create_persists_record_and_entries_in_one_commit(
        self, save_use_case, mock_uow, mock_activity_repo, mock_ledger_repo
    ):
        # Act
        result = await save_use_case.execute(feeding_command())

        # Assert
        assert result.is_ok()
        assert result.value.total_cost == Decimal("120.00")
        assert result.value.total_income is None
        assert result.value.module_name == "Feeding"

        mock_activity_repo.save.assert_called_once()
        mock_ledger_repo.delete_by_source_activity.assert_called_once_with(result.value.id)
        mock_ledger_repo.add_many.assert_called_once()
        mock_uow.commit.assert_called_once()
        mock_uow.rollback.assert_not_called()

    async def test_expense_entries_sum_to_total_cost(self, save_use_case, mock_ledger_repo):
        result = await save_use_case.execute(feeding_command())

        entries = mock_ledger_repo.add_many.call_args[0][0]
        assert len(entries) == 2
        assert all(e.kind == EntryKind.EXPENSE for e in entries)
        assert sum(e.amount for e in entries) == result.value.total_cost
        assert {e.source_line_item_id for e in entries} == {"li_1", "li_2"}
        assert all(e.source_activity_id == result.value.id for e in entries)

    async def test_update_replaces_existing_entries(
        self, save_use_case, mock_activity_repo, mock_ledger_repo
    ):
        existing = ActivityRecord(
            id="act_1",
            tenant_id="farm_1",
            module_name=ModuleName.FEEDING,
            effective_date=date(2024, 1, 5),
            total_cost=Decimal("999"),
        )
        mock_activity_repo.get_by_id.return_value = existing
        mock_ledger_repo.delete_by_source_activity.return_value = 3

        result = await save_use_case.execute(feeding_command(activity_id="act_1"))

        assert result.is_ok()
        assert result.value.id == "act_1"
        assert result.value.effective_date == date(2024, 1, 10)
        assert result.value.total_cost == Decimal("120.00")
        mock_ledger_repo.delete_by_source_activity.assert_called_once_with("act_1")

    async def test_zero_line_items_clears_ledger(self, save_use_case, mock_ledger_repo, mock_uow):
        result = await save_use_case.execute(feeding_command(line_items=[]))

        assert result.is_ok()
        assert result.value.total_cost == Decimal("0")
        mock_ledger_repo.delete_by_source_activity.assert_called_once()
        mock_ledger_repo.add_many.assert_not_called()
        mock_uow.commit.assert_called_once()

    async def test_harvest_sales_produce_income_entries(self, save_use_case, mock_ledger_repo):
        command = SaveActivityCommandDTO(
            tenant_id="farm_1",
            module_name=ModuleName.HARVESTING,
            effective_date=date(2024, 8, 1),
            details={"crop_type": "Maize", "yield_quantity": "100"},
            sale_items=[
                SaleItem(id="s1", buyer="Kofi", quantity=10, unit_price=30, payment_source=PaymentSource.CASH)
            ],
        )

        result = await save_use_case.execute(command)

        assert result.is_ok()
        assert result.value.total_income == Decimal("300")
        entries = mock_ledger_repo.add_many.call_args[0][0]
        assert [e.kind for e in entries] == [EntryKind.INCOME]
        assert entries[0].description == "Sale to Kofi"


@pytest.mark.asyncio
class TestSaveActivityRecordRejections:

    async def test_sales_on_module_without_sales(self, save_use_case, mock_activity_repo, mock_uow):
        command = feeding_command()
        command.sale_items = [SaleItem(quantity=1, unit_price=5, payment_source=PaymentSource.CASH)]

        result = await save_use_case.execute(command)

        assert result.is_err()
        assert result.error.code == "SALES_NOT_SUPPORTED"
        mock_activity_repo.save.assert_not_called()
        mock_uow.commit.assert_not_called()

    async def test_duplicate_line_item_ids(self, save_use_case, mock_activity_repo):
        item = LineItem(
            id="dup",
            description="Feed",
            category=CostCategory.MATERIAL_INPUT,
            payment_source=PaymentSource.CASH,
            quantity=1,
            unit_price=10,
        )

        result = await save_use_case.execute(feeding_command(line_items=[item, item]))

        assert result.is_err()
        assert result.error.code == "DUPLICATE_LINE_ITEM"
        mock_activity_repo.save.assert_not_called()

    async def test_invalid_details(self, save_use_case, mock_activity_repo):
        command = feeding_command()
        command.details = {"animal_group": "Broilers"}

        result = await save_use_case.execute(command)

        assert result.is_err()
        assert result.error.code == "INVALID_DETAILS"
        mock_activity_repo.save.assert_not_called()

    async def test_record_of_another_module(self, save_use_case, mock_activity_repo, mock_ledger_repo):
        mock_activity_repo.get_by_id.return_value = ActivityRecord(
            id="act_1",
            tenant_id="farm_1",
            module_name=ModuleName.HEALTH,
            effective_date=date(2024, 1, 5),
        )

        result = await save_use_case.execute(feeding_command(activity_id="act_1"))

        assert result.is_err()
        assert result.error.code == "MODULE_MISMATCH"
        mock_ledger_repo.delete_by_source_activity.assert_not_called()

    async def test_record_of_another_tenant(self, save_use_case, mock_activity_repo):
        mock_activity_repo.get_by_id.return_value = ActivityRecord(
            id="act_1",
            tenant_id="farm_2",
            module_name=ModuleName.FEEDING,
            effective_date=date(2024, 1, 5),
        )

        result = await save_use_case.execute(feeding_command(activity_id="act_1"))

        assert result.is_err()
        assert result.error.code == "ACTIVITY_NOT_FOUND"


@pytest.mark.asyncio
class TestSaveActivityRecordFailure:

    async def test_commit_failure_rolls_back(self, save_use_case, mock_uow):
        mock_uow.commit.side_effect = Exception("database is locked")

        result = await save_use_case.execute(feeding_command())

        assert result.is_err()
        assert result.error.code == "PERSISTENCE_FAILED"
        assert "database is locked" in result.error.reason
        mock_uow.rollback.assert_called_once()

    async def test_ledger_insert_failure_rolls_back(self, save_use_case, mock_uow, mock_ledger_repo):
        mock_ledger_repo.add_many.side_effect = Exception("constraint failed")

        result = await save_use_case.execute(feeding_command())

        assert result.is_err()
        assert result.error.code == "PERSISTENCE_FAILED"
        mock_uow.commit.assert_not_called()
        mock_uow.rollback.assert_called_once()
