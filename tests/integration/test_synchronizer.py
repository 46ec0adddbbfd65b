"""Integration tests for the activity-to-ledger synchronizer

Runs SaveActivityRecord / DeleteActivityRecord against a real database
session to check the ledger invariants end to end:
- Idempotent replace: saving the same content twice leaves one set of entries
- Sum invariant: Expense entries of a record add up to its total_cost
- Atomicity: a failure mid-save leaves record and ledger as they were
- Delete cascade: no orphan entries after deleting a record
"""

import pytest
from datetime import date
from decimal import Decimal

from src.app.use_cases.ledger import (
    AuditLedgerConsistency,
    DeleteActivityRecord,
    SaveActivityCommandDTO,
    SaveActivityRecord,
)
from src.adapter.repositories import SqlAlchemyLedgerEntryRepository
from src.domain.activity_record import ModuleName
from src.domain.ledger_entry import EntryKind
from src.domain.line_item import CostCategory, LineItem, PaymentSource, SaleItem


def feeding_command(activity_id=None, quantities=("2", "1")):
    return SaveActivityCommandDTO(
        tenant_id="farm_1",
        module_name=ModuleName.FEEDING,
        activity_id=activity_id,
        effective_date=date(2024, 1, 10),
        details={"animal_group": "Broilers", "feed_type": "Starter mash"},
        line_items=[
            LineItem(
                id=f"li_{index}",
                description=f"Feed bag {index}",
                category=CostCategory.MATERIAL_INPUT,
                payment_source=PaymentSource.CASH,
                quantity=Decimal(quantity),
                unit_price=Decimal("50.00"),
            )
            for index, quantity in enumerate(quantities)
        ],
    )


class FailingLedgerRepository(SqlAlchemyLedgerEntryRepository):
    """Fails after the old entries were deleted and before new ones exist"""

    async def add_many(self, entries):
        raise RuntimeError("disk I/O error")


@pytest.mark.asyncio
class TestSynchronizer:

    async def test_create_writes_one_entry_per_line_item(self, uow, activity_repo, ledger_repo):
        result = await SaveActivityRecord(uow, activity_repo, ledger_repo).execute(feeding_command())

        assert result.is_ok()
        entries = await ledger_repo.get_by_source_activity(result.value.id)
        assert len(entries) == 2
        assert sum(e.amount for e in entries) == result.value.total_cost == Decimal("150")
        assert all(e.kind == EntryKind.EXPENSE for e in entries)

    async def test_saving_twice_is_idempotent(self, uow, activity_repo, ledger_repo):
        use_case = SaveActivityRecord(uow, activity_repo, ledger_repo)
        first = await use_case.execute(feeding_command())
        activity_id = first.value.id

        second = await use_case.execute(feeding_command(activity_id=activity_id))

        assert second.is_ok()
        entries = await ledger_repo.get_by_source_activity(activity_id)
        assert len(entries) == 2
        assert sorted(e.source_line_item_id for e in entries) == ["li_0", "li_1"]
        assert sum(e.amount for e in entries) == Decimal("150")

    async def test_update_replaces_entries_fully(self, uow, activity_repo, ledger_repo):
        use_case = SaveActivityRecord(uow, activity_repo, ledger_repo)
        first = await use_case.execute(feeding_command(quantities=("2", "1", "4")))
        activity_id = first.value.id

        result = await use_case.execute(feeding_command(activity_id=activity_id, quantities=("1",)))

        assert result.value.total_cost == Decimal("50")
        entries = await ledger_repo.get_by_source_activity(activity_id)
        assert [e.amount for e in entries] == [Decimal("50")]

    async def test_failed_save_leaves_previous_state(self, uow, activity_repo, ledger_repo, db_session):
        first = await SaveActivityRecord(uow, activity_repo, ledger_repo).execute(feeding_command())
        activity_id = first.value.id

        failing = SaveActivityRecord(uow, activity_repo, FailingLedgerRepository(db_session))
        result = await failing.execute(feeding_command(activity_id=activity_id, quantities=("9",)))

        assert result.is_err()
        assert result.error.code == "PERSISTENCE_FAILED"

        record = await activity_repo.get_by_id(activity_id)
        entries = await ledger_repo.get_by_source_activity(activity_id)
        assert record.total_cost == Decimal("150")
        assert len(entries) == 2
        assert sum(e.amount for e in entries) == record.total_cost

    async def test_failed_create_leaves_nothing(self, uow, activity_repo, db_session, ledger_repo):
        failing = SaveActivityRecord(uow, activity_repo, FailingLedgerRepository(db_session))

        result = await failing.execute(feeding_command(activity_id="act_new"))

        assert result.is_err()
        assert await activity_repo.get_by_id("act_new") is None
        assert await ledger_repo.get_by_source_activity("act_new") == []

    async def test_delete_leaves_no_orphans(self, uow, activity_repo, ledger_repo):
        saved = await SaveActivityRecord(uow, activity_repo, ledger_repo).execute(feeding_command())
        activity_id = saved.value.id

        result = await DeleteActivityRecord(uow, activity_repo, ledger_repo).execute(
            "farm_1", ModuleName.FEEDING, activity_id
        )

        assert result.is_ok()
        assert result.value.ledger_entries_deleted == 2
        assert await ledger_repo.get_by_source_activity(activity_id) == []

        audit = await AuditLedgerConsistency(activity_repo, ledger_repo).execute()
        assert audit.value.violations_found == 0

    async def test_harvest_income_and_expense(self, uow, activity_repo, ledger_repo):
        command = SaveActivityCommandDTO(
            tenant_id="farm_1",
            module_name=ModuleName.HARVESTING,
            effective_date=date(2024, 8, 1),
            details={"crop_type": "Maize", "yield_quantity": "200"},
            line_items=[
                LineItem(
                    id="labor",
                    description="Harvest labor",
                    category=CostCategory.LABOR,
                    payment_source=PaymentSource.CASH,
                    quantity=Decimal("4"),
                    unit_price=Decimal("25"),
                )
            ],
            sale_items=[
                SaleItem(id="sale", buyer="Kofi", quantity=Decimal("20"), unit_price=Decimal("30"),
                         payment_source=PaymentSource.MOBILE_MONEY),
            ],
        )

        result = await SaveActivityRecord(uow, activity_repo, ledger_repo).execute(command)

        entries = await ledger_repo.get_by_source_activity(result.value.id)
        by_kind = {e.kind: e.amount for e in entries}
        assert by_kind[EntryKind.EXPENSE] == Decimal("100")
        assert by_kind[EntryKind.INCOME] == Decimal("600")
        assert result.value.total_income == Decimal("600")
