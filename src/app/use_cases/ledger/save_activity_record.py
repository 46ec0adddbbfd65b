"""SaveActivityRecord Use Case

Creates or updates an activity record of any module and replaces the ledger
entries derived from it, all in one unit of work.
"""

import logging
from datetime import datetime
from pydantic import ValidationError
from libs.result import Result, Return, Error
from src.app.modules import get_module
from src.app.repositories.activity_record_repository import ActivityRecordRepository
from src.app.repositories.ledger_entry_repository import LedgerEntryRepository
from src.app.services.unit_of_work import UnitOfWork
from src.domain.activity_record import ActivityRecord
from src.domain.base import generate_uuid
from .dtos import SaveActivityCommandDTO, ActivityRecordResponseDTO

logger = logging.getLogger(__name__)


class SaveActivityRecord:
    """
    Use Case: Save an activity record and synchronize its ledger entries

    Business Rules:
    1. total_cost / total_income are recomputed from the processed line items
    2. Ledger replace is full, not a diff: every entry of the record is deleted
       and one entry per processed item is inserted
    3. Record upsert and ledger replace commit together or not at all
    4. No retry on commit failure; the caller re-submits the latest form state

    Flow:
    1. Resolve module, parse details, reject sale items the module can't book
    2. Load existing record (update) and check tenant and module ownership
    3. Process line items and derive totals
    4. Upsert record
    5. Delete ledger entries by source activity
    6. Insert one ledger entry per processed item
    7. Commit
    """

    def __init__(
        self,
        uow: UnitOfWork,
        activity_repo: ActivityRecordRepository,
        ledger_repo: LedgerEntryRepository,
    ):
        self.uow = uow
        self.activity_repo = activity_repo
        self.ledger_repo = ledger_repo

    async def execute(self, command: SaveActivityCommandDTO) -> Result[ActivityRecordResponseDTO]:
        """
        Execute activity save

        Args:
            command: SaveActivityCommandDTO with record fields and line items

        Returns:
            Result[ActivityRecordResponseDTO]: Saved record or error
        """
        module = get_module(command.module_name)

        # Step 1: Module-level checks
        if command.sale_items and not module.records_sales:
            return Return.err(
                Error(
                    code="SALES_NOT_SUPPORTED",
                    message=f"Module {module.name.value} does not record sales",
                    reason=f"sale_items={len(command.sale_items)}",
                )
            )

        item_ids = [item.id for item in command.line_items] + [item.id for item in command.sale_items]
        if len(item_ids) != len(set(item_ids)):
            return Return.err(
                Error(
                    code="DUPLICATE_LINE_ITEM",
                    message="Line item IDs must be unique within a record",
                )
            )

        try:
            details = module.parse_details(command.details)
        except ValidationError as e:
            return Return.err(
                Error(
                    code="INVALID_DETAILS",
                    message=f"Invalid details for module {module.name.value}",
                    reason=str(e),
                )
            )

        try:
            # Step 2: Ownership checks on update
            record = None
            if command.activity_id:
                record = await self.activity_repo.get_by_id(command.activity_id)

                if record and record.tenant_id != command.tenant_id:
                    return Return.err(
                        Error(
                            code="ACTIVITY_NOT_FOUND",
                            message=f"Activity record {command.activity_id} not found",
                            reason="Record belongs to another tenant",
                        )
                    )

                if record and record.module_name != module.name:
                    return Return.err(
                        Error(
                            code="MODULE_MISMATCH",
                            message=f"Activity record {command.activity_id} belongs to module "
                                    f"{record.module_name.value}",
                            reason=f"requested module={module.name.value}",
                        )
                    )

            activity_id = command.activity_id or generate_uuid()

            # Step 3: Processed items and totals
            items = module.process(activity_id, details, command.line_items, command.sale_items)

            # Step 4: Upsert record
            now = datetime.utcnow()
            if record is None:
                record = ActivityRecord(
                    id=activity_id,
                    tenant_id=command.tenant_id,
                    module_name=module.name,
                    effective_date=command.effective_date,
                    created_at=now,
                )

            record.effective_date = command.effective_date
            record.farming_year_id = command.farming_year_id
            record.season_id = command.season_id
            record.details = details.model_dump(mode="json")
            record.line_items = [item.model_dump(mode="json") for item in items.line_items]
            record.sale_items = [item.model_dump(mode="json") for item in items.sale_items]
            record.total_cost = items.total_cost
            record.total_income = items.total_income
            record.updated_at = now

            await self.activity_repo.save(record)

            # Step 5: Drop every entry derived from this record
            deleted = await self.ledger_repo.delete_by_source_activity(record.id)

            # Step 6: Recreate one entry per processed item
            entries = module.to_ledger_entries(record, items)
            if entries:
                await self.ledger_repo.add_many(entries)

            # Step 7: Commit record and ledger together
            await self.uow.commit()

            logger.info(
                f"Saved {module.name.value} record {record.id} for tenant {record.tenant_id}: "
                f"replaced {deleted} ledger entries with {len(entries)}, "
                f"total_cost={items.total_cost}, total_income={items.total_income}"
            )

            return Return.ok(ActivityRecordResponseDTO.from_record(record))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to save {module.name.value} record {command.activity_id}: {e}")
            return Return.err(
                Error(
                    code="PERSISTENCE_FAILED",
                    message="Failed to save activity record",
                    reason=str(e),
                )
            )
