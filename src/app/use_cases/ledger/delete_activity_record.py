"""DeleteActivityRecord Use Case

Deletes an activity record and every ledger entry derived from it in one
unit of work.
"""

import logging
from libs.result import Result, Return, Error
from src.app.repositories.activity_record_repository import ActivityRecordRepository
from src.app.repositories.ledger_entry_repository import LedgerEntryRepository
from src.app.services.unit_of_work import UnitOfWork
from src.domain.activity_record import ModuleName
from .dtos import DeleteActivityResponseDTO

logger = logging.getLogger(__name__)


class DeleteActivityRecord:
    """
    Use Case: Delete an activity record with its ledger entries

    Business Rules:
    1. Only the owning tenant and module can delete the record
    2. Record and ledger entries are deleted in the same commit, so no
       ledger entry outlives its source
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

    async def execute(
        self, tenant_id: str, module_name: ModuleName, activity_id: str
    ) -> Result[DeleteActivityResponseDTO]:
        try:
            record = await self.activity_repo.get_by_id(activity_id)

            if not record or record.tenant_id != tenant_id or record.module_name != module_name:
                return Return.err(
                    Error(
                        code="ACTIVITY_NOT_FOUND",
                        message=f"{module_name.value} record {activity_id} not found",
                    )
                )

            deleted = await self.ledger_repo.delete_by_source_activity(record.id)
            await self.activity_repo.delete(record)
            await self.uow.commit()

            logger.info(
                f"Deleted {module_name.value} record {activity_id} for tenant {tenant_id} "
                f"with {deleted} ledger entries"
            )

            return Return.ok(
                DeleteActivityResponseDTO(
                    activity_id=activity_id,
                    module_name=module_name.value,
                    ledger_entries_deleted=deleted,
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to delete {module_name.value} record {activity_id}: {e}")
            return Return.err(
                Error(
                    code="PERSISTENCE_FAILED",
                    message="Failed to delete activity record",
                    reason=str(e),
                )
            )
