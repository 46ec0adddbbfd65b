"""Get Activity Record Use Case"""

from libs.result import Result, Return, Error
from src.app.repositories.activity_record_repository import ActivityRecordRepository
from src.domain.activity_record import ModuleName
from .dtos import ActivityRecordResponseDTO


class GetActivityRecord:
    """Read one activity record of a tenant and module"""

    def __init__(self, activity_repo: ActivityRecordRepository):
        self.activity_repo = activity_repo

    async def execute(
        self, tenant_id: str, module_name: ModuleName, activity_id: str
    ) -> Result[ActivityRecordResponseDTO]:
        record = await self.activity_repo.get_by_id(activity_id)

        if not record or record.tenant_id != tenant_id or record.module_name != module_name:
            return Return.err(
                Error(
                    code="ACTIVITY_NOT_FOUND",
                    message=f"{module_name.value} record {activity_id} not found",
                )
            )

        return Return.ok(ActivityRecordResponseDTO.from_record(record))
