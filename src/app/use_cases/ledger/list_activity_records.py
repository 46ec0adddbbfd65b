"""List Activity Records Use Case

Lists the records of one module for a tenant, newest first.
"""

from datetime import date
from typing import List, Optional
from libs.result import Result, Return
from src.app.repositories.activity_record_repository import ActivityRecordRepository
from src.domain.activity_record import ModuleName
from .dtos import ActivityRecordResponseDTO


class ListActivityRecords:
    def __init__(self, activity_repo: ActivityRecordRepository):
        self.activity_repo = activity_repo

    async def execute(
        self,
        tenant_id: str,
        module_name: ModuleName,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Result[List[ActivityRecordResponseDTO]]:
        records = await self.activity_repo.list_by_module(
            tenant_id=tenant_id,
            module_name=module_name,
            start_date=start_date,
            end_date=end_date,
        )
        return Return.ok([ActivityRecordResponseDTO.from_record(r) for r in records])
