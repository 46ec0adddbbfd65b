"""Activity Record Repository Interface

Defines the contract for activity record persistence operations.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional
from src.domain.activity_record import ActivityRecord, ModuleName


class ActivityRecordRepository(ABC):
    """
    Repository interface for ActivityRecord persistence

    Writes are staged in the current unit of work and become visible on commit.
    """

    @abstractmethod
    async def get_by_id(self, activity_id: str) -> Optional[ActivityRecord]:
        """
        Retrieve activity record by ID

        Args:
            activity_id: Activity record ID

        Returns:
            ActivityRecord if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_by_module(
        self,
        tenant_id: str,
        module_name: ModuleName,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[ActivityRecord]:
        """
        List a tenant's records of one module, newest effective_date first

        Args:
            tenant_id: Tenant identifier
            module_name: Owning module
            start_date: Optional inclusive lower bound on effective_date
            end_date: Optional inclusive upper bound on effective_date

        Returns:
            List of activity records
        """
        pass

    @abstractmethod
    async def list_by_tenant(self, tenant_id: str) -> List[ActivityRecord]:
        """List every activity record of a tenant"""
        pass

    @abstractmethod
    async def list_all(self) -> List[ActivityRecord]:
        """List every activity record across tenants"""
        pass

    @abstractmethod
    async def get_existing_ids(self, activity_ids: List[str]) -> List[str]:
        """Return the subset of activity_ids that still exist"""
        pass

    @abstractmethod
    async def save(self, record: ActivityRecord) -> ActivityRecord:
        """
        Stage an insert or update of the record

        Args:
            record: ActivityRecord to persist

        Returns:
            The staged ActivityRecord
        """
        pass

    @abstractmethod
    async def delete(self, record: ActivityRecord) -> None:
        """Stage deletion of the record"""
        pass
