"""Ledger Entry Repository Interface

Defines the contract for ledger entry persistence operations.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import Collection, List, Optional, Tuple
from src.domain.activity_record import ModuleName
from src.domain.ledger_entry import LedgerEntry, EntryKind


class LedgerEntryRepository(ABC):
    """
    Repository interface for LedgerEntry persistence

    Entries are never updated in place: they are deleted by source activity and
    inserted again.
    """

    @abstractmethod
    async def add_many(self, entries: List[LedgerEntry]) -> List[LedgerEntry]:
        """
        Stage insertion of entries

        Args:
            entries: LedgerEntry rows to insert

        Returns:
            The staged entries
        """
        pass

    @abstractmethod
    async def delete_by_source_activity(self, source_activity_id: str) -> int:
        """
        Stage deletion of every entry derived from an activity record

        Args:
            source_activity_id: Source activity record ID

        Returns:
            Number of entries deleted
        """
        pass

    @abstractmethod
    async def get_by_source_activity(self, source_activity_id: str) -> List[LedgerEntry]:
        """Retrieve every entry derived from an activity record"""
        pass

    @abstractmethod
    async def find_in_window(
        self,
        tenant_id: str,
        start_date: date,
        end_date: date,
        modules: Optional[Collection[ModuleName]] = None,
        kind: Optional[EntryKind] = None,
    ) -> List[LedgerEntry]:
        """
        Retrieve a tenant's entries dated inside [start_date, end_date]

        Args:
            tenant_id: Tenant identifier
            start_date: Inclusive window start
            end_date: Inclusive window end
            modules: Optional set of source modules to keep
            kind: Optional entry kind to keep

        Returns:
            Entries ordered by entry_date ascending
        """
        pass

    @abstractmethod
    async def list_by_tenant(
        self,
        tenant_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        modules: Optional[Collection[ModuleName]] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> Tuple[List[LedgerEntry], int]:
        """
        Paginated entries of a tenant, newest first

        Returns:
            Tuple of (entries page, total matching count)
        """
        pass

    @abstractmethod
    async def list_all_by_tenant(self, tenant_id: str) -> List[LedgerEntry]:
        """Every entry of a tenant, ordered by entry_date ascending"""
        pass

    @abstractmethod
    async def get_source_activity_ids(self, tenant_id: Optional[str] = None) -> List[str]:
        """Distinct source_activity_id values of one tenant, or of the whole ledger when None"""
        pass

    @abstractmethod
    async def get_by_source_activities(self, source_activity_ids: List[str]) -> List[LedgerEntry]:
        """Retrieve every entry derived from any of the given activity records"""
        pass
