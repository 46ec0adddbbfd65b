"""
List Ledger Entries Use Case

Retrieves the operational ledger of a tenant with pagination.
"""
from datetime import date
from typing import Optional, Set
from libs.result import Result, Return, Error
from src.app.repositories.ledger_entry_repository import LedgerEntryRepository
from src.domain.activity_record import ModuleName
from .dtos import ListLedgerEntriesResponseDTO, LedgerEntryDTO


class ListLedgerEntries:
    """
    Use case: View ledger entries

    Entries are ordered by entry_date DESC (most recent first) and can be
    narrowed to a date range and a set of source modules.
    """

    def __init__(self, ledger_repo: LedgerEntryRepository):
        self.ledger_repo = ledger_repo

    async def execute(
        self,
        tenant_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        modules: Optional[Set[ModuleName]] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> Result[ListLedgerEntriesResponseDTO]:
        """
        List ledger entries for a tenant with pagination.

        Args:
            tenant_id: Tenant identifier
            start_date: Optional inclusive lower bound
            end_date: Optional inclusive upper bound
            modules: Optional set of source modules
            limit: Maximum number of entries to return
            offset: Number of entries to skip

        Returns:
            Result[ListLedgerEntriesResponseDTO]: Paginated entry list
        """
        if start_date and end_date and start_date > end_date:
            return Return.err(
                Error(
                    code="INVALID_WINDOW",
                    message="start_date must not be after end_date",
                    reason=f"start_date={start_date}, end_date={end_date}",
                )
            )

        entries, total = await self.ledger_repo.list_by_tenant(
            tenant_id=tenant_id,
            start_date=start_date,
            end_date=end_date,
            modules=modules,
            limit=limit,
            offset=offset,
        )

        return Return.ok(
            ListLedgerEntriesResponseDTO(
                entries=[LedgerEntryDTO.from_entry(e) for e in entries],
                total=total,
                limit=limit,
                offset=offset,
            )
        )
