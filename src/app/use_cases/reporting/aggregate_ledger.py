"""AggregateLedger Use Case

Financial dashboard summary of a tenant's ledger over a reporting window,
optionally narrowed to a set of source modules.
"""

import logging
from datetime import date
from typing import Optional, Set
from libs.result import Result, Return, Error
from src.app.repositories.ledger_entry_repository import LedgerEntryRepository
from src.domain.activity_record import ModuleName
from .dtos import LedgerSummaryDTO, WindowScopeDTO
from .projections import summarize_entries
from .resolve_window import ResolveWindow

logger = logging.getLogger(__name__)


class AggregateLedger:
    """
    Use Case: Summarize ledger entries of a window

    Business Rules:
    1. Only entries of the tenant, dated inside the window, from the selected
       modules (all when no filter) are counted
    2. profit_margin is 0 when there is no income
    3. An unknown farming year or season yields an empty summary with
       scope_found=False, not an error
    4. Read-only
    """

    def __init__(self, window_resolver: ResolveWindow, ledger_repo: LedgerEntryRepository):
        self.window_resolver = window_resolver
        self.ledger_repo = ledger_repo

    async def execute(
        self,
        tenant_id: str,
        scope: WindowScopeDTO,
        modules: Optional[Set[ModuleName]] = None,
        today: Optional[date] = None,
    ) -> Result[LedgerSummaryDTO]:
        module_names = sorted(m.value for m in modules) if modules else None

        window_result = await self.window_resolver.execute(tenant_id, scope, today=today)
        if window_result.is_err():
            if window_result.error.code == "SCOPE_NOT_FOUND":
                logger.info(f"Scope not found for tenant {tenant_id}: {window_result.error.message}")
                return Return.ok(LedgerSummaryDTO(scope_found=False, modules=module_names))
            return Return.err(window_result.error)

        window = window_result.value

        try:
            entries = await self.ledger_repo.find_in_window(
                tenant_id=tenant_id,
                start_date=window.start_date,
                end_date=window.end_date,
                modules=modules,
            )
        except Exception as e:
            logger.error(f"Ledger aggregation failed for tenant {tenant_id}: {e}")
            return Return.err(
                Error(
                    code="AGGREGATION_FAILED",
                    message="Failed to aggregate ledger entries",
                    reason=str(e),
                )
            )

        summary = summarize_entries(entries)
        summary.window = window
        summary.modules = module_names
        return Return.ok(summary)
