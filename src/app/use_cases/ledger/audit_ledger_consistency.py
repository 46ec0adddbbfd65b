"""AuditLedgerConsistency Use Case

Looks for ledger state that atomic saves should make impossible: entries
whose source activity is gone, and activity totals that disagree with their
ledger entries. Findings are data-repair work, never runtime errors.
"""

import logging
import time
from collections import defaultdict
from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional
from libs.result import Result, Return, Error
from src.app.repositories.activity_record_repository import ActivityRecordRepository
from src.app.repositories.ledger_entry_repository import LedgerEntryRepository
from src.domain.activity_record import ModuleName
from src.domain.ledger_entry import LedgerEntry, EntryKind
from .dtos import LedgerAuditResultDTO, OrphanEntryDTO, TotalDriftDTO

logger = logging.getLogger(__name__)


class AuditLedgerConsistency:
    """
    Use Case: Audit ledger entries against their source activity records

    Business Rules:
    1. Orphan: entry whose source_activity_id matches no activity record
    2. Drift: record whose total_cost (total_income) differs from the sum of
       its Expense (Income) entries
    3. Read-only: nothing is repaired or deleted here
    """

    def __init__(
        self,
        activity_repo: ActivityRecordRepository,
        ledger_repo: LedgerEntryRepository,
    ):
        self.activity_repo = activity_repo
        self.ledger_repo = ledger_repo

    async def execute(self, tenant_id: Optional[str] = None) -> Result[LedgerAuditResultDTO]:
        """
        Execute the audit

        Args:
            tenant_id: Limit the audit to one tenant (all tenants when None)

        Returns:
            Result[LedgerAuditResultDTO]: Findings of the audit
        """
        start_time = time.time()
        audit_time = datetime.utcnow()

        try:
            logger.info("Starting ledger consistency audit")

            # Step 1: Orphans
            source_ids = await self.ledger_repo.get_source_activity_ids(tenant_id)
            existing_ids = set(await self.activity_repo.get_existing_ids(source_ids))
            missing_ids = [sid for sid in source_ids if sid not in existing_ids]

            orphan_entries: List[OrphanEntryDTO] = []
            for entry in await self.ledger_repo.get_by_source_activities(missing_ids):
                orphan_entries.append(
                    OrphanEntryDTO(
                        entry_id=entry.id,
                        tenant_id=entry.tenant_id,
                        source_module=ModuleName(entry.source_module).value,
                        source_activity_id=entry.source_activity_id,
                        amount=entry.amount,
                    )
                )
                logger.warning(
                    f"Orphan ledger entry {entry.id} (tenant {entry.tenant_id}): "
                    f"source activity {entry.source_activity_id} no longer exists"
                )

            # Step 2: Drift
            drifted: List[TotalDriftDTO] = []
            if tenant_id:
                records = await self.activity_repo.list_by_tenant(tenant_id)
            else:
                records = await self.activity_repo.list_all()
            entries = await self.ledger_repo.get_by_source_activities([r.id for r in records])
            by_activity: Dict[str, List[LedgerEntry]] = defaultdict(list)
            for entry in entries:
                by_activity[entry.source_activity_id].append(entry)

            for record in records:
                related = by_activity.get(record.id, [])
                ledger_cost = _sum_kind(related, EntryKind.EXPENSE)
                ledger_income = _sum_kind(related, EntryKind.INCOME)
                recorded_income = record.total_income or Decimal("0")

                if record.total_cost != ledger_cost or recorded_income != ledger_income:
                    drifted.append(
                        TotalDriftDTO(
                            activity_id=record.id,
                            tenant_id=record.tenant_id,
                            module_name=ModuleName(record.module_name).value,
                            recorded_total_cost=record.total_cost,
                            ledger_total_cost=ledger_cost,
                            recorded_total_income=record.total_income,
                            ledger_total_income=ledger_income,
                        )
                    )
                    logger.warning(
                        f"Total drift on activity {record.id} (tenant {record.tenant_id}): "
                        f"recorded cost={record.total_cost}, ledger cost={ledger_cost}, "
                        f"recorded income={record.total_income}, ledger income={ledger_income}"
                    )

            execution_time_ms = int((time.time() - start_time) * 1000)

            response = LedgerAuditResultDTO(
                activities_checked=len(records),
                orphan_entries=orphan_entries,
                drifted_activities=drifted,
                audit_time=audit_time,
                execution_time_ms=execution_time_ms,
            )

            if response.violations_found:
                logger.warning(
                    f"Audit complete. Found {len(orphan_entries)} orphan entries and "
                    f"{len(drifted)} drifted activities in {execution_time_ms}ms"
                )
            else:
                logger.info(f"Audit complete. Ledger consistent in {execution_time_ms}ms")

            return Return.ok(response)

        except Exception as e:
            logger.error(f"Ledger consistency audit failed: {e}")
            return Return.err(
                Error(
                    code="AUDIT_FAILED",
                    message="Failed to audit ledger consistency",
                    reason=str(e),
                )
            )


def _sum_kind(entries: List[LedgerEntry], kind: EntryKind) -> Decimal:
    return sum((e.amount for e in entries if e.kind == kind), Decimal("0"))
