"""Ledger Consistency Audit Background Worker

Periodically audits the operational ledger for orphan entries and activity
totals that drifted from their ledger entries. Findings are logged for data
repair; nothing is modified.
"""

import asyncio
import logging
from datetime import datetime
from typing import Optional
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.repositories import SqlAlchemyActivityRecordRepository, SqlAlchemyLedgerEntryRepository
from src.app.use_cases.ledger import AuditLedgerConsistency, LedgerAuditResultDTO

logger = logging.getLogger(__name__)


class LedgerAuditorWorker:
    """
    Background worker for the ledger consistency audit

    Usage:
        # Run once
        worker = LedgerAuditorWorker()
        result = await worker.run_once()

        # Run continuously
        worker = LedgerAuditorWorker()
        await worker.run_forever(interval_seconds=86400)
    """

    def __init__(self, db_uri: Optional[str] = None):
        self.db_uri = db_uri or ApplicationConfig.DB_URI

        self.engine = create_async_engine(self.db_uri, echo=False, future=True)
        self.async_session_factory = sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
        )

        logger.info("LedgerAuditorWorker initialized")

    async def run_once(self, tenant_id: Optional[str] = None) -> LedgerAuditResultDTO:
        """
        Run the audit once

        Args:
            tenant_id: Audit a single tenant instead of the whole ledger

        Returns:
            LedgerAuditResultDTO with the findings
        """
        if not ApplicationConfig.AUDIT_ENABLED:
            logger.info("Ledger audit is disabled, skipping")
            return LedgerAuditResultDTO(
                activities_checked=0,
                orphan_entries=[],
                drifted_activities=[],
                audit_time=datetime.utcnow(),
                execution_time_ms=0,
            )

        async with self.async_session_factory() as session:
            use_case = AuditLedgerConsistency(
                activity_repo=SqlAlchemyActivityRecordRepository(session),
                ledger_repo=SqlAlchemyLedgerEntryRepository(session),
            )

            result = await use_case.execute(tenant_id=tenant_id)

            if result.is_err():
                logger.error(f"Ledger audit failed: {result.error.message}")
                raise RuntimeError(f"Ledger audit failed: {result.error.message}")

            response = result.value

            if response.violations_found > 0:
                logger.error(f"ALERT: {response.violations_found} ledger consistency violations found!")

            return response

    async def run_forever(self, interval_seconds: Optional[int] = None):
        interval_seconds = interval_seconds or ApplicationConfig.AUDIT_INTERVAL_SECONDS
        logger.info(f"Starting continuous ledger audit with {interval_seconds}s interval")

        while True:
            try:
                result = await self.run_once()
                logger.info(
                    f"Audit cycle complete. Checked {result.activities_checked} activities, "
                    f"found {len(result.orphan_entries)} orphans and "
                    f"{len(result.drifted_activities)} drifted totals in {result.execution_time_ms}ms"
                )
            except Exception as e:
                logger.error(f"Audit cycle failed: {e}")

            await asyncio.sleep(interval_seconds)

    async def shutdown(self):
        await self.engine.dispose()
        logger.info("LedgerAuditorWorker shutdown complete")


async def main():
    """
    Entry point for running the worker as a standalone script

    Usage:
        python -m src.worker.ledger_auditor --once
        python -m src.worker.ledger_auditor --once --tenant farm_abc123
        python -m src.worker.ledger_auditor --interval 3600
    """
    import argparse

    logging.basicConfig(
        level=getattr(logging, str(ApplicationConfig.LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="Ledger Consistency Audit Worker")
    parser.add_argument("--once", action="store_true", help="Run once and exit")
    parser.add_argument("--tenant", default=None, help="Audit a single tenant")
    parser.add_argument(
        "--interval", type=int, default=ApplicationConfig.AUDIT_INTERVAL_SECONDS,
        help="Interval between runs in seconds (default: AUDIT_INTERVAL_SECONDS)"
    )
    args = parser.parse_args()

    worker = LedgerAuditorWorker()

    try:
        if args.once:
            result = await worker.run_once(tenant_id=args.tenant)
            print("Ledger audit complete:")
            print(f"  Activities checked: {result.activities_checked}")
            print(f"  Orphan entries: {len(result.orphan_entries)}")
            print(f"  Drifted activities: {len(result.drifted_activities)}")
            print(f"  Execution time: {result.execution_time_ms}ms")
            for o in result.orphan_entries:
                print(f"  - Orphan {o.entry_id} ({o.source_module}) -> missing activity {o.source_activity_id}")
            for d in result.drifted_activities:
                print(
                    f"  - Drift on {d.activity_id} ({d.module_name}): "
                    f"cost {d.recorded_total_cost} vs {d.ledger_total_cost}, "
                    f"income {d.recorded_total_income} vs {d.ledger_total_income}"
                )
        else:
            await worker.run_forever(interval_seconds=args.interval)
    except KeyboardInterrupt:
        logger.info("Received shutdown signal")
    finally:
        await worker.shutdown()


if __name__ == "__main__":
    asyncio.run(main())
