"""Unit tests for LedgerAuditorWorker

Tests cover:
- Worker initialization with configuration
- run_once execution and the disabled switch
- Failure propagation
- run_forever surviving a failed cycle
- Shutdown and cleanup
"""

import asyncio
import pytest
from datetime import datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock, patch

from src.app.use_cases.ledger.dtos import LedgerAuditResultDTO, TotalDriftDTO
from src.worker.ledger_auditor import LedgerAuditorWorker


@pytest.fixture
def clean_result():
    return LedgerAuditResultDTO(
        activities_checked=12,
        orphan_entries=[],
        drifted_activities=[],
        audit_time=datetime.utcnow(),
        execution_time_ms=35,
    )


@pytest.fixture
def drift_result():
    return LedgerAuditResultDTO(
        activities_checked=12,
        orphan_entries=[],
        drifted_activities=[
            TotalDriftDTO(
                activity_id="act_1",
                tenant_id="farm_1",
                module_name="Feeding",
                recorded_total_cost=Decimal("150"),
                ledger_total_cost=Decimal("100"),
                recorded_total_income=None,
                ledger_total_income=Decimal("0"),
            )
        ],
        audit_time=datetime.utcnow(),
        execution_time_ms=40,
    )


def session_factory_mock():
    mock_session = MagicMock()
    mock_session.__aenter__ = AsyncMock(return_value=mock_session)
    mock_session.__aexit__ = AsyncMock(return_value=False)
    return MagicMock(return_value=mock_session)


def use_case_mock(value=None, error=None):
    mock_use_case = MagicMock()
    mock_result = MagicMock()
    mock_result.is_err.return_value = error is not None
    mock_result.value = value
    mock_result.error = error
    mock_use_case.execute = AsyncMock(return_value=mock_result)
    return mock_use_case


class TestLedgerAuditorWorkerInit:

    @patch("src.worker.ledger_auditor.ApplicationConfig")
    @patch("src.worker.ledger_auditor.create_async_engine")
    def test_initializes_with_default_config(self, mock_create_engine, mock_app_config):
        mock_app_config.DB_URI = "sqlite+aiosqlite:///./default.db"

        worker = LedgerAuditorWorker()

        assert worker.db_uri == "sqlite+aiosqlite:///./default.db"
        mock_create_engine.assert_called_once()

    @patch("src.worker.ledger_auditor.create_async_engine")
    def test_initializes_with_custom_db_uri(self, mock_create_engine):
        worker = LedgerAuditorWorker(db_uri="postgresql+asyncpg://custom@localhost/farm")

        assert worker.db_uri == "postgresql+asyncpg://custom@localhost/farm"


@pytest.mark.asyncio
class TestLedgerAuditorWorkerRunOnce:

    @patch("src.worker.ledger_auditor.ApplicationConfig")
    @patch("src.worker.ledger_auditor.AuditLedgerConsistency")
    @patch("src.worker.ledger_auditor.SqlAlchemyActivityRecordRepository")
    @patch("src.worker.ledger_auditor.SqlAlchemyLedgerEntryRepository")
    @patch("src.worker.ledger_auditor.create_async_engine")
    @patch("src.worker.ledger_auditor.sessionmaker")
    async def test_run_once_executes_audit(
        self,
        mock_sessionmaker,
        mock_create_engine,
        mock_ledger_repo_class,
        mock_activity_repo_class,
        mock_use_case_class,
        mock_app_config,
        clean_result,
    ):
        mock_app_config.AUDIT_ENABLED = True
        mock_sessionmaker.return_value = session_factory_mock()
        mock_use_case = use_case_mock(value=clean_result)
        mock_use_case_class.return_value = mock_use_case

        worker = LedgerAuditorWorker()
        result = await worker.run_once(tenant_id="farm_1")

        assert result.activities_checked == 12
        assert result.violations_found == 0
        mock_use_case.execute.assert_called_once_with(tenant_id="farm_1")

    @patch("src.worker.ledger_auditor.ApplicationConfig")
    @patch("src.worker.ledger_auditor.AuditLedgerConsistency")
    @patch("src.worker.ledger_auditor.create_async_engine")
    async def test_run_once_skips_when_disabled(
        self, mock_create_engine, mock_use_case_class, mock_app_config
    ):
        mock_app_config.AUDIT_ENABLED = False

        worker = LedgerAuditorWorker()
        result = await worker.run_once()

        assert result.activities_checked == 0
        assert result.execution_time_ms == 0
        mock_use_case_class.assert_not_called()

    @patch("src.worker.ledger_auditor.ApplicationConfig")
    @patch("src.worker.ledger_auditor.AuditLedgerConsistency")
    @patch("src.worker.ledger_auditor.SqlAlchemyActivityRecordRepository")
    @patch("src.worker.ledger_auditor.SqlAlchemyLedgerEntryRepository")
    @patch("src.worker.ledger_auditor.create_async_engine")
    @patch("src.worker.ledger_auditor.sessionmaker")
    async def test_run_once_returns_violations(
        self,
        mock_sessionmaker,
        mock_create_engine,
        mock_ledger_repo_class,
        mock_activity_repo_class,
        mock_use_case_class,
        mock_app_config,
        drift_result,
    ):
        mock_app_config.AUDIT_ENABLED = True
        mock_sessionmaker.return_value = session_factory_mock()
        mock_use_case_class.return_value = use_case_mock(value=drift_result)

        worker = LedgerAuditorWorker()
        result = await worker.run_once()

        assert result.violations_found == 1
        assert result.drifted_activities[0].activity_id == "act_1"

    @patch("src.worker.ledger_auditor.ApplicationConfig")
    @patch("src.worker.ledger_auditor.AuditLedgerConsistency")
    @patch("src.worker.ledger_auditor.SqlAlchemyActivityRecordRepository")
    @patch("src.worker.ledger_auditor.SqlAlchemyLedgerEntryRepository")
    @patch("src.worker.ledger_auditor.create_async_engine")
    @patch("src.worker.ledger_auditor.sessionmaker")
    async def test_run_once_raises_on_audit_error(
        self,
        mock_sessionmaker,
        mock_create_engine,
        mock_ledger_repo_class,
        mock_activity_repo_class,
        mock_use_case_class,
        mock_app_config,
    ):
        mock_app_config.AUDIT_ENABLED = True
        mock_sessionmaker.return_value = session_factory_mock()
        error = MagicMock()
        error.message = "Failed to audit ledger consistency"
        mock_use_case_class.return_value = use_case_mock(error=error)

        worker = LedgerAuditorWorker()

        with pytest.raises(RuntimeError, match="Ledger audit failed"):
            await worker.run_once()


@pytest.mark.asyncio
class TestLedgerAuditorWorkerLifecycle:

    @patch("src.worker.ledger_auditor.create_async_engine")
    async def test_run_forever_continues_after_failure(self, mock_create_engine, clean_result):
        worker = LedgerAuditorWorker(db_uri="sqlite+aiosqlite://")
        worker.run_once = AsyncMock(side_effect=[Exception("db down"), clean_result])

        with patch("src.worker.ledger_auditor.asyncio.sleep", new=AsyncMock(
            side_effect=[None, asyncio.CancelledError()]
        )):
            with pytest.raises(asyncio.CancelledError):
                await worker.run_forever(interval_seconds=1)

        assert worker.run_once.call_count == 2

    @patch("src.worker.ledger_auditor.create_async_engine")
    async def test_shutdown_disposes_engine(self, mock_create_engine):
        mock_engine = MagicMock()
        mock_engine.dispose = AsyncMock()
        mock_create_engine.return_value = mock_engine

        worker = LedgerAuditorWorker(db_uri="sqlite+aiosqlite://")
        await worker.shutdown()

        mock_engine.dispose.assert_called_once()
