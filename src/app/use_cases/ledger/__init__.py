"""Activity record and ledger use cases"""
from .save_activity_record import SaveActivityRecord
from .delete_activity_record import DeleteActivityRecord
from .get_activity_record import GetActivityRecord
from .list_activity_records import ListActivityRecords
from .list_ledger_entries import ListLedgerEntries
from .audit_ledger_consistency import AuditLedgerConsistency
from .dtos import (
    SaveActivityCommandDTO,
    ActivityRecordResponseDTO,
    DeleteActivityResponseDTO,
    LedgerEntryDTO,
    ListLedgerEntriesResponseDTO,
    OrphanEntryDTO,
    TotalDriftDTO,
    LedgerAuditResultDTO,
)

__all__ = [
    "SaveActivityRecord",
    "DeleteActivityRecord",
    "GetActivityRecord",
    "ListActivityRecords",
    "ListLedgerEntries",
    "AuditLedgerConsistency",
    "SaveActivityCommandDTO",
    "ActivityRecordResponseDTO",
    "DeleteActivityResponseDTO",
    "LedgerEntryDTO",
    "ListLedgerEntriesResponseDTO",
    "OrphanEntryDTO",
    "TotalDriftDTO",
    "LedgerAuditResultDTO",
]
