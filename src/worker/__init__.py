"""Background workers for the farm ledger service"""
from .ledger_auditor import LedgerAuditorWorker

__all__ = ["LedgerAuditorWorker"]
