from .activity_record_repository import ActivityRecordRepository
from .ledger_entry_repository import LedgerEntryRepository
from .farming_year_repository import FarmingYearRepository
from .budget_repository import BudgetRepository
from .subscription_repository import SubscriptionRepository

__all__ = [
    "ActivityRecordRepository",
    "LedgerEntryRepository",
    "FarmingYearRepository",
    "BudgetRepository",
    "SubscriptionRepository",
]
