from .activity_record_repository import SqlAlchemyActivityRecordRepository
from .ledger_entry_repository import SqlAlchemyLedgerEntryRepository
from .farming_year_repository import SqlAlchemyFarmingYearRepository
from .budget_repository import SqlAlchemyBudgetRepository
from .subscription_repository import SqlAlchemySubscriptionRepository

__all__ = [
    "SqlAlchemyActivityRecordRepository",
    "SqlAlchemyLedgerEntryRepository",
    "SqlAlchemyFarmingYearRepository",
    "SqlAlchemyBudgetRepository",
    "SqlAlchemySubscriptionRepository",
]
