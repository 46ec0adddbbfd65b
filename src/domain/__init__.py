from .base import BaseModel, generate_uuid
from .line_item import LineItem, SaleItem, CostCategory, PaymentSource
from .activity_record import ActivityRecord, ModuleName
from .ledger_entry import LedgerEntry, EntryKind
from .farming_year import FarmingYear, Season
from .budget import Budget, BudgetCategory, BudgetType
from .subscription import Subscription, SubscriptionStatus, PlanId, BillingCycle

__all__ = [
    "BaseModel",
    "generate_uuid",
    "LineItem",
    "SaleItem",
    "CostCategory",
    "PaymentSource",
    "ActivityRecord",
    "ModuleName",
    "LedgerEntry",
    "EntryKind",
    "FarmingYear",
    "Season",
    "Budget",
    "BudgetCategory",
    "BudgetType",
    "Subscription",
    "SubscriptionStatus",
    "PlanId",
    "BillingCycle",
]
