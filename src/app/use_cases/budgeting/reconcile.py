"""Budget reconciliation against ledger entries"""

from decimal import Decimal
from typing import Iterable
from src.app.use_cases.reporting.projections import percentage
from src.domain.budget import Budget
from src.domain.ledger_entry import EntryKind, LedgerEntry
from .dtos import ReconciliationDTO


def reconcile(budget: Budget, entries: Iterable[LedgerEntry]) -> ReconciliationDTO:
    """
    Compare a budget with actual spending.

    Only Expense entries dated inside [budget.start_date, budget.end_date]
    count. Spending is budget-wide; categories are not matched to entries.
    """
    budgeted = budget.total_budgeted_amount
    actual = sum(
        (
            e.amount
            for e in entries
            if e.kind == EntryKind.EXPENSE and budget.start_date <= e.entry_date <= budget.end_date
        ),
        Decimal("0"),
    )
    return ReconciliationDTO(
        total_budgeted_amount=budgeted,
        total_actual_spending=actual,
        total_variance=budgeted - actual,
        utilization=percentage(actual, budgeted),
    )
