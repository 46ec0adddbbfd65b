"""Pure read-side projections over ledger entries

Nothing here touches storage; callers pass in the entries they already
selected for a window.
"""

from collections import defaultdict
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List, Tuple
from src.domain.ledger_entry import LedgerEntry, EntryKind
from src.domain.line_item import CostCategory
from .dtos import CategoryPointDTO, LedgerSummaryDTO, MonthlyPointDTO

ZERO = Decimal("0")
CENT = Decimal("0.01")


def percentage(part: Decimal, whole: Decimal) -> Decimal:
    """part / whole as a 0-100 percentage rounded to cents; 0 when whole is 0"""
    if not whole:
        return ZERO
    return (Decimal(part) / Decimal(whole) * 100).quantize(CENT, rounding=ROUND_HALF_UP)


def summarize_entries(entries: Iterable[LedgerEntry]) -> LedgerSummaryDTO:
    """
    Totals, profit/loss, monthly series and expense categories of entries

    - Monthly points exist only for months present in the data
    - Categories are expense-only, sorted by amount descending
    """
    total_income = ZERO
    total_expense = ZERO
    monthly: Dict[Tuple[int, int], Dict[str, Decimal]] = defaultdict(
        lambda: {"income": ZERO, "expense": ZERO}
    )
    categories: Dict[str, Decimal] = defaultdict(lambda: ZERO)
    count = 0

    for entry in entries:
        count += 1
        month_key = (entry.entry_date.year, entry.entry_date.month)
        amount = Decimal(entry.amount)

        if entry.kind == EntryKind.INCOME:
            total_income += amount
            monthly[month_key]["income"] += amount
        else:
            total_expense += amount
            monthly[month_key]["expense"] += amount
            category = CostCategory(entry.category).value
            categories[category] += amount

    net = total_income - total_expense

    monthly_points: List[MonthlyPointDTO] = []
    for (year, month) in sorted(monthly):
        point = monthly[(year, month)]
        monthly_points.append(
            MonthlyPointDTO(
                month=_month_label(year, month),
                income=point["income"],
                expense=point["expense"],
            )
        )

    category_points = [
        CategoryPointDTO(name=name, total=total, percentage=percentage(total, total_expense))
        for name, total in sorted(categories.items(), key=lambda kv: kv[1], reverse=True)
    ]

    return LedgerSummaryDTO(
        total_income=total_income,
        total_expense=total_expense,
        net_profit_loss=net,
        profit_margin=percentage(net, total_income),
        monthly=monthly_points,
        categories=category_points,
        entry_count=count,
    )


_MONTH_ABBR = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]


def _month_label(year: int, month: int) -> str:
    # Locale-independent '%b %y'
    return f"{_MONTH_ABBR[month - 1]} {year % 100:02d}"
