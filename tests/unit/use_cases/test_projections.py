"""Unit tests for ledger summary projections"""

from datetime import date
from decimal import Decimal

from src.app.use_cases.reporting.projections import percentage, summarize_entries
from src.domain.activity_record import ModuleName
from src.domain.ledger_entry import EntryKind, LedgerEntry
from src.domain.line_item import CostCategory


def entry(day, kind, amount, category=CostCategory.OTHER):
    return LedgerEntry(
        tenant_id="farm_1",
        entry_date=day,
        description="entry",
        amount=Decimal(amount),
        kind=kind,
        category=category,
        source_module=ModuleName.FEEDING,
        source_activity_id="act_1",
        source_line_item_id=f"li_{day.isoformat()}_{amount}",
    )


class TestPercentage:

    def test_rounds_half_up_to_cents(self):
        assert percentage(Decimal("200"), Decimal("300")) == Decimal("66.67")
        assert percentage(Decimal("1"), Decimal("8")) == Decimal("12.50")

    def test_zero_divisor_is_zero(self):
        assert percentage(Decimal("50"), Decimal("0")) == Decimal("0")


class TestSummarizeEntries:

    def test_january_summary(self):
        entries = [
            entry(date(2024, 1, 10), EntryKind.EXPENSE, "100", CostCategory.LABOR),
            entry(date(2024, 1, 20), EntryKind.INCOME, "300", CostCategory.SALES),
        ]

        summary = summarize_entries(entries)

        assert summary.total_expense == Decimal("100")
        assert summary.total_income == Decimal("300")
        assert summary.net_profit_loss == Decimal("200")
        assert summary.profit_margin == Decimal("66.67")
        assert len(summary.monthly) == 1
        assert summary.monthly[0].month == "Jan 24"
        assert summary.monthly[0].income == Decimal("300")
        assert summary.monthly[0].expense == Decimal("100")
        assert len(summary.categories) == 1
        assert summary.categories[0].name == "Labor"
        assert summary.categories[0].total == Decimal("100")
        assert summary.categories[0].percentage == Decimal("100")
        assert summary.entry_count == 2

    def test_categories_stored_as_plain_strings(self):
        summary = summarize_entries([
            entry(date(2024, 1, 10), EntryKind.EXPENSE, "60", "Labor"),
            entry(date(2024, 1, 11), EntryKind.EXPENSE, "40", CostCategory.LABOR),
        ])

        assert [(c.name, c.total) for c in summary.categories] == [("Labor", Decimal("100"))]

    def test_no_income_means_zero_margin(self):
        summary = summarize_entries([entry(date(2024, 3, 1), EntryKind.EXPENSE, "40")])

        assert summary.total_income == Decimal("0")
        assert summary.net_profit_loss == Decimal("-40")
        assert summary.profit_margin == Decimal("0")

    def test_empty_input(self):
        summary = summarize_entries([])

        assert summary.total_income == Decimal("0")
        assert summary.total_expense == Decimal("0")
        assert summary.monthly == []
        assert summary.categories == []

    def test_months_sorted_chronologically_across_years(self):
        summary = summarize_entries([
            entry(date(2025, 1, 5), EntryKind.EXPENSE, "10"),
            entry(date(2024, 12, 5), EntryKind.EXPENSE, "10"),
            entry(date(2024, 2, 5), EntryKind.INCOME, "10"),
        ])

        assert [m.month for m in summary.monthly] == ["Feb 24", "Dec 24", "Jan 25"]

    def test_categories_sorted_descending_with_shares(self):
        summary = summarize_entries([
            entry(date(2024, 1, 1), EntryKind.EXPENSE, "25", CostCategory.UTILITIES),
            entry(date(2024, 1, 2), EntryKind.EXPENSE, "75", CostCategory.MATERIAL_INPUT),
            entry(date(2024, 1, 3), EntryKind.INCOME, "500", CostCategory.SALES),
        ])

        assert [(c.name, c.percentage) for c in summary.categories] == [
            ("Material/Input", Decimal("75.00")),
            ("Utilities", Decimal("25.00")),
        ]
