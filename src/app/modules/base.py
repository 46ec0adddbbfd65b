"""Generic activity module

Every farm module saves the same way: parse its own details, turn the form's
line items into processed items, derive totals, and emit one ledger entry per
item. Modules differ only in their details schema and in how line items are
derived, which subclasses override.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar
from pydantic import BaseModel
from src.domain.activity_record import ActivityRecord, ModuleName
from src.domain.ledger_entry import LedgerEntry, EntryKind
from src.domain.line_item import CostCategory, LineItem, SaleItem

DetailsT = TypeVar("DetailsT", bound=BaseModel)


@dataclass(frozen=True)
class ProcessedItems:
    """Line items as persisted, with the totals derived from them"""

    line_items: List[LineItem]
    sale_items: List[SaleItem]
    total_cost: Decimal
    total_income: Optional[Decimal]


class ActivityModule(Generic[DetailsT]):
    """
    One farm module (feeding, harvesting, payroll, ...)

    Args:
        name: Module name stamped on records and ledger entries
        details_model: Pydantic model of the module-specific fields
        records_sales: Whether the module accepts sale items (Income entries)
    """

    def __init__(
        self,
        name: ModuleName,
        details_model: Type[DetailsT],
        records_sales: bool = False,
    ):
        self.name = name
        self.details_model = details_model
        self.records_sales = records_sales

    @property
    def slug(self) -> str:
        return self.name.value.lower().replace(" ", "-")

    def parse_details(self, raw: Optional[Dict[str, Any]]) -> DetailsT:
        return self.details_model.model_validate(raw or {})

    def to_line_items(
        self, activity_id: str, details: DetailsT, line_items: List[LineItem]
    ) -> List[LineItem]:
        """Cost items to persist for this record. Defaults to the submitted items."""
        return list(line_items)

    def to_sale_items(self, details: DetailsT, sale_items: List[SaleItem]) -> List[SaleItem]:
        if not self.records_sales:
            return []
        return list(sale_items)

    def process(
        self,
        activity_id: str,
        details: DetailsT,
        line_items: List[LineItem],
        sale_items: List[SaleItem],
    ) -> ProcessedItems:
        costs = self.to_line_items(activity_id, details, line_items)
        sales = self.to_sale_items(details, sale_items)

        total_cost = sum((item.total for item in costs), Decimal("0"))
        total_income = (
            sum((item.total for item in sales), Decimal("0")) if self.records_sales else None
        )
        return ProcessedItems(
            line_items=costs,
            sale_items=sales,
            total_cost=total_cost,
            total_income=total_income,
        )

    def to_ledger_entries(self, record: ActivityRecord, items: ProcessedItems) -> List[LedgerEntry]:
        """One Expense per cost item and one Income per sale item"""
        entries = [
            LedgerEntry(
                tenant_id=record.tenant_id,
                entry_date=record.effective_date,
                description=item.description,
                amount=item.total,
                kind=EntryKind.EXPENSE,
                category=item.category,
                payment_source=item.payment_source,
                source_module=self.name,
                source_activity_id=record.id,
                source_line_item_id=item.id,
            )
            for item in items.line_items
        ]

        for sale in items.sale_items:
            entries.append(
                LedgerEntry(
                    tenant_id=record.tenant_id,
                    entry_date=sale.sale_date or record.effective_date,
                    description=f"Sale to {sale.buyer}" if sale.buyer else sale.description,
                    amount=sale.total,
                    kind=EntryKind.INCOME,
                    category=CostCategory.SALES,
                    payment_source=sale.payment_source,
                    source_module=self.name,
                    source_activity_id=record.id,
                    source_line_item_id=sale.id,
                )
            )

        return entries
