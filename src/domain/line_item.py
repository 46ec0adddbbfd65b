"""Line Item Value Objects

Cost and sale lines embedded in an ActivityRecord. Totals are always derived
from quantity and unit price, never taken from input.
"""

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, computed_field
from src.domain.base import generate_uuid


class CostCategory(str, Enum):
    """Operational cost categories"""
    MATERIAL_INPUT = "Material/Input"
    LABOR = "Labor"
    EQUIPMENT_RENTAL = "Equipment Rental"
    SERVICES = "Services"
    UTILITIES = "Utilities"
    PAYROLL = "Payroll"
    SALES = "Sales"
    OTHER = "Other"


class PaymentSource(str, Enum):
    """How money left (or reached) the farm"""
    CASH = "Cash"
    BANK = "Bank"
    MOBILE_MONEY = "Mobile Money"
    CREDIT_PAYABLE = "Credit (Payable)"


class LineItem(BaseModel):
    """
    Line Item - One itemized cost within an activity record

    Domain Rules:
    - quantity and unit_price are positive (validated upstream)
    - total = quantity * unit_price, recomputed on every access
    - id is stable across edits so ledger entries can be traced back
    """

    id: str = Field(default_factory=generate_uuid)
    description: str
    category: CostCategory
    payment_source: PaymentSource
    unit: str = "unit"
    quantity: Decimal = Field(gt=0)
    unit_price: Decimal = Field(gt=0)

    @computed_field
    @property
    def total(self) -> Decimal:
        return self.quantity * self.unit_price


class SaleItem(BaseModel):
    """
    Sale Item - One itemized sale within an activity record

    Only modules that record sales (harvesting) accept sale items.
    sale_date falls back to the record's effective date when missing.
    """

    id: str = Field(default_factory=generate_uuid)
    description: str = "Sale"
    buyer: Optional[str] = None
    unit: str = "unit"
    quantity: Decimal = Field(gt=0)
    unit_price: Decimal = Field(gt=0)
    sale_date: Optional[date] = None
    payment_source: PaymentSource

    @computed_field
    @property
    def total(self) -> Decimal:
        return self.quantity * self.unit_price
