"""Budget Domain Entity

Planned-spending envelope of a farm. Budgets never reference ledger entries;
actual spending is reconciled against the ledger on every read.
"""

from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Optional
from pydantic import BaseModel as ValueObject, Field as ValueField
from sqlmodel import Field, Column, Index
from sqlalchemy import JSON, String, Date, Text
from src.domain.base import BaseModel, generate_uuid


class BudgetType(str, Enum):
    """Budget scopes offered to farms"""
    FARM_OPERATIONS = "Farm Operations"
    OFFICE_MANAGEMENT = "Office Management"


class BudgetCategory(ValueObject):
    """Budgeted amount for one spending category"""

    id: str = ValueField(default_factory=generate_uuid)
    name: str
    budgeted_amount: Decimal = ValueField(ge=0)
    notes: Optional[str] = None


class Budget(BaseModel, table=True):
    """
    Budget - Named date range with budgeted categories

    Domain Rules:
    - start_date <= end_date
    - Totals, actual spending, variance and utilization are derived on read
      and never stored as source of truth
    """

    __tablename__ = "budgets"
    __table_args__ = (
        Index('ix_budgets_tenant_id', 'tenant_id'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        sa_column=Column(String(36), primary_key=True),
        description="Unique budget identifier (uuid)"
    )

    tenant_id: str = Field(
        description="Farm (tenant) identifier"
    )

    name: str = Field(
        sa_column=Column(String(150), nullable=False),
        description="Display name (e.g., '2024 Maize Season Budget')"
    )

    budget_type: BudgetType = Field(
        default=BudgetType.FARM_OPERATIONS,
        description="Farm Operations or Office Management"
    )

    start_date: date = Field(
        sa_column=Column(Date, nullable=False),
        description="First day covered by the budget"
    )

    end_date: date = Field(
        sa_column=Column(Date, nullable=False),
        description="Last day covered by the budget"
    )

    categories: List[Dict[str, Any]] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
        description="Budgeted categories"
    )

    notes: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
        description="Free-form notes"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Last update timestamp"
    )

    def get_categories(self) -> List[BudgetCategory]:
        return [BudgetCategory.model_validate(c) for c in self.categories or []]

    @property
    def total_budgeted_amount(self) -> Decimal:
        return sum((c.budgeted_amount for c in self.get_categories()), Decimal("0"))
