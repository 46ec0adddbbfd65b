"""Ledger Entry Domain Entity

Derived financial row of the operational ledger. Every entry is traceable to
the activity record and line item that produced it.
"""

from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import CheckConstraint, UniqueConstraint, Numeric, String, Date
from src.domain.base import BaseModel, generate_uuid
from src.domain.activity_record import ModuleName
from src.domain.line_item import CostCategory, PaymentSource


class EntryKind(str, Enum):
    """Direction of money for a ledger entry"""
    EXPENSE = "Expense"
    INCOME = "Income"


class LedgerEntry(BaseModel, table=True):
    """
    Ledger Entry - One expense or income event

    Domain Rules:
    - amount is always positive; kind carries the direction
    - At most one live entry per (source_activity_id, source_line_item_id)
    - Never edited in place: deleted and recreated when the source line changes
    - Has no lifecycle of its own; lives exactly as long as its source line item
    """

    __tablename__ = "ledger_entries"
    __table_args__ = (
        CheckConstraint('amount > 0', name='amount_positive'),
        UniqueConstraint('source_activity_id', 'source_line_item_id', name='uq_ledger_entries_source'),
        Index('ix_ledger_entries_tenant_date', 'tenant_id', 'entry_date'),
        Index('ix_ledger_entries_source_module', 'source_module'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        sa_column=Column(String(36), primary_key=True),
        description="Unique entry identifier (uuid)"
    )

    tenant_id: str = Field(
        description="Farm (tenant) identifier"
    )

    entry_date: date = Field(
        sa_column=Column(Date, nullable=False),
        description="Date of the financial event"
    )

    description: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Copied from the source line item"
    )

    amount: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Positive amount (precision: 18,6)"
    )

    kind: EntryKind = Field(
        description="Expense or Income"
    )

    category: CostCategory = Field(
        description="Cost category of the source line item"
    )

    payment_source: Optional[PaymentSource] = Field(
        default=None,
        description="How the money moved"
    )

    source_module: ModuleName = Field(
        description="Module of the source activity record"
    )

    source_activity_id: str = Field(
        index=True,
        description="ID of the source activity record"
    )

    source_line_item_id: str = Field(
        description="ID of the source line item within the activity record"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Entry creation timestamp (immutable)"
    )

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": "5f0c2a8e-9d1b-4c3a-8e7f-1a2b3c4d5e6f",
                "tenant_id": "farm_abc123",
                "entry_date": "2024-01-10",
                "description": "Starter mash",
                "amount": "100.000000",
                "kind": "Expense",
                "category": "Material/Input",
                "payment_source": "Cash",
                "source_module": "Feeding",
                "source_activity_id": "0b8f4c1e-2f0a-4a57-9f59-6a1c8c0b7d11",
                "source_line_item_id": "li-1",
                "created_at": "2024-01-10T00:00:00Z"
            }
        }
