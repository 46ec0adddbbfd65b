"""Activity Record Domain Entity

Operational log entry of one farm module (a feeding, a harvest, a payroll run)
carrying its cost and sale line items and their denormalized totals.
"""

from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import JSON, Numeric, String, Date
from src.domain.base import BaseModel, generate_uuid
from src.domain.line_item import LineItem, SaleItem


class ModuleName(str, Enum):
    """Farm modules that record activities"""
    BREEDING = "Breeding"
    FEEDING = "Feeding"
    HEALTH = "Health"
    HOUSING = "Housing"
    LAND_PREPARATION = "Land Preparation"
    PLANTING = "Planting"
    CROP_MAINTENANCE = "Crop Maintenance"
    HARVESTING = "Harvesting"
    SOIL_TEST = "Soil Test"
    PAYROLL = "Payroll"
    EVENT = "Event"
    ASSET = "Asset"


class ActivityRecord(BaseModel, table=True):
    """
    Activity Record - Domain record of one module plus its line items

    Domain Rules:
    - Owned by exactly one module (module_name never changes after creation)
    - total_cost = sum of line_items totals, recomputed on every save
    - total_income = sum of sale_items totals for modules that record sales,
      None otherwise
    - Deleting a record deletes every ledger entry derived from it
    """

    __tablename__ = "activity_records"
    __table_args__ = (
        Index('ix_activity_records_tenant_module', 'tenant_id', 'module_name'),
        Index('ix_activity_records_effective_date', 'effective_date'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        sa_column=Column(String(36), primary_key=True),
        description="Unique activity identifier (uuid)"
    )

    tenant_id: str = Field(
        index=True,
        description="Farm (tenant) identifier"
    )

    module_name: ModuleName = Field(
        description="Module that owns this record"
    )

    effective_date: date = Field(
        sa_column=Column(Date, nullable=False),
        description="Date the activity happened; ledger entries are dated from it"
    )

    farming_year_id: Optional[str] = Field(
        default=None,
        sa_column=Column(String(36), nullable=True),
        description="Farming year this activity is tagged with"
    )

    season_id: Optional[str] = Field(
        default=None,
        sa_column=Column(String(36), nullable=True),
        description="Season (within the farming year) this activity is tagged with"
    )

    details: Dict[str, Any] = Field(
        default_factory=dict,
        sa_column=Column(JSON, nullable=False),
        description="Module-specific fields"
    )

    line_items: List[Dict[str, Any]] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
        description="Processed cost line items"
    )

    sale_items: List[Dict[str, Any]] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
        description="Processed sale line items"
    )

    total_cost: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 6), nullable=False, default=0),
        description="Sum of cost line item totals (precision: 18,6)"
    )

    total_income: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(18, 6), nullable=True),
        description="Sum of sale item totals (None for modules without sales)"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Record creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Last save timestamp"
    )

    def get_line_items(self) -> List[LineItem]:
        return [LineItem.model_validate(item) for item in self.line_items or []]

    def get_sale_items(self) -> List[SaleItem]:
        return [SaleItem.model_validate(item) for item in self.sale_items or []]

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": "0b8f4c1e-2f0a-4a57-9f59-6a1c8c0b7d11",
                "tenant_id": "farm_abc123",
                "module_name": "Feeding",
                "effective_date": "2024-01-10",
                "details": {"animal_group": "Broiler Batch 1", "feed_type": "Starter mash"},
                "line_items": [{
                    "id": "li-1",
                    "description": "Starter mash",
                    "category": "Material/Input",
                    "payment_source": "Cash",
                    "unit": "bag",
                    "quantity": "2",
                    "unit_price": "50.00",
                    "total": "100.00"
                }],
                "sale_items": [],
                "total_cost": "100.000000",
                "total_income": None,
                "created_at": "2024-01-10T00:00:00Z",
                "updated_at": "2024-01-10T00:00:00Z"
            }
        }
