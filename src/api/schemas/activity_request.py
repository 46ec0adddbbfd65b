"""Request schemas for Activity API

Pydantic models for validating incoming HTTP requests.
"""

from datetime import date
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field
from src.domain.line_item import LineItem, SaleItem


class ActivityRequestSchema(BaseModel):
    """
    Request schema for creating or updating an activity record

    Used for POST /activities/{module} and PUT /activities/{module}/{activity_id}.
    The module comes from the path.
    """

    tenant_id: str = Field(
        ...,
        min_length=1,
        description="Farm (tenant) identifier (required, non-empty)"
    )

    effective_date: date = Field(
        ...,
        description="Date the activity happened"
    )

    farming_year_id: Optional[str] = Field(
        default=None,
        description="Farming year tag"
    )

    season_id: Optional[str] = Field(
        default=None,
        description="Season tag"
    )

    details: Dict[str, Any] = Field(
        default_factory=dict,
        description="Module-specific fields"
    )

    line_items: List[LineItem] = Field(
        default_factory=list,
        description="Cost line items"
    )

    sale_items: List[SaleItem] = Field(
        default_factory=list,
        description="Sale line items (Harvesting only)"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "tenant_id": "farm_abc123",
                "effective_date": "2024-01-10",
                "details": {"animal_group": "Broiler Batch 1", "feed_type": "Starter mash"},
                "line_items": [{
                    "description": "Starter mash",
                    "category": "Material/Input",
                    "payment_source": "Cash",
                    "unit": "bag",
                    "quantity": "2",
                    "unit_price": "50.00"
                }]
            }
        }
