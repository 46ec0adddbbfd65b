"""Farming Year Domain Entity

Reference period of a farm, split into seasons. Used to tag activity records
and to resolve reporting windows; never itself financial.
"""

from datetime import datetime, date
from typing import Any, Dict, List, Optional
from pydantic import BaseModel as ValueObject, Field as ValueField
from sqlmodel import Field, Column, Index
from sqlalchemy import JSON, String, Date
from src.domain.base import BaseModel, generate_uuid


class Season(ValueObject):
    """Season nested in a farming year, bounded by its parent year"""

    id: str = ValueField(default_factory=generate_uuid)
    name: str
    start_date: date
    end_date: date


class FarmingYear(BaseModel, table=True):
    """
    Farming Year - Named date range with nested seasons

    Domain Rules:
    - start_date <= end_date
    - Every season lies inside [start_date, end_date]
    """

    __tablename__ = "farming_years"
    __table_args__ = (
        Index('ix_farming_years_tenant_start', 'tenant_id', 'start_date'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        sa_column=Column(String(36), primary_key=True),
        description="Unique farming year identifier (uuid)"
    )

    tenant_id: str = Field(
        description="Farm (tenant) identifier"
    )

    name: str = Field(
        sa_column=Column(String(100), nullable=False),
        description="Display name (e.g., '2024 Farming Year')"
    )

    start_date: date = Field(
        sa_column=Column(Date, nullable=False),
        description="First day of the year"
    )

    end_date: date = Field(
        sa_column=Column(Date, nullable=False),
        description="Last day of the year"
    )

    seasons: List[Dict[str, Any]] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
        description="Nested seasons"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Last update timestamp"
    )

    def get_seasons(self) -> List[Season]:
        return [Season.model_validate(s) for s in self.seasons or []]

    def find_season(self, season_id: str) -> Optional[Season]:
        for season in self.get_seasons():
            if season.id == season_id:
                return season
        return None

    def contains(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date
