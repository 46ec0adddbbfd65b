"""Data Transfer Objects for Farming Year Use Cases"""

from datetime import date, datetime
from typing import List, Optional
from pydantic import BaseModel, Field
from src.domain.farming_year import FarmingYear, Season


class SaveFarmingYearCommandDTO(BaseModel):
    """Command DTO for creating or updating a farming year with its seasons"""

    tenant_id: str = Field(..., description="Farm (tenant) identifier")
    year_id: Optional[str] = Field(default=None, description="Existing year ID (update) or None (create)")
    name: str = Field(..., min_length=1, max_length=100, description="Display name")
    start_date: date = Field(..., description="First day of the year")
    end_date: date = Field(..., description="Last day of the year")
    seasons: List[Season] = Field(default_factory=list, description="Seasons inside the year")

    class Config:
        json_schema_extra = {
            "example": {
                "tenant_id": "farm_abc123",
                "name": "2024 Farming Year",
                "start_date": "2024-01-01",
                "end_date": "2024-12-31",
                "seasons": [
                    {"name": "Major Season", "start_date": "2024-03-01", "end_date": "2024-07-31"},
                    {"name": "Minor Season", "start_date": "2024-09-01", "end_date": "2024-11-30"}
                ]
            }
        }


class FarmingYearResponseDTO(BaseModel):
    id: str
    tenant_id: str
    name: str
    start_date: date
    end_date: date
    seasons: List[Season]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_year(cls, year: FarmingYear) -> "FarmingYearResponseDTO":
        return cls(
            id=year.id,
            tenant_id=year.tenant_id,
            name=year.name,
            start_date=year.start_date,
            end_date=year.end_date,
            seasons=year.get_seasons(),
            created_at=year.created_at,
            updated_at=year.updated_at,
        )


class DeleteFarmingYearResponseDTO(BaseModel):
    year_id: str
    deleted: bool = True
