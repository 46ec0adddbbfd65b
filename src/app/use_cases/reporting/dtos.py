"""Data Transfer Objects for Reporting Use Cases"""

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field, model_validator


class ScopeMode(str, Enum):
    """Ways a user can pick a reporting window"""
    EXPLICIT = "explicit"
    ROLLING12 = "rolling12"
    FARMING_YEAR = "farmingYear"
    SEASON = "season"


class WindowScopeDTO(BaseModel):
    """
    Reporting scope selected by the user

    - explicit: start_date and end_date
    - rolling12: nothing else
    - farmingYear: year_id
    - season: year_id and season_id
    """

    mode: ScopeMode = Field(
        default=ScopeMode.ROLLING12,
        description="Scope mode"
    )

    start_date: Optional[date] = None
    end_date: Optional[date] = None
    year_id: Optional[str] = None
    season_id: Optional[str] = None

    @model_validator(mode="after")
    def check_required_fields(self):
        if self.mode == ScopeMode.EXPLICIT and (self.start_date is None or self.end_date is None):
            raise ValueError("explicit scope requires start_date and end_date")
        if self.mode in (ScopeMode.FARMING_YEAR, ScopeMode.SEASON) and not self.year_id:
            raise ValueError(f"{self.mode.value} scope requires year_id")
        if self.mode == ScopeMode.SEASON and not self.season_id:
            raise ValueError("season scope requires season_id")
        return self

    class Config:
        json_schema_extra = {
            "example": {"mode": "season", "year_id": "fy-2024", "season_id": "main-season"}
        }


class ReportingWindowDTO(BaseModel):
    """Concrete inclusive date interval"""

    start_date: date
    end_date: date

    def contains(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date


class MonthlyPointDTO(BaseModel):
    month: str = Field(..., description="Month label, e.g. 'Jan 24'")
    income: Decimal
    expense: Decimal


class CategoryPointDTO(BaseModel):
    name: str
    total: Decimal
    percentage: Decimal = Field(..., description="Share of total expense (0-100)")


class LedgerSummaryDTO(BaseModel):
    """
    Response DTO for AggregateLedger

    scope_found is False when the selected farming year or season does not
    exist; the summary is then empty rather than an error.
    """

    scope_found: bool = True
    currency: Optional[str] = Field(default=None, description="Reporting currency code")
    window: Optional[ReportingWindowDTO] = None
    modules: Optional[List[str]] = None
    total_income: Decimal = Decimal("0")
    total_expense: Decimal = Decimal("0")
    net_profit_loss: Decimal = Decimal("0")
    profit_margin: Decimal = Field(default=Decimal("0"), description="Net / income (0-100)")
    monthly: List[MonthlyPointDTO] = Field(default_factory=list)
    categories: List[CategoryPointDTO] = Field(default_factory=list)
    entry_count: int = 0


class YearlyCashflowPointDTO(BaseModel):
    year_id: str
    name: str
    start_date: date
    end_date: date
    income: Decimal
    expense: Decimal
    net: Decimal


class YearlyCashflowResponseDTO(BaseModel):
    tenant_id: str
    years: List[YearlyCashflowPointDTO]


class HarvestProfitabilityDTO(BaseModel):
    activity_id: str
    crop_type: str
    variety: Optional[str] = None
    date_harvested: date
    yield_quantity: Decimal
    yield_unit: str
    total_cost: Decimal
    total_income: Decimal
    net_profit: Decimal
    cost_per_unit: Decimal


class HarvestProfitabilityResponseDTO(BaseModel):
    tenant_id: str
    records: List[HarvestProfitabilityDTO]
    total_net_profit: Decimal
