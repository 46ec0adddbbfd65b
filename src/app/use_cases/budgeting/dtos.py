"""Data Transfer Objects for Budgeting Use Cases"""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field
from src.domain.budget import Budget, BudgetCategory, BudgetType


class SaveBudgetCommandDTO(BaseModel):
    """
    Command DTO for creating or updating a budget

    Category ids are assigned when missing.
    """

    tenant_id: str = Field(..., description="Farm (tenant) identifier")
    budget_id: Optional[str] = Field(default=None, description="Existing budget ID (update) or None (create)")
    name: str = Field(..., min_length=1, max_length=150, description="Display name")
    budget_type: BudgetType = Field(default=BudgetType.FARM_OPERATIONS, description="Budget scope")
    start_date: date = Field(..., description="First day covered")
    end_date: date = Field(..., description="Last day covered")
    categories: List[BudgetCategory] = Field(default_factory=list, description="Budgeted categories")
    notes: Optional[str] = Field(default=None, description="Free-form notes")

    class Config:
        json_schema_extra = {
            "example": {
                "tenant_id": "farm_abc123",
                "name": "2024 Maize Season Budget",
                "budget_type": "Farm Operations",
                "start_date": "2024-01-01",
                "end_date": "2024-12-31",
                "categories": [
                    {"name": "Seeds", "budgeted_amount": "600.00"},
                    {"name": "Labor", "budgeted_amount": "400.00"}
                ]
            }
        }


class ReconciliationDTO(BaseModel):
    """Budget-wide actuals of a budget window"""

    total_budgeted_amount: Decimal = Field(..., description="Sum of category budgets")
    total_actual_spending: Decimal = Field(..., description="Sum of Expense entries inside the budget window")
    total_variance: Decimal = Field(..., description="Budgeted minus actual")
    utilization: Decimal = Field(..., description="Actual / budgeted x 100, 0 when nothing is budgeted")


class BudgetResponseDTO(BaseModel):
    """Budget with its live reconciliation"""

    id: str
    tenant_id: str
    name: str
    budget_type: str
    start_date: date
    end_date: date
    categories: List[BudgetCategory]
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    reconciliation: Optional[ReconciliationDTO] = None

    @classmethod
    def from_budget(
        cls, budget: Budget, reconciliation: Optional[ReconciliationDTO] = None
    ) -> "BudgetResponseDTO":
        return cls(
            id=budget.id,
            tenant_id=budget.tenant_id,
            name=budget.name,
            budget_type=BudgetType(budget.budget_type).value,
            start_date=budget.start_date,
            end_date=budget.end_date,
            categories=budget.get_categories(),
            notes=budget.notes,
            created_at=budget.created_at,
            updated_at=budget.updated_at,
            reconciliation=reconciliation,
        )


class DeleteBudgetResponseDTO(BaseModel):
    budget_id: str
    deleted: bool = True
