"""Request schemas for budgets, farming years and subscriptions"""

from datetime import date
from typing import List, Optional
from pydantic import BaseModel, Field
from src.domain.budget import BudgetCategory, BudgetType
from src.domain.farming_year import Season
from src.domain.subscription import BillingCycle, PlanId


class BudgetRequestSchema(BaseModel):
    """Used for POST /budgets and PUT /budgets/{budget_id}"""

    tenant_id: str = Field(..., min_length=1, description="Farm (tenant) identifier")
    name: str = Field(..., min_length=1, max_length=150)
    budget_type: BudgetType = BudgetType.FARM_OPERATIONS
    start_date: date
    end_date: date
    categories: List[BudgetCategory] = Field(default_factory=list)
    notes: Optional[str] = None


class FarmingYearRequestSchema(BaseModel):
    """Used for POST /farming-years and PUT /farming-years/{year_id}"""

    tenant_id: str = Field(..., min_length=1, description="Farm (tenant) identifier")
    name: str = Field(..., min_length=1, max_length=100)
    start_date: date
    end_date: date
    seasons: List[Season] = Field(default_factory=list)


class ActivateSubscriptionRequestSchema(BaseModel):
    """
    Used for POST /subscriptions/activate

    Called after the payment gateway has confirmed the payment.
    """

    tenant_id: str = Field(..., min_length=1, description="Farm (tenant) identifier")
    plan_id: PlanId
    billing_cycle: BillingCycle
    payment_reference: str = Field(..., min_length=1, max_length=255, description="Gateway payment reference")

    class Config:
        json_schema_extra = {
            "example": {
                "tenant_id": "farm_abc123",
                "plan_id": "grower",
                "billing_cycle": "monthly",
                "payment_reference": "T123456789"
            }
        }
