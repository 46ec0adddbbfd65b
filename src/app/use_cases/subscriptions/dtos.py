"""Data Transfer Objects for Subscription Use Cases"""

from datetime import date, datetime
from pydantic import BaseModel, Field
from src.domain.subscription import BillingCycle, PlanId, Subscription


class ActivateSubscriptionCommandDTO(BaseModel):
    """
    Command DTO for activating a subscription

    Sent once the payment gateway has confirmed the payment.
    """

    tenant_id: str = Field(..., description="Farm (tenant) identifier")
    plan_id: PlanId = Field(..., description="Purchased plan")
    billing_cycle: BillingCycle = Field(..., description="monthly or annually")
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


class SubscriptionResponseDTO(BaseModel):
    id: str
    tenant_id: str
    plan_id: str
    billing_cycle: str
    status: str
    payment_reference: str
    next_billing_date: date
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_subscription(cls, subscription: Subscription) -> "SubscriptionResponseDTO":
        return cls(
            id=subscription.id,
            tenant_id=subscription.tenant_id,
            plan_id=PlanId(subscription.plan_id).value,
            billing_cycle=BillingCycle(subscription.billing_cycle).value,
            status=subscription.status.value if hasattr(subscription.status, "value") else subscription.status,
            payment_reference=subscription.payment_reference,
            next_billing_date=subscription.next_billing_date,
            created_at=subscription.created_at,
            updated_at=subscription.updated_at,
        )
