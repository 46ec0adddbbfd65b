"""Subscription Domain Entity

Tracks the plan a farm pays for. Written once the external payment gateway
has confirmed a payment; the checkout itself happens elsewhere.
"""

from datetime import datetime, date
from enum import Enum
from sqlmodel import Field, Column, Index
from sqlalchemy import String, Date
from src.domain.base import BaseModel, generate_uuid


class SubscriptionStatus(str, Enum):
    """Subscription status types"""
    ACTIVE = "active"
    CANCELLED = "cancelled"
    EXPIRED = "expired"


class PlanId(str, Enum):
    """Pricing tiers"""
    STARTER = "starter"
    GROWER = "grower"
    BUSINESS = "business"
    ENTERPRISE = "enterprise"


class BillingCycle(str, Enum):
    MONTHLY = "monthly"
    ANNUALLY = "annually"


class Subscription(BaseModel, table=True):
    """
    Subscription - Farm subscription plan

    Domain Rules:
    - One active subscription per tenant (enforced at business logic layer)
    - payment_reference is unique; re-activating with the same reference is a no-op
    - Status transitions: active -> cancelled/expired
    """

    __tablename__ = "subscriptions"
    __table_args__ = (
        Index('ix_subscriptions_tenant_id', 'tenant_id'),
        Index('ix_subscriptions_status', 'status'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        sa_column=Column(String(36), primary_key=True),
        description="Unique subscription identifier (uuid)"
    )

    tenant_id: str = Field(
        description="Farm (tenant) identifier"
    )

    plan_id: PlanId = Field(
        description="Subscribed pricing tier"
    )

    billing_cycle: BillingCycle = Field(
        description="monthly or annually"
    )

    status: SubscriptionStatus = Field(
        description="Subscription status (active, cancelled, expired)"
    )

    payment_reference: str = Field(
        sa_column=Column(String(255), nullable=False, unique=True),
        description="Gateway reference of the confirmed payment"
    )

    next_billing_date: date = Field(
        sa_column=Column(Date, nullable=False),
        description="Date the next payment is due"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Subscription creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Last update timestamp"
    )

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": "9a1d2c3b-4e5f-6a7b-8c9d-0e1f2a3b4c5d",
                "tenant_id": "farm_abc123",
                "plan_id": "grower",
                "billing_cycle": "monthly",
                "status": "active",
                "payment_reference": "T123456789",
                "next_billing_date": "2024-02-01",
                "created_at": "2024-01-01T00:00:00Z",
                "updated_at": "2024-01-01T00:00:00Z"
            }
        }
