"""Subscription use cases"""
from .activate_subscription import ActivateSubscription, add_months, next_billing_date
from .get_subscription import GetSubscription
from .dtos import ActivateSubscriptionCommandDTO, SubscriptionResponseDTO

__all__ = [
    "ActivateSubscription",
    "GetSubscription",
    "add_months",
    "next_billing_date",
    "ActivateSubscriptionCommandDTO",
    "SubscriptionResponseDTO",
]
