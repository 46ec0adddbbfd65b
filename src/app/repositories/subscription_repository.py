"""Subscription Repository Interface

Defines the contract for subscription persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from src.domain.subscription import Subscription, SubscriptionStatus


class SubscriptionRepository(ABC):
    """
    Repository interface for Subscription persistence

    Provides access to the plan state of each farm.
    """

    @abstractmethod
    async def get_by_tenant_id(
        self, tenant_id: str, status: Optional[SubscriptionStatus] = None
    ) -> List[Subscription]:
        """
        Retrieve subscriptions of a tenant, newest first

        Args:
            tenant_id: Tenant identifier
            status: Optional filter by status (e.g., ACTIVE)

        Returns:
            List of subscriptions
        """
        pass

    @abstractmethod
    async def get_by_payment_reference(self, payment_reference: str) -> Optional[Subscription]:
        """
        Retrieve subscription by the gateway payment reference

        Used to make activation idempotent.

        Args:
            payment_reference: Gateway reference

        Returns:
            Subscription if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, subscription: Subscription) -> Subscription:
        """
        Create a new subscription

        Args:
            subscription: Subscription entity to persist

        Returns:
            Created Subscription
        """
        pass

    @abstractmethod
    async def update(self, subscription: Subscription) -> Subscription:
        """
        Update an existing subscription

        Args:
            subscription: Subscription entity with updated values

        Returns:
            Updated Subscription
        """
        pass
