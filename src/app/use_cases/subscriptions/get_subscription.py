"""GetSubscription Use Case"""

from libs.result import Result, Return, Error
from src.app.repositories.subscription_repository import SubscriptionRepository
from src.domain.subscription import SubscriptionStatus
from .dtos import SubscriptionResponseDTO


class GetSubscription:
    """
    Use Case: Current active subscription of a tenant

    Errors:
        SUBSCRIPTION_NOT_FOUND: Tenant has no active subscription
    """

    def __init__(self, subscription_repo: SubscriptionRepository):
        self.subscription_repo = subscription_repo

    async def execute(self, tenant_id: str) -> Result[SubscriptionResponseDTO]:
        active = await self.subscription_repo.get_by_tenant_id(tenant_id, status=SubscriptionStatus.ACTIVE)
        if not active:
            return Return.err(
                Error(
                    code="SUBSCRIPTION_NOT_FOUND",
                    message=f"No active subscription for tenant {tenant_id}",
                )
            )
        return Return.ok(SubscriptionResponseDTO.from_subscription(active[0]))
