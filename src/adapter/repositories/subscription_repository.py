"""SQLAlchemy Subscription Repository Implementation

Implements subscription persistence using SQLAlchemy async session.
"""

from datetime import datetime
from typing import Optional, List
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.subscription_repository import SubscriptionRepository
from src.domain.subscription import Subscription, SubscriptionStatus


class SqlAlchemySubscriptionRepository(SubscriptionRepository):
    """
    SQLAlchemy implementation of SubscriptionRepository

    Uses async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_tenant_id(
        self, tenant_id: str, status: Optional[SubscriptionStatus] = None
    ) -> List[Subscription]:
        statement = select(Subscription).where(Subscription.tenant_id == tenant_id)

        if status:
            statement = statement.where(Subscription.status == status)

        statement = statement.order_by(Subscription.created_at.desc())
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def get_by_payment_reference(self, payment_reference: str) -> Optional[Subscription]:
        statement = select(Subscription).where(
            Subscription.payment_reference == payment_reference
        )
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def create(self, subscription: Subscription) -> Subscription:
        self.session.add(subscription)
        await self.session.flush()
        await self.session.refresh(subscription)
        return subscription

    async def update(self, subscription: Subscription) -> Subscription:
        subscription.updated_at = datetime.utcnow()
        self.session.add(subscription)
        await self.session.flush()
        await self.session.refresh(subscription)
        return subscription
