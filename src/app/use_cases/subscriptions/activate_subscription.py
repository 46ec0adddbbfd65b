"""ActivateSubscription Use Case"""

import calendar
import logging
from datetime import date, datetime
from typing import Optional
from libs.result import Result, Return, Error
from src.app.repositories.subscription_repository import SubscriptionRepository
from src.app.services.unit_of_work import UnitOfWork
from src.domain.subscription import BillingCycle, Subscription, SubscriptionStatus
from .dtos import ActivateSubscriptionCommandDTO, SubscriptionResponseDTO

logger = logging.getLogger(__name__)


def add_months(day: date, months: int) -> date:
    """Shift by whole months, clamping to the last day of the target month"""
    index = day.year * 12 + (day.month - 1) + months
    year, month = index // 12, index % 12 + 1
    return date(year, month, min(day.day, calendar.monthrange(year, month)[1]))


def next_billing_date(today: date, billing_cycle: BillingCycle) -> date:
    return add_months(today, 12 if billing_cycle == BillingCycle.ANNUALLY else 1)


class ActivateSubscription:
    """
    Use Case: Persist a confirmed subscription

    Business Rules:
    1. Idempotent on payment_reference: a known reference returns the stored
       subscription unchanged, only for the tenant that owns it
    2. One active subscription per tenant: earlier active ones are cancelled
    3. next_billing_date is today + 1 month (monthly) or + 1 year (annually)
    """

    def __init__(self, uow: UnitOfWork, subscription_repo: SubscriptionRepository):
        self.uow = uow
        self.subscription_repo = subscription_repo

    async def execute(
        self, command: ActivateSubscriptionCommandDTO, today: Optional[date] = None
    ) -> Result[SubscriptionResponseDTO]:
        try:
            # Step 1: Idempotency
            existing = await self.subscription_repo.get_by_payment_reference(command.payment_reference)
            if existing and existing.tenant_id != command.tenant_id:
                logger.warning(
                    f"Payment {command.payment_reference} belongs to tenant {existing.tenant_id}, "
                    f"not {command.tenant_id}"
                )
                return Return.err(
                    Error(
                        code="PAYMENT_REFERENCE_CONFLICT",
                        message="Payment reference is already used by another farm",
                    )
                )
            if existing:
                logger.info(f"Payment {command.payment_reference} already activated as {existing.id}")
                return Return.ok(SubscriptionResponseDTO.from_subscription(existing))

            # Step 2: Cancel previous active subscriptions
            now = datetime.utcnow()
            active = await self.subscription_repo.get_by_tenant_id(
                command.tenant_id, status=SubscriptionStatus.ACTIVE
            )
            for previous in active:
                previous.status = SubscriptionStatus.CANCELLED
                previous.updated_at = now
                await self.subscription_repo.update(previous)

            # Step 3: Create the new active subscription
            subscription = Subscription(
                tenant_id=command.tenant_id,
                plan_id=command.plan_id,
                billing_cycle=command.billing_cycle,
                status=SubscriptionStatus.ACTIVE,
                payment_reference=command.payment_reference,
                next_billing_date=next_billing_date(today or date.today(), command.billing_cycle),
            )
            subscription = await self.subscription_repo.create(subscription)

            # Step 4: Commit
            await self.uow.commit()

            logger.info(
                f"Activated {command.plan_id.value} ({command.billing_cycle.value}) for tenant "
                f"{command.tenant_id}, cancelled {len(active)} previous, "
                f"next billing {subscription.next_billing_date}"
            )
            return Return.ok(SubscriptionResponseDTO.from_subscription(subscription))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to activate subscription for tenant {command.tenant_id}: {e}")
            return Return.err(
                Error(
                    code="PERSISTENCE_FAILED",
                    message="Failed to activate subscription",
                    reason=str(e),
                )
            )
