"""Subscription API Routes

Persists plan state after the payment gateway has confirmed a payment.
"""

from fastapi import APIRouter, Depends, Query
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.error import ClientError
from src.api.schemas.reference_request import ActivateSubscriptionRequestSchema
from src.app.use_cases.subscriptions import (
    ActivateSubscription,
    ActivateSubscriptionCommandDTO,
    GetSubscription,
    SubscriptionResponseDTO,
)
from src.adapter.repositories import SqlAlchemySubscriptionRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session

router = APIRouter(prefix="/subscriptions", tags=["Subscriptions"])


@router.post("/activate", response_model=SubscriptionResponseDTO)
async def activate_subscription(
    request: ActivateSubscriptionRequestSchema,
    session: AsyncSession = Depends(get_session),
):
    """
    Activate a paid plan for a tenant.

    Idempotent on `payment_reference`: repeating the call returns the
    subscription created the first time.
    """
    command = ActivateSubscriptionCommandDTO(
        tenant_id=request.tenant_id,
        plan_id=request.plan_id,
        billing_cycle=request.billing_cycle,
        payment_reference=request.payment_reference,
    )
    use_case = ActivateSubscription(SqlAlchemyUnitOfWork(session), SqlAlchemySubscriptionRepository(session))
    result = await use_case.execute(command)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return result.value


@router.get("", response_model=SubscriptionResponseDTO)
async def get_subscription(
    tenant_id: str = Query(..., min_length=1),
    session: AsyncSession = Depends(get_session),
):
    result = await GetSubscription(SqlAlchemySubscriptionRepository(session)).execute(tenant_id)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return result.value
