"""SQLAlchemy Budget Repository Implementation"""

from datetime import datetime
from typing import List, Optional
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.budget_repository import BudgetRepository
from src.domain.budget import Budget


class SqlAlchemyBudgetRepository(BudgetRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, budget_id: str) -> Optional[Budget]:
        statement = select(Budget).where(Budget.id == budget_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def list_by_tenant(self, tenant_id: str) -> List[Budget]:
        statement = (
            select(Budget)
            .where(Budget.tenant_id == tenant_id)
            .order_by(Budget.start_date.desc())
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def save(self, budget: Budget) -> Budget:
        budget.updated_at = datetime.utcnow()
        self.session.add(budget)
        await self.session.flush()
        return budget

    async def delete(self, budget: Budget) -> None:
        await self.session.delete(budget)
        await self.session.flush()
