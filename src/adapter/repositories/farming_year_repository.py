"""SQLAlchemy Farming Year Repository Implementation"""

from datetime import datetime
from typing import List, Optional
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.farming_year_repository import FarmingYearRepository
from src.domain.farming_year import FarmingYear


class SqlAlchemyFarmingYearRepository(FarmingYearRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, year_id: str) -> Optional[FarmingYear]:
        statement = select(FarmingYear).where(FarmingYear.id == year_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def list_by_tenant(self, tenant_id: str) -> List[FarmingYear]:
        statement = (
            select(FarmingYear)
            .where(FarmingYear.tenant_id == tenant_id)
            .order_by(FarmingYear.start_date.asc())
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def save(self, year: FarmingYear) -> FarmingYear:
        year.updated_at = datetime.utcnow()
        self.session.add(year)
        await self.session.flush()
        return year

    async def delete(self, year: FarmingYear) -> None:
        await self.session.delete(year)
        await self.session.flush()
