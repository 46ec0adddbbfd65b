"""Farming Year Repository Interface"""

from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain.farming_year import FarmingYear


class FarmingYearRepository(ABC):
    """Repository interface for FarmingYear reference data"""

    @abstractmethod
    async def get_by_id(self, year_id: str) -> Optional[FarmingYear]:
        pass

    @abstractmethod
    async def list_by_tenant(self, tenant_id: str) -> List[FarmingYear]:
        """Farming years of a tenant, oldest start_date first"""
        pass

    @abstractmethod
    async def save(self, year: FarmingYear) -> FarmingYear:
        pass

    @abstractmethod
    async def delete(self, year: FarmingYear) -> None:
        pass
