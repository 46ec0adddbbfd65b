"""Budget Repository Interface"""

from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain.budget import Budget


class BudgetRepository(ABC):
    """Repository interface for Budget persistence"""

    @abstractmethod
    async def get_by_id(self, budget_id: str) -> Optional[Budget]:
        pass

    @abstractmethod
    async def list_by_tenant(self, tenant_id: str) -> List[Budget]:
        """Budgets of a tenant, newest start_date first"""
        pass

    @abstractmethod
    async def save(self, budget: Budget) -> Budget:
        pass

    @abstractmethod
    async def delete(self, budget: Budget) -> None:
        pass
