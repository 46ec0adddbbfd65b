"""DeleteBudget Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.repositories.budget_repository import BudgetRepository
from src.app.services.unit_of_work import UnitOfWork
from .dtos import DeleteBudgetResponseDTO

logger = logging.getLogger(__name__)


class DeleteBudget:
    """Use Case: Delete a budget. Ledger entries are untouched."""

    def __init__(self, uow: UnitOfWork, budget_repo: BudgetRepository):
        self.uow = uow
        self.budget_repo = budget_repo

    async def execute(self, tenant_id: str, budget_id: str) -> Result[DeleteBudgetResponseDTO]:
        try:
            budget = await self.budget_repo.get_by_id(budget_id)
            if not budget or budget.tenant_id != tenant_id:
                return Return.err(
                    Error(code="BUDGET_NOT_FOUND", message=f"Budget {budget_id} not found")
                )

            await self.budget_repo.delete(budget)
            await self.uow.commit()

            logger.info(f"Deleted budget {budget_id} for tenant {tenant_id}")
            return Return.ok(DeleteBudgetResponseDTO(budget_id=budget_id))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to delete budget {budget_id}: {e}")
            return Return.err(
                Error(
                    code="PERSISTENCE_FAILED",
                    message="Failed to delete budget",
                    reason=str(e),
                )
            )
