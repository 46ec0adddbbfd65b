"""SaveBudget Use Case"""

import logging
from datetime import datetime
from libs.result import Result, Return, Error
from src.app.repositories.budget_repository import BudgetRepository
from src.app.repositories.ledger_entry_repository import LedgerEntryRepository
from src.app.services.unit_of_work import UnitOfWork
from src.domain.budget import Budget
from .dtos import BudgetResponseDTO, SaveBudgetCommandDTO
from .reconcile_budget import reconcile_against_ledger

logger = logging.getLogger(__name__)


class SaveBudget:
    """
    Use Case: Create or update a budget

    Business Rules:
    1. start_date <= end_date (INVALID_WINDOW)
    2. Updating a budget of another tenant is BUDGET_NOT_FOUND
    3. Categories keep their ids; new ones get a uuid
    4. The response carries the reconciliation of the saved window
    """

    def __init__(
        self,
        uow: UnitOfWork,
        budget_repo: BudgetRepository,
        ledger_repo: LedgerEntryRepository,
    ):
        self.uow = uow
        self.budget_repo = budget_repo
        self.ledger_repo = ledger_repo

    async def execute(self, command: SaveBudgetCommandDTO) -> Result[BudgetResponseDTO]:
        if command.start_date > command.end_date:
            return Return.err(
                Error(
                    code="INVALID_WINDOW",
                    message="start_date must not be after end_date",
                    reason=f"start_date={command.start_date}, end_date={command.end_date}",
                )
            )

        categories = [c.model_dump(mode="json") for c in command.categories]

        try:
            if command.budget_id:
                budget = await self.budget_repo.get_by_id(command.budget_id)
                if not budget or budget.tenant_id != command.tenant_id:
                    return Return.err(
                        Error(
                            code="BUDGET_NOT_FOUND",
                            message=f"Budget {command.budget_id} not found",
                        )
                    )
                budget.name = command.name
                budget.budget_type = command.budget_type
                budget.start_date = command.start_date
                budget.end_date = command.end_date
                budget.categories = categories
                budget.notes = command.notes
                budget.updated_at = datetime.utcnow()
            else:
                budget = Budget(
                    tenant_id=command.tenant_id,
                    name=command.name,
                    budget_type=command.budget_type,
                    start_date=command.start_date,
                    end_date=command.end_date,
                    categories=categories,
                    notes=command.notes,
                )

            budget = await self.budget_repo.save(budget)
            await self.uow.commit()

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to save budget for tenant {command.tenant_id}: {e}")
            return Return.err(
                Error(
                    code="PERSISTENCE_FAILED",
                    message="Failed to save budget",
                    reason=str(e),
                )
            )

        reconciliation = await reconcile_against_ledger(budget, self.ledger_repo)
        logger.info(f"Saved budget {budget.id} for tenant {budget.tenant_id}")
        return Return.ok(BudgetResponseDTO.from_budget(budget, reconciliation))
