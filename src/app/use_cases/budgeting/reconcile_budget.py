"""ReconcileBudget and ListBudgets Use Cases

Both read the ledger slice of each budget's own window and attach the
reconciliation to the response.
"""

from typing import List
from libs.result import Result, Return, Error
from src.app.repositories.budget_repository import BudgetRepository
from src.app.repositories.ledger_entry_repository import LedgerEntryRepository
from src.domain.budget import Budget
from src.domain.ledger_entry import EntryKind
from .dtos import BudgetResponseDTO, ReconciliationDTO
from .reconcile import reconcile


class ReconcileBudget:
    """
    Use Case: Get a budget with its reconciliation

    Errors:
        BUDGET_NOT_FOUND: Unknown budget or budget of another tenant
    """

    def __init__(self, budget_repo: BudgetRepository, ledger_repo: LedgerEntryRepository):
        self.budget_repo = budget_repo
        self.ledger_repo = ledger_repo

    async def execute(self, tenant_id: str, budget_id: str) -> Result[BudgetResponseDTO]:
        budget = await self.budget_repo.get_by_id(budget_id)
        if not budget or budget.tenant_id != tenant_id:
            return Return.err(Error(code="BUDGET_NOT_FOUND", message=f"Budget {budget_id} not found"))

        reconciliation = await reconcile_against_ledger(budget, self.ledger_repo)
        return Return.ok(BudgetResponseDTO.from_budget(budget, reconciliation))


class ListBudgets:
    """Use Case: Budgets of a tenant, newest first, each reconciled"""

    def __init__(self, budget_repo: BudgetRepository, ledger_repo: LedgerEntryRepository):
        self.budget_repo = budget_repo
        self.ledger_repo = ledger_repo

    async def execute(self, tenant_id: str) -> Result[List[BudgetResponseDTO]]:
        budgets = await self.budget_repo.list_by_tenant(tenant_id)
        response = []
        for budget in budgets:
            reconciliation = await reconcile_against_ledger(budget, self.ledger_repo)
            response.append(BudgetResponseDTO.from_budget(budget, reconciliation))
        return Return.ok(response)


async def reconcile_against_ledger(budget: Budget, ledger_repo: LedgerEntryRepository) -> ReconciliationDTO:
    entries = await ledger_repo.find_in_window(
        tenant_id=budget.tenant_id,
        start_date=budget.start_date,
        end_date=budget.end_date,
        kind=EntryKind.EXPENSE,
    )
    return reconcile(budget, entries)


# A budget read always carries its reconciliation
GetBudget = ReconcileBudget
