"""YearlyCashflow Use Case

Income, expense and net of every farming year of a tenant.
"""

from decimal import Decimal
from libs.result import Result, Return
from src.app.repositories.farming_year_repository import FarmingYearRepository
from src.app.repositories.ledger_entry_repository import LedgerEntryRepository
from src.domain.ledger_entry import EntryKind
from .dtos import YearlyCashflowPointDTO, YearlyCashflowResponseDTO


class YearlyCashflow:
    """
    Use Case: Yearly cash flow report

    Each entry counts toward the first farming year (oldest first) whose range
    contains its date. Years without entries report zeros; entries outside
    every year are not reported.
    """

    def __init__(self, farming_year_repo: FarmingYearRepository, ledger_repo: LedgerEntryRepository):
        self.farming_year_repo = farming_year_repo
        self.ledger_repo = ledger_repo

    async def execute(self, tenant_id: str) -> Result[YearlyCashflowResponseDTO]:
        years = await self.farming_year_repo.list_by_tenant(tenant_id)
        if not years:
            return Return.ok(YearlyCashflowResponseDTO(tenant_id=tenant_id, years=[]))

        totals = {year.id: {"income": Decimal("0"), "expense": Decimal("0")} for year in years}

        for entry in await self.ledger_repo.list_all_by_tenant(tenant_id):
            year = next((y for y in years if y.contains(entry.entry_date)), None)
            if year is None:
                continue
            key = "income" if entry.kind == EntryKind.INCOME else "expense"
            totals[year.id][key] += entry.amount

        return Return.ok(
            YearlyCashflowResponseDTO(
                tenant_id=tenant_id,
                years=[
                    YearlyCashflowPointDTO(
                        year_id=year.id,
                        name=year.name,
                        start_date=year.start_date,
                        end_date=year.end_date,
                        income=totals[year.id]["income"],
                        expense=totals[year.id]["expense"],
                        net=totals[year.id]["income"] - totals[year.id]["expense"],
                    )
                    for year in years
                ],
            )
        )
