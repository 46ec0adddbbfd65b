"""HarvestProfitability Use Case

Net profit and cost per yield unit of every harvest of a tenant.
"""

from decimal import Decimal, ROUND_HALF_UP
from libs.result import Result, Return
from src.app.modules.catalog import HarvestingDetails
from src.app.repositories.activity_record_repository import ActivityRecordRepository
from src.domain.activity_record import ModuleName
from .dtos import HarvestProfitabilityDTO, HarvestProfitabilityResponseDTO


class HarvestProfitability:
    """
    Use Case: Harvest profitability report

    net_profit = total_income - total_cost; cost_per_unit is 0 when nothing
    was harvested. Records are ordered by harvest date, newest first.
    """

    def __init__(self, activity_repo: ActivityRecordRepository):
        self.activity_repo = activity_repo

    async def execute(self, tenant_id: str) -> Result[HarvestProfitabilityResponseDTO]:
        records = await self.activity_repo.list_by_module(tenant_id, ModuleName.HARVESTING)

        rows = []
        for record in records:
            details = HarvestingDetails.model_validate(record.details or {})
            income = record.total_income or Decimal("0")
            cost = record.total_cost
            cost_per_unit = (
                (cost / details.yield_quantity).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
                if details.yield_quantity > 0
                else Decimal("0")
            )
            rows.append(
                HarvestProfitabilityDTO(
                    activity_id=record.id,
                    crop_type=details.crop_type,
                    variety=details.variety,
                    date_harvested=record.effective_date,
                    yield_quantity=details.yield_quantity,
                    yield_unit=details.yield_unit,
                    total_cost=cost,
                    total_income=income,
                    net_profit=income - cost,
                    cost_per_unit=cost_per_unit,
                )
            )

        return Return.ok(
            HarvestProfitabilityResponseDTO(
                tenant_id=tenant_id,
                records=rows,
                total_net_profit=sum((r.net_profit for r in rows), Decimal("0")),
            )
        )
