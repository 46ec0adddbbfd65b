"""Data Transfer Objects for Ledger Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field
from src.domain.activity_record import ActivityRecord, ModuleName
from src.domain.ledger_entry import LedgerEntry
from src.domain.line_item import LineItem, SaleItem


class SaveActivityCommandDTO(BaseModel):
    """
    Command DTO for creating or updating an activity record

    Used as input to SaveActivityRecord. Line items arrive already validated
    by the form layer; their totals are recomputed regardless.
    """

    tenant_id: str = Field(
        ...,
        description="Farm (tenant) identifier"
    )

    module_name: ModuleName = Field(
        ...,
        description="Module that owns the record"
    )

    activity_id: Optional[str] = Field(
        default=None,
        description="Existing record ID (update) or None (create)"
    )

    effective_date: date = Field(
        ...,
        description="Date the activity happened"
    )

    farming_year_id: Optional[str] = Field(
        default=None,
        description="Farming year tag"
    )

    season_id: Optional[str] = Field(
        default=None,
        description="Season tag"
    )

    details: Dict[str, Any] = Field(
        default_factory=dict,
        description="Module-specific fields"
    )

    line_items: List[LineItem] = Field(
        default_factory=list,
        description="Cost line items"
    )

    sale_items: List[SaleItem] = Field(
        default_factory=list,
        description="Sale line items (harvesting only)"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "tenant_id": "farm_abc123",
                "module_name": "Feeding",
                "effective_date": "2024-01-10",
                "details": {"animal_group": "Broiler Batch 1", "feed_type": "Starter mash"},
                "line_items": [{
                    "description": "Starter mash",
                    "category": "Material/Input",
                    "payment_source": "Cash",
                    "unit": "bag",
                    "quantity": "2",
                    "unit_price": "50.00"
                }]
            }
        }


class ActivityRecordResponseDTO(BaseModel):
    """
    Response DTO for activity record operations

    Returned by SaveActivityRecord, GetActivityRecord and ListActivityRecords.
    """

    id: str
    tenant_id: str
    module_name: str
    effective_date: date
    farming_year_id: Optional[str] = None
    season_id: Optional[str] = None
    details: Dict[str, Any]
    line_items: List[LineItem]
    sale_items: List[SaleItem]
    total_cost: Decimal
    total_income: Optional[Decimal] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_record(cls, record: ActivityRecord) -> "ActivityRecordResponseDTO":
        return cls(
            id=record.id,
            tenant_id=record.tenant_id,
            module_name=ModuleName(record.module_name).value,
            effective_date=record.effective_date,
            farming_year_id=record.farming_year_id,
            season_id=record.season_id,
            details=record.details or {},
            line_items=record.get_line_items(),
            sale_items=record.get_sale_items(),
            total_cost=record.total_cost,
            total_income=record.total_income,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )


class DeleteActivityResponseDTO(BaseModel):
    """Response DTO for DeleteActivityRecord"""

    activity_id: str
    module_name: str
    ledger_entries_deleted: int


class LedgerEntryDTO(BaseModel):
    """Single ledger entry in listings"""

    id: str
    entry_date: date
    description: str
    amount: Decimal
    kind: str
    category: str
    payment_source: Optional[str] = None
    source_module: str
    source_activity_id: str
    source_line_item_id: str

    @classmethod
    def from_entry(cls, entry: LedgerEntry) -> "LedgerEntryDTO":
        return cls(
            id=entry.id,
            entry_date=entry.entry_date,
            description=entry.description,
            amount=entry.amount,
            kind=_value(entry.kind),
            category=_value(entry.category),
            payment_source=_value(entry.payment_source) if entry.payment_source else None,
            source_module=_value(entry.source_module),
            source_activity_id=entry.source_activity_id,
            source_line_item_id=entry.source_line_item_id,
        )


class ListLedgerEntriesResponseDTO(BaseModel):
    """Paginated ledger listing"""

    entries: List[LedgerEntryDTO]
    total: int = Field(..., description="Total entries matching the filter")
    limit: int
    offset: int


class OrphanEntryDTO(BaseModel):
    """Ledger entry whose source activity record no longer exists"""

    entry_id: str
    tenant_id: str
    source_module: str
    source_activity_id: str
    amount: Decimal


class TotalDriftDTO(BaseModel):
    """Activity record whose cached totals disagree with its ledger entries"""

    activity_id: str
    tenant_id: str
    module_name: str
    recorded_total_cost: Decimal
    ledger_total_cost: Decimal
    recorded_total_income: Optional[Decimal] = None
    ledger_total_income: Decimal


class LedgerAuditResultDTO(BaseModel):
    """Result of a ledger consistency audit"""

    activities_checked: int
    orphan_entries: List[OrphanEntryDTO]
    drifted_activities: List[TotalDriftDTO]
    audit_time: datetime
    execution_time_ms: int

    @property
    def violations_found(self) -> int:
        return len(self.orphan_entries) + len(self.drifted_activities)


def _value(member: Any) -> str:
    return member.value if hasattr(member, "value") else member
