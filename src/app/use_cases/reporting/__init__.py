"""Reporting use cases"""
from .resolve_window import ResolveWindow
from .aggregate_ledger import AggregateLedger
from .yearly_cashflow import YearlyCashflow
from .harvest_profitability import HarvestProfitability
from .projections import summarize_entries, percentage
from .dtos import (
    ScopeMode,
    WindowScopeDTO,
    ReportingWindowDTO,
    MonthlyPointDTO,
    CategoryPointDTO,
    LedgerSummaryDTO,
    YearlyCashflowPointDTO,
    YearlyCashflowResponseDTO,
    HarvestProfitabilityDTO,
    HarvestProfitabilityResponseDTO,
)

__all__ = [
    "ResolveWindow",
    "AggregateLedger",
    "YearlyCashflow",
    "HarvestProfitability",
    "summarize_entries",
    "percentage",
    "ScopeMode",
    "WindowScopeDTO",
    "ReportingWindowDTO",
    "MonthlyPointDTO",
    "CategoryPointDTO",
    "LedgerSummaryDTO",
    "YearlyCashflowPointDTO",
    "YearlyCashflowResponseDTO",
    "HarvestProfitabilityDTO",
    "HarvestProfitabilityResponseDTO",
]
