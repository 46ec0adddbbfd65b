"""Budgeting use cases"""
from .save_budget import SaveBudget
from .delete_budget import DeleteBudget
from .reconcile_budget import ReconcileBudget, ListBudgets, GetBudget
from .reconcile import reconcile
from .dtos import (
    SaveBudgetCommandDTO,
    ReconciliationDTO,
    BudgetResponseDTO,
    DeleteBudgetResponseDTO,
)

__all__ = [
    "SaveBudget",
    "DeleteBudget",
    "ReconcileBudget",
    "ListBudgets",
    "GetBudget",
    "reconcile",
    "SaveBudgetCommandDTO",
    "ReconciliationDTO",
    "BudgetResponseDTO",
    "DeleteBudgetResponseDTO",
]
