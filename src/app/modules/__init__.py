"""Farm activity modules"""
from .base import ActivityModule, ProcessedItems
from .catalog import (
    MODULES,
    MODULE_GROUPS,
    PayrollModule,
    get_module,
    find_module,
    expand_module_filter,
)

__all__ = [
    "ActivityModule",
    "ProcessedItems",
    "MODULES",
    "MODULE_GROUPS",
    "PayrollModule",
    "get_module",
    "find_module",
    "expand_module_filter",
]
