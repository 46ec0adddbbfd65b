"""Shared request parameter parsing for API routes"""

from typing import List, Optional, Set
from libs.result import Error
from src.api.error import ClientError
from src.app.modules import ActivityModule, expand_module_filter, find_module
from src.domain.activity_record import ModuleName


def resolve_module(key: str) -> ActivityModule:
    """Module by name or slug, 404 MODULE_NOT_FOUND otherwise"""
    module = find_module(key)
    if module is None:
        raise ClientError.from_error(
            Error(code="MODULE_NOT_FOUND", message=f"Unknown module: {key}")
        )
    return module


def resolve_module_filter(keys: Optional[List[str]]) -> Optional[Set[ModuleName]]:
    try:
        return expand_module_filter(keys)
    except ValueError as e:
        raise ClientError.from_error(Error(code="MODULE_NOT_FOUND", message=str(e)))
