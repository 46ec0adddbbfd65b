"""Farming year and season use cases"""
from .save_farming_year import SaveFarmingYear
from .delete_farming_year import DeleteFarmingYear
from .list_farming_years import ListFarmingYears, GetFarmingYear
from .dtos import SaveFarmingYearCommandDTO, FarmingYearResponseDTO, DeleteFarmingYearResponseDTO

__all__ = [
    "SaveFarmingYear",
    "DeleteFarmingYear",
    "ListFarmingYears",
    "GetFarmingYear",
    "SaveFarmingYearCommandDTO",
    "FarmingYearResponseDTO",
    "DeleteFarmingYearResponseDTO",
]
