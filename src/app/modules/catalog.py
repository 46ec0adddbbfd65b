"""Activity module catalog

Details schemas of every farm module and the registry used to look modules up
by name, by URL slug, or through a named module group.
"""

from datetime import date
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Set
from pydantic import BaseModel, Field
from src.domain.activity_record import ModuleName
from src.domain.line_item import CostCategory, LineItem, PaymentSource
from .base import ActivityModule


class BreedingDetails(BaseModel):
    animal_type: str
    breeding_method: Optional[str] = None
    dam_id: Optional[str] = None
    sire_id: Optional[str] = None
    expected_birth_date: Optional[date] = None
    notes: Optional[str] = None


class FeedingDetails(BaseModel):
    animal_group: str
    feed_type: str
    quantity_fed: Optional[Decimal] = None
    quantity_unit: Optional[str] = None
    notes: Optional[str] = None


class HealthDetails(BaseModel):
    activity_type: str
    animals_affected: str
    medication_or_treatment: Optional[str] = None
    dosage: Optional[str] = None
    administered_by: Optional[str] = None
    notes: Optional[str] = None


class HousingDetails(BaseModel):
    name: str
    housing_type: str
    capacity: Optional[int] = None
    capacity_unit: Optional[str] = None
    notes: Optional[str] = None


class LandPreparationDetails(BaseModel):
    plot_name: str
    activity_type: str
    notes: Optional[str] = None


class PlantingDetails(BaseModel):
    crop_type: str
    variety: Optional[str] = None
    area_planted: Optional[str] = None
    seed_source: Optional[str] = None
    planting_method: Optional[str] = None
    plot_name: Optional[str] = None
    notes: Optional[str] = None


class CropMaintenanceDetails(BaseModel):
    crop_type: str
    activity_type: str
    plot_name: Optional[str] = None
    notes: Optional[str] = None


class HarvestingDetails(BaseModel):
    crop_type: str
    variety: Optional[str] = None
    area_harvested: Optional[str] = None
    yield_quantity: Decimal = Field(default=Decimal("0"), ge=0)
    yield_unit: str = "kg"
    quality_grade: Optional[str] = None
    storage_location: Optional[str] = None
    notes: Optional[str] = None


class SoilTestDetails(BaseModel):
    plot_name: str
    ph_level: Optional[Decimal] = None
    nitrogen_ppm: Optional[Decimal] = None
    phosphorus_ppm: Optional[Decimal] = None
    potassium_ppm: Optional[Decimal] = None
    organic_matter_percent: Optional[Decimal] = None
    lab_name: Optional[str] = None
    notes: Optional[str] = None


class PayrollDetails(BaseModel):
    employee_id: str
    employee_name: str
    pay_period: str
    gross_amount: Decimal = Field(gt=0)
    deductions: Decimal = Field(default=Decimal("0"), ge=0)
    payment_method: PaymentSource = PaymentSource.BANK
    notes: Optional[str] = None

    @property
    def net_amount(self) -> Decimal:
        return self.gross_amount - self.deductions


class EventDetails(BaseModel):
    event_name: str
    location: Optional[str] = None
    expected_attendees: Optional[int] = None
    notes: Optional[str] = None


class AssetDetails(BaseModel):
    asset_name: str
    asset_type: str
    serial_number: Optional[str] = None
    condition: Optional[str] = None
    notes: Optional[str] = None


class PayrollModule(ActivityModule[PayrollDetails]):
    """Payroll books a single expense of the gross amount, keyed by the record id"""

    def __init__(self):
        super().__init__(ModuleName.PAYROLL, PayrollDetails)

    def to_line_items(
        self, activity_id: str, details: PayrollDetails, line_items: List[LineItem]
    ) -> List[LineItem]:
        return [
            LineItem(
                id=activity_id,
                description=f"Payroll for {details.employee_name} - {details.pay_period}",
                category=CostCategory.PAYROLL,
                payment_source=details.payment_method,
                unit="payment",
                quantity=Decimal("1"),
                unit_price=details.gross_amount,
            )
        ]


MODULES: Dict[ModuleName, ActivityModule] = {
    module.name: module
    for module in [
        ActivityModule(ModuleName.BREEDING, BreedingDetails),
        ActivityModule(ModuleName.FEEDING, FeedingDetails),
        ActivityModule(ModuleName.HEALTH, HealthDetails),
        ActivityModule(ModuleName.HOUSING, HousingDetails),
        ActivityModule(ModuleName.LAND_PREPARATION, LandPreparationDetails),
        ActivityModule(ModuleName.PLANTING, PlantingDetails),
        ActivityModule(ModuleName.CROP_MAINTENANCE, CropMaintenanceDetails),
        ActivityModule(ModuleName.HARVESTING, HarvestingDetails, records_sales=True),
        ActivityModule(ModuleName.SOIL_TEST, SoilTestDetails),
        PayrollModule(),
        ActivityModule(ModuleName.EVENT, EventDetails),
        ActivityModule(ModuleName.ASSET, AssetDetails),
    ]
}

MODULE_GROUPS: Dict[str, Set[ModuleName]] = {
    "animal_production": {
        ModuleName.BREEDING,
        ModuleName.FEEDING,
        ModuleName.HEALTH,
        ModuleName.HOUSING,
    },
    "crop_production": {
        ModuleName.LAND_PREPARATION,
        ModuleName.PLANTING,
        ModuleName.CROP_MAINTENANCE,
        ModuleName.HARVESTING,
        ModuleName.SOIL_TEST,
    },
    "office": {
        ModuleName.PAYROLL,
        ModuleName.EVENT,
        ModuleName.ASSET,
    },
}


def get_module(name: ModuleName) -> ActivityModule:
    return MODULES[name]


def find_module(key: str) -> Optional[ActivityModule]:
    """Look a module up by its name ("Land Preparation") or slug ("land-preparation")"""
    for module in MODULES.values():
        if key in (module.name.value, module.slug):
            return module
    return None


def expand_module_filter(keys: Optional[Iterable[str]]) -> Optional[Set[ModuleName]]:
    """
    Turn module names, slugs and group names into a set of modules

    Returns:
        None when no filter was given (all modules)

    Raises:
        ValueError: If a key matches no module and no group
    """
    if not keys:
        return None

    modules: Set[ModuleName] = set()
    for key in keys:
        if key in MODULE_GROUPS:
            modules |= MODULE_GROUPS[key]
            continue
        module = find_module(key)
        if module is None:
            raise ValueError(f"Unknown module or module group: {key}")
        modules.add(module.name)
    return modules
