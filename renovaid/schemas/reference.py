"""Pydantic schemas for reference-table lookups (departments, income ceilings)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from renovaid.models.enums import ClimateZone, IncomeTier, RegionClass


class DepartmentInfo(BaseModel):
    """Department table entry."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    code: str            # normalized, e.g. "01", "2A"
    name: str
    zone: ClimateZone


class IncomeCeilings(BaseModel):
    """Income ceilings of BLUE/YELLOW/VIOLET for one household.

    Incomes above the VIOLET ceiling fall into PINK, which has no ceiling.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    region: RegionClass
    household_size: int
    limits: dict[IncomeTier, int]
