"""Pydantic schemas for the eligibility engine.

Pure data classes — no business logic. The profile is the engine input,
SchemeVerdict / EligibilityResult are its outputs. Field names are
snake_case; camelCase aliases are accepted on input and used when
serializing by alias (the questionnaire front-end speaks camelCase).
"""

from __future__ import annotations

from decimal import Decimal
from types import MappingProxyType
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

from renovaid.models.enums import (
    AtticAccess,
    ClimateZone,
    HeatingType,
    HouseType,
    IncomeTier,
    OwnerStatus,
    PropertyAge,
    ReasonCode,
    RegionClass,
    RoofOrientation,
    SchemeId,
)


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------


class HouseholdProfile(_CamelModel):
    """Questionnaire answers fed into the eligibility engine.

    Every field is optional: a partially completed questionnaire still
    evaluates, missing answers simply fail the conditions that need them.
    """

    # Identity / contact: carried for the report, unused by the rules
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    email: str | None = None
    address: str | None = None
    postal_code: str | None = None     # first 2 chars are the fallback department
    city: str | None = None

    # Status & housing
    owner_status: OwnerStatus | None = None
    house_type: HouseType | None = None
    property_age: PropertyAge | None = None

    # Location & household
    department_code: str | None = None  # e.g. "75", "2A"
    household_size: int | None = None
    annual_income: Decimal | None = None  # revenu fiscal de référence, €

    # Heating & technical
    heating_type: HeatingType | None = None
    living_area: Decimal | None = None    # m²
    attic_area: Decimal | None = None     # m²
    attic_access: AtticAccess | None = None
    roof_orientation: RoofOrientation | None = None
    roof_space_available: bool | None = None


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


class Reason(_CamelModel):
    """One evaluated condition: a Pass (met=True) or Fail (met=False) tag."""

    code: ReasonCode
    met: bool


class SchemeVerdict(_CamelModel):
    """Eligibility verdict for a single scheme, with its ordered audit trail."""

    scheme_id: SchemeId
    name_key: str                       # localization key, e.g. "scheme.pac101"
    eligible: bool
    reasons: tuple[Reason, ...] = ()


# Read-only mapping once validated; serialized back as a plain dict.
SchemeVerdicts = Annotated[
    dict[SchemeId, SchemeVerdict],
    AfterValidator(MappingProxyType),
    PlainSerializer(dict, return_type=dict[SchemeId, SchemeVerdict]),
]


class EligibilityResult(_CamelModel):
    """Full evaluation output — one per evaluate_all() call."""

    global_eligible: bool
    income_tier: IncomeTier
    climate_zone: ClimateZone
    region_class: RegionClass
    department_code: str | None = None  # normalized code actually used
    schemes: SchemeVerdicts
