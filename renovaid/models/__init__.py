"""Domain enums shared by schemas, resolvers and the eligibility engine."""

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

__all__ = [
    "AtticAccess",
    "ClimateZone",
    "HeatingType",
    "HouseType",
    "IncomeTier",
    "OwnerStatus",
    "PropertyAge",
    "ReasonCode",
    "RegionClass",
    "RoofOrientation",
    "SchemeId",
]
