"""Deterministic resolvers — climate zone, region class and income tier."""

from renovaid.resolvers.geography import lookup_department, normalize_department, resolve_region, resolve_zone
from renovaid.resolvers.income import income_ceilings, resolve_income_tier

__all__ = [
    "income_ceilings",
    "lookup_department",
    "normalize_department",
    "resolve_income_tier",
    "resolve_region",
    "resolve_zone",
]
