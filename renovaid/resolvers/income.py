"""Household income → ANAH income tier.

Pure Python, integer/Decimal arithmetic. Implements:
- Ceilings indexed by region class and household size 1–5
- A per-tier increment for each person beyond the indexed range
- Inclusive thresholds: income == ceiling stays in the tier

Missing region, household size or income resolves to PINK (most
restrictive tier) rather than raising.
"""

from __future__ import annotations

from decimal import Decimal

from renovaid.models.enums import IncomeTier, RegionClass
from renovaid.reference import CEILING_TIERS, load_income_table
from renovaid.schemas.reference import IncomeCeilings


def _tier_limits(region: RegionClass, household_size: int) -> dict[IncomeTier, int]:
    """Compute BLUE/YELLOW/VIOLET ceilings for a household size ≥ 1."""
    table = load_income_table()
    clamped = min(max(1, household_size), table.max_indexed_size)
    extra = max(0, household_size - table.max_indexed_size)

    ceilings = table.ceilings[region]
    increments = table.increments[region]
    return {
        tier: ceilings[tier][clamped - 1] + extra * increments[tier]
        for tier in CEILING_TIERS
    }


def income_ceilings(region: RegionClass, household_size: int) -> IncomeCeilings:
    """Return the tier ceilings applying to a household.

    Sizes below 1 are treated as 1.
    """
    size = max(1, household_size)
    return IncomeCeilings(region=region, household_size=size, limits=_tier_limits(region, size))


def resolve_income_tier(
    region: RegionClass | None,
    household_size: int | None,
    annual_income: Decimal | int | None,
) -> IncomeTier:
    """Classify a household into an income tier.

    Args:
        region: IDF or OTHER.
        household_size: Number of people in the household (must be ≥ 1).
        annual_income: Reference tax income for the household, in euros.

    Returns:
        The first tier whose ceiling is ≥ income, or PINK.
    """
    if region is None or not household_size or household_size < 1 or annual_income is None:
        return IncomeTier.PINK

    for tier, limit in _tier_limits(region, household_size).items():
        if annual_income <= limit:
            return tier
    return IncomeTier.PINK
