"""Eligibility engine — evaluates all schemes against a household profile.

Pure Python orchestrator. No I/O beyond the cached reference tables, no
randomness, no clock: the same profile always yields an equal result.
Report identifiers and timestamps belong to the caller.
"""

from __future__ import annotations

import logging

from renovaid.eligibility.rules import SCHEME_CHECKS
from renovaid.models.enums import SchemeId
from renovaid.resolvers.geography import normalize_department, resolve_region, resolve_zone
from renovaid.resolvers.income import resolve_income_tier
from renovaid.schemas.eligibility import EligibilityResult, HouseholdProfile, SchemeVerdict

logger = logging.getLogger(__name__)


def _department_from_profile(profile: HouseholdProfile) -> str | None:
    """Explicit department first, else the first two characters of the postal code."""
    if profile.department_code and profile.department_code.strip():
        return normalize_department(profile.department_code)
    if profile.postal_code and profile.postal_code.strip():
        return normalize_department(profile.postal_code.strip()[:2])
    return None


def evaluate_all(profile: HouseholdProfile) -> EligibilityResult:
    """Evaluate the 5 subsidy schemes against a household profile.

    Returns EligibilityResult with the resolved zone and income tier,
    one verdict per scheme, and the global flag (any scheme eligible).
    Never raises: incomplete profiles degrade to H3 / PINK / ineligible.
    """
    department = _department_from_profile(profile)
    zone = resolve_zone(department)
    region = resolve_region(department)
    tier = resolve_income_tier(region, profile.household_size, profile.annual_income)

    schemes: dict[SchemeId, SchemeVerdict] = {}
    for scheme_id, check_fn in SCHEME_CHECKS.items():
        schemes[scheme_id] = check_fn(profile, zone, tier)

    global_eligible = any(verdict.eligible for verdict in schemes.values())

    logger.debug(
        "Eligibility evaluated: dept=%s zone=%s region=%s tier=%s eligible=%s",
        department,
        zone.value,
        region.value,
        tier.value,
        [s.value for s, v in schemes.items() if v.eligible],
    )

    return EligibilityResult(
        global_eligible=global_eligible,
        income_tier=tier,
        climate_zone=zone,
        region_class=region,
        department_code=department,
        schemes=schemes,
    )
