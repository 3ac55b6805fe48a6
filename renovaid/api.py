"""Public HTTP routes — eligibility evaluation and reference-table lookups.

The eligibility route is a thin wrapper: validation happens in the
HouseholdProfile schema, the decision in evaluate_all().
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query

from renovaid.eligibility import evaluate_all
from renovaid.models.enums import RegionClass
from renovaid.resolvers import income_ceilings, lookup_department
from renovaid.schemas.eligibility import EligibilityResult, HouseholdProfile
from renovaid.schemas.reference import DepartmentInfo, IncomeCeilings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/eligibility", response_model=EligibilityResult, tags=["eligibility"])
async def post_eligibility(profile: HouseholdProfile) -> EligibilityResult:
    """Evaluate a (possibly partial) questionnaire."""
    result = evaluate_all(profile)
    logger.info(
        "Eligibility request: zone=%s tier=%s global_eligible=%s",
        result.climate_zone.value,
        result.income_tier.value,
        result.global_eligible,
    )
    return result


@router.get("/reference/departments/{code}", response_model=DepartmentInfo, tags=["reference"])
async def get_department(code: str) -> DepartmentInfo:
    """Department name and climate zone."""
    info = lookup_department(code)
    if info is None:
        raise HTTPException(status_code=404, detail=f"Unknown department: {code}")
    return info


@router.get("/reference/income-ceilings", response_model=IncomeCeilings, tags=["reference"])
async def get_income_ceilings(
    region: RegionClass = Query(...),
    household_size: int = Query(..., ge=1),
) -> IncomeCeilings:
    """Income tier ceilings for a household size in a region."""
    return income_ceilings(region, household_size)
