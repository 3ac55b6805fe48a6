"""Pydantic schemas — engine input/output and reference lookups."""

from renovaid.schemas.eligibility import EligibilityResult, HouseholdProfile, Reason, SchemeVerdict
from renovaid.schemas.reference import DepartmentInfo, IncomeCeilings

__all__ = [
    "DepartmentInfo",
    "EligibilityResult",
    "HouseholdProfile",
    "IncomeCeilings",
    "Reason",
    "SchemeVerdict",
]
