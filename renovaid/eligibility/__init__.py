"""Eligibility engine — rule-based matching of households to renovation subsidy schemes."""

from renovaid.eligibility.engine import evaluate_all
from renovaid.eligibility.rules import SCHEME_CHECKS
from renovaid.models.enums import ReasonCode, SchemeId
from renovaid.schemas.eligibility import (
    EligibilityResult,
    HouseholdProfile,
    Reason,
    SchemeVerdict,
)

__all__ = [
    "evaluate_all",
    "SCHEME_CHECKS",
    "SchemeId",
    "ReasonCode",
    "HouseholdProfile",
    "Reason",
    "SchemeVerdict",
    "EligibilityResult",
]
