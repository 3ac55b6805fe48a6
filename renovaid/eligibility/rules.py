"""Per-scheme eligibility rule functions.

Each function takes the household profile plus the resolved climate zone
and income tier, and returns a SchemeVerdict with its ordered reasons.
Pure Python, deterministic, total: a missing answer fails the condition
that needs it.

Every evaluated condition appends exactly one Reason, in the order listed
in each docstring. That order is what the report shows to the household,
so it must not be rearranged.
"""

from __future__ import annotations

from collections.abc import Callable

from renovaid.eligibility.schemes import (
    ISO101_MIN_ATTIC_AREA,
    PAC101_MIN_LIVING_AREA,
    SCHEME_NAME_KEYS,
)
from renovaid.models.enums import (
    AtticAccess,
    ClimateZone,
    HeatingType,
    HouseType,
    IncomeTier,
    OwnerStatus,
    PropertyAge,
    ReasonCode,
    RoofOrientation,
    SchemeId,
)
from renovaid.schemas.eligibility import HouseholdProfile, Reason, SchemeVerdict

SchemeCheck = Callable[[HouseholdProfile, ClimateZone, IncomeTier], SchemeVerdict]


def _record(reasons: list[Reason], met: bool, ok: ReasonCode, fail: ReasonCode) -> bool:
    """Append the pass or fail reason for a condition and return the outcome."""
    reasons.append(Reason(code=ok if met else fail, met=met))
    return met


def _fail(reasons: list[Reason], code: ReasonCode) -> None:
    reasons.append(Reason(code=code, met=False))


def _verdict(scheme: SchemeId, reasons: list[Reason]) -> SchemeVerdict:
    return SchemeVerdict(
        scheme_id=scheme,
        name_key=SCHEME_NAME_KEYS[scheme],
        eligible=bool(reasons) and all(r.met for r in reasons),
        reasons=tuple(reasons),
    )


# ── PAC à 1€ ───────────────────────────────────────────────────────────────


def check_pac101(profile: HouseholdProfile, zone: ClimateZone, tier: IncomeTier) -> SchemeVerdict:
    """Heat pump subsidized offer.

    Order: heating replaceable (heat pump / electric short-circuit), owner,
    house then age, living area ≥ 131 m², BLUE income.
    """
    reasons: list[Reason] = []

    # Short-circuits: nothing to replace
    if profile.heating_type == HeatingType.HEAT_PUMP:
        _fail(reasons, ReasonCode.FAIL_ALREADY_PAC)
        return _verdict(SchemeId.PAC101, reasons)
    if profile.heating_type == HeatingType.ELECTRICITY:
        _fail(reasons, ReasonCode.FAIL_ELEC_HEATING)
        return _verdict(SchemeId.PAC101, reasons)

    reasons.append(Reason(code=ReasonCode.OK_HEATING_REPLACE, met=True))

    _record(
        reasons,
        profile.owner_status == OwnerStatus.OWNER,
        ReasonCode.OK_OWNER,
        ReasonCode.FAIL_TENANT_SOCIAL,
    )

    # Age is only looked at once the dwelling is a house
    if profile.house_type != HouseType.HOUSE:
        _fail(reasons, ReasonCode.FAIL_APARTMENT)
    else:
        _record(
            reasons,
            profile.property_age == PropertyAge.MORE_2Y,
            ReasonCode.OK_HOUSE_AGE,
            ReasonCode.FAIL_NEW_BUILD,
        )

    _record(
        reasons,
        (profile.living_area or 0) >= PAC101_MIN_LIVING_AREA,
        ReasonCode.OK_SURFACE,
        ReasonCode.FAIL_SURFACE_LOW,
    )

    _record(reasons, tier == IncomeTier.BLUE, ReasonCode.OK_INCOME_BLUE, ReasonCode.FAIL_INCOME_TOO_HIGH)

    return _verdict(SchemeId.PAC101, reasons)


# ── Isolation combles à 1€ ────────────────────────────────────────────────


def check_iso101(profile: HouseholdProfile, zone: ClimateZone, tier: IncomeTier) -> SchemeVerdict:
    """Attic insulation subsidized offer.

    Order: not a social tenant, zone H1/H2, BLUE income, attic ≥ 80 m² with
    an access. Private tenants pass the occupancy check.
    """
    reasons: list[Reason] = []

    occupant_ok = profile.owner_status is not None and profile.owner_status != OwnerStatus.TENANT_SOCIAL
    _record(reasons, occupant_ok, ReasonCode.OK_OWNER, ReasonCode.FAIL_TENANT_SOCIAL)

    _record(
        reasons,
        zone in (ClimateZone.H1, ClimateZone.H2),
        ReasonCode.OK_ZONE_ELIGIBLE,
        ReasonCode.FAIL_ZONE,
    )

    _record(reasons, tier == IncomeTier.BLUE, ReasonCode.OK_INCOME_BLUE, ReasonCode.FAIL_INCOME_TOO_HIGH)

    tech_ok = (
        (profile.attic_area or 0) >= ISO101_MIN_ATTIC_AREA
        and profile.attic_access is not None
        and profile.attic_access != AtticAccess.NONE
    )
    _record(reasons, tech_ok, ReasonCode.OK_TECH_ISO, ReasonCode.FAIL_TECH_ISO)

    return _verdict(SchemeId.ISO101, reasons)


# ── Système Solaire Combiné ───────────────────────────────────────────────


def check_ssc(profile: HouseholdProfile, zone: ClimateZone, tier: IncomeTier) -> SchemeVerdict:
    """Solar combined system, offered to households already on a heat pump.

    Order: heat pump present (short-circuit), roof usable and not north
    facing, owner.
    """
    reasons: list[Reason] = []

    if profile.heating_type != HeatingType.HEAT_PUMP:
        _fail(reasons, ReasonCode.FAIL_NO_HEAT_PUMP)
        return _verdict(SchemeId.SSC, reasons)

    roof_ok = (
        bool(profile.roof_space_available)
        and profile.roof_orientation is not None
        and profile.roof_orientation != RoofOrientation.NORTH
    )
    _record(reasons, roof_ok, ReasonCode.OK_TECH_SSC, ReasonCode.FAIL_TECH_SSC)

    _record(
        reasons,
        profile.owner_status == OwnerStatus.OWNER,
        ReasonCode.OK_OWNER,
        ReasonCode.FAIL_TENANT_SOCIAL,
    )

    return _verdict(SchemeId.SSC, reasons)


# ── MaPrimeRénov' ─────────────────────────────────────────────────────────


def check_mpr(profile: HouseholdProfile, zone: ClimateZone, tier: IncomeTier) -> SchemeVerdict:
    """General renovation premium: owner of a dwelling older than 2 years.

    Evaluated as one combined condition. On failure only the failing parts
    are reported (tenant, then new build).
    """
    reasons: list[Reason] = []
    is_owner = profile.owner_status == OwnerStatus.OWNER
    is_old_enough = profile.property_age == PropertyAge.MORE_2Y

    if is_owner and is_old_enough:
        reasons.append(Reason(code=ReasonCode.OK_OWNER, met=True))
        reasons.append(Reason(code=ReasonCode.OK_HOUSE_AGE, met=True))
    else:
        if not is_owner:
            _fail(reasons, ReasonCode.FAIL_TENANT_SOCIAL)
        if not is_old_enough:
            _fail(reasons, ReasonCode.FAIL_NEW_BUILD)

    return _verdict(SchemeId.MPR, reasons)


# ── CEE ───────────────────────────────────────────────────────────────────


def check_cee(profile: HouseholdProfile, zone: ClimateZone, tier: IncomeTier) -> SchemeVerdict:
    """Energy-saving certificates: any dwelling older than 2 years."""
    reasons: list[Reason] = []
    _record(
        reasons,
        profile.property_age == PropertyAge.MORE_2Y,
        ReasonCode.OK_HOUSE_AGE,
        ReasonCode.FAIL_NEW_BUILD,
    )
    return _verdict(SchemeId.CEE, reasons)


# ── Rule registry ─────────────────────────────────────────────────────────

# Maps SchemeId → check function, in report order. The checks are
# independent of each other and may run in any order.
SCHEME_CHECKS: dict[SchemeId, SchemeCheck] = {
    SchemeId.PAC101: check_pac101,
    SchemeId.ISO101: check_iso101,
    SchemeId.SSC: check_ssc,
    SchemeId.MPR: check_mpr,
    SchemeId.CEE: check_cee,
}
