"""Domain enums used across the Pydantic schemas and the eligibility engine.

All enums use str mixin for JSON serialization.
"""

from __future__ import annotations

from enum import Enum


class OwnerStatus(str, Enum):
    """Occupancy status of the household — drives most scheme rules."""

    OWNER = "owner"
    TENANT_PRIVATE = "tenant_private"
    TENANT_SOCIAL = "tenant_social"


class HouseType(str, Enum):
    HOUSE = "house"
    APARTMENT = "apartment"


class PropertyAge(str, Enum):
    """Age of the dwelling. Schemes only fund homes older than 2 years."""

    MORE_2Y = "more_2y"
    LESS_2Y = "less_2y"


class HeatingType(str, Enum):
    """Current main heating system."""

    ELECTRICITY = "electricity"
    GAS = "gas"
    FUEL = "fuel"
    WOOD = "wood"
    HEAT_PUMP = "heat_pump"
    OTHER = "other"


class AtticAccess(str, Enum):
    TRAPDOOR = "trapdoor"
    PLAIN_FOOT = "plain_foot"
    NONE = "none"


class RoofOrientation(str, Enum):
    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"


class ClimateZone(str, Enum):
    """Thermal-severity zone of a department."""

    H1 = "H1"
    H2 = "H2"
    H3 = "H3"


class IncomeTier(str, Enum):
    """ANAH affordability tiers, least to most affluent."""

    BLUE = "BLUE"        # très modestes
    YELLOW = "YELLOW"    # modestes
    VIOLET = "VIOLET"    # intermédiaires
    PINK = "PINK"        # supérieurs, also the fail-safe tier


class RegionClass(str, Enum):
    """Income table region: Île-de-France or the rest of the country."""

    IDF = "IDF"
    OTHER = "OTHER"


class SchemeId(str, Enum):
    """The five subsidy schemes evaluated by the eligibility engine."""

    PAC101 = "pac101"    # heat pump "à 1€" offer
    ISO101 = "iso101"    # attic insulation "à 1€" offer
    SSC = "ssc"          # système solaire combiné
    MPR = "mpr"          # MaPrimeRénov'
    CEE = "cee"          # certificats d'économies d'énergie


class ReasonCode(str, Enum):
    """Stable identifiers for evaluated conditions.

    Values double as localization keys; the pass/fail outcome is carried by
    the Reason model, not by the identifier.
    """

    OK_HEATING_REPLACE = "reason.ok_heating_replace"
    FAIL_ALREADY_PAC = "reason.fail_already_pac"
    FAIL_ELEC_HEATING = "reason.fail_elec_heating"
    FAIL_NO_HEAT_PUMP = "reason.fail_no_heat_pump"

    OK_OWNER = "reason.ok_owner"
    FAIL_TENANT_SOCIAL = "reason.fail_tenant_social"

    OK_HOUSE_AGE = "reason.ok_house_age"
    FAIL_APARTMENT = "reason.fail_apartment"
    FAIL_NEW_BUILD = "reason.fail_new_build"

    OK_SURFACE = "reason.ok_surface"
    FAIL_SURFACE_LOW = "reason.fail_surface_low"

    OK_INCOME_BLUE = "reason.ok_income_blue"
    FAIL_INCOME_TOO_HIGH = "reason.fail_income_too_high"

    OK_ZONE_ELIGIBLE = "reason.ok_zone_eligible"
    FAIL_ZONE = "reason.fail_zone"

    OK_TECH_ISO = "reason.ok_tech_iso"
    FAIL_TECH_ISO = "reason.fail_tech_iso"

    OK_TECH_SSC = "reason.ok_tech_ssc"
    FAIL_TECH_SSC = "reason.fail_tech_ssc"
