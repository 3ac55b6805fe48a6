"""Static reference tables — department → climate zone, ANAH income ceilings.

Pure Python — loads the tables from renovaid/data/*.json (or from
REFERENCE_DATA_DIR when set). Each table is parsed once per process and
cached; callers get read-only structures.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any

from renovaid.config import settings
from renovaid.models.enums import ClimateZone, IncomeTier, RegionClass
from renovaid.schemas.reference import DepartmentInfo

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).resolve().parent / "data"
_DEPARTMENTS_FILE = "departments.json"
_INCOME_FILE = "income_ceilings.json"

# Tiers that carry a ceiling, in ascending order. PINK is everything above VIOLET.
CEILING_TIERS: tuple[IncomeTier, ...] = (IncomeTier.BLUE, IncomeTier.YELLOW, IncomeTier.VIOLET)


class ReferenceDataError(Exception):
    """Raised when a reference table is missing or malformed."""


@dataclass(frozen=True)
class DepartmentTable:
    departments: Mapping[str, DepartmentInfo]
    zone_lists: Mapping[ClimateZone, frozenset[str]]   # fallback membership lists
    idf_codes: frozenset[str]


@dataclass(frozen=True)
class IncomeTable:
    year: int
    max_indexed_size: int
    ceilings: Mapping[RegionClass, Mapping[IncomeTier, tuple[int, ...]]]
    increments: Mapping[RegionClass, Mapping[IncomeTier, int]]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _data_dir() -> Path:
    return settings.reference.reference_data_dir or _DATA_DIR


def _read_json(filename: str) -> dict[str, Any]:
    path = _data_dir() / filename
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        msg = f"Cannot load reference table {path}: {exc}"
        raise ReferenceDataError(msg) from exc


def _parse_departments(raw: dict[str, Any]) -> DepartmentTable:
    departments = {
        code: DepartmentInfo(code=code, name=entry["name"], zone=ClimateZone(entry["zone"]))
        for code, entry in raw["departments"].items()
    }
    zone_lists = {ClimateZone(zone): frozenset(codes) for zone, codes in raw.get("zones", {}).items()}
    return DepartmentTable(
        departments=MappingProxyType(departments),
        zone_lists=MappingProxyType(zone_lists),
        idf_codes=frozenset(raw["idf"]),
    )


def _parse_income(raw: dict[str, Any]) -> IncomeTable:
    size = int(raw["max_indexed_size"])
    ceilings: dict[RegionClass, Mapping[IncomeTier, tuple[int, ...]]] = {}
    increments: dict[RegionClass, Mapping[IncomeTier, int]] = {}

    for region in RegionClass:
        by_tier: dict[IncomeTier, tuple[int, ...]] = {}
        for tier in CEILING_TIERS:
            row = tuple(int(v) for v in raw["ceilings"][region.value][tier.value])
            if len(row) != size:
                msg = f"Income ceilings {region.value}/{tier.value}: expected {size} values, got {len(row)}"
                raise ReferenceDataError(msg)
            by_tier[tier] = row
        ceilings[region] = MappingProxyType(by_tier)
        increments[region] = MappingProxyType(
            {tier: int(raw["increments"][region.value][tier.value]) for tier in CEILING_TIERS}
        )

    return IncomeTable(
        year=int(raw.get("year", 0)),
        max_indexed_size=size,
        ceilings=MappingProxyType(ceilings),
        increments=MappingProxyType(increments),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


@lru_cache(maxsize=1)
def load_department_table() -> DepartmentTable:
    """Load the department → zone table and the zone / IDF membership lists."""
    raw = _read_json(_DEPARTMENTS_FILE)
    try:
        table = _parse_departments(raw)
    except (KeyError, TypeError, ValueError) as exc:
        msg = f"Malformed {_DEPARTMENTS_FILE}: {exc!r}"
        raise ReferenceDataError(msg) from exc
    logger.info("Loaded %d departments (%d IDF)", len(table.departments), len(table.idf_codes))
    return table


@lru_cache(maxsize=1)
def load_income_table() -> IncomeTable:
    """Load the ANAH income ceilings and per-person increments."""
    raw = _read_json(_INCOME_FILE)
    try:
        table = _parse_income(raw)
    except (KeyError, TypeError, ValueError) as exc:
        msg = f"Malformed {_INCOME_FILE}: {exc!r}"
        raise ReferenceDataError(msg) from exc
    logger.info("Loaded income ceilings %d (sizes 1-%d)", table.year, table.max_indexed_size)
    return table
