"""Department → climate zone resolution.

Pure Python — backed by the cached department table. Total over its input:
anything unknown or missing resolves to H3, never an error.
"""

from __future__ import annotations

from renovaid.models.enums import ClimateZone, RegionClass
from renovaid.reference import load_department_table
from renovaid.schemas.reference import DepartmentInfo


def normalize_department(raw: str | None) -> str | None:
    """Normalize a department or postal code to its 2-character form.

    "1" → "01", "75001" → "75", "2a" → "2A". Returns None for empty input.
    """
    if raw is None:
        return None
    clean = raw.strip()
    if not clean:
        return None
    if len(clean) == 1 and clean.isdigit():
        clean = clean.zfill(2)
    return clean[:2].upper()


def resolve_zone(department_code: str | None) -> ClimateZone:
    """Return the climate zone of a department.

    Lookup order: department table, then the H1 and H2 membership lists,
    then H3 as the default.
    """
    code = normalize_department(department_code)
    if code is None:
        return ClimateZone.H3

    table = load_department_table()
    info = table.departments.get(code)
    if info is not None:
        return info.zone

    for zone in (ClimateZone.H1, ClimateZone.H2):
        if code in table.zone_lists.get(zone, frozenset()):
            return zone
    return ClimateZone.H3


def resolve_region(department_code: str | None) -> RegionClass:
    """IDF for the eight Île-de-France departments, OTHER for everything else."""
    code = normalize_department(department_code)
    if code is not None and code in load_department_table().idf_codes:
        return RegionClass.IDF
    return RegionClass.OTHER


def lookup_department(department_code: str | None) -> DepartmentInfo | None:
    """Return the department table entry, or None if the code is unknown."""
    code = normalize_department(department_code)
    if code is None:
        return None
    return load_department_table().departments.get(code)
