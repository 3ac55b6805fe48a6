"""Scheme definitions and localization keys for the eligibility engine."""

from __future__ import annotations

from renovaid.models.enums import SchemeId

# Localization keys resolved to human text by the front-end
SCHEME_NAME_KEYS: dict[SchemeId, str] = {scheme: f"scheme.{scheme.value}" for scheme in SchemeId}

# Minimum surfaces (m²)
PAC101_MIN_LIVING_AREA = 131
ISO101_MIN_ATTIC_AREA = 80
