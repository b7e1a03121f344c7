"""Core type definitions shared across all Athena modules."""

from __future__ import annotations

from enum import StrEnum


class BoundaryClass(StrEnum):
    """Primary boundary classification tiers."""

    RESPECTING = "A"
    AMBIGUOUS = "B"
    VIOLATING = "C"


class InstitutionType(StrEnum):
    """Institution categories offered by the intake form."""

    ACADEMIC = "academic"
    HEALTHCARE = "healthcare"
    REGULATORY = "regulatory"
    PLATFORM = "platform"
    GOVERNMENT = "government"
    CORPORATE = "corporate"
    OTHER = "other"


_INSTITUTION_TYPE_LABELS: dict[InstitutionType, str] = {
    InstitutionType.ACADEMIC: "Academic Institution",
    InstitutionType.HEALTHCARE: "Healthcare System",
    InstitutionType.REGULATORY: "Regulatory/Licensing Body",
    InstitutionType.PLATFORM: "Digital Platform",
    InstitutionType.GOVERNMENT: "Government Agency",
    InstitutionType.CORPORATE: "Corporate Organization",
    InstitutionType.OTHER: "Other",
}


def format_institution_type(value: str) -> str:
    """Return the display name for an institution type.

    Unrecognised values are returned unchanged.
    """
    try:
        return _INSTITUTION_TYPE_LABELS[InstitutionType(value)]
    except ValueError:
        return value
