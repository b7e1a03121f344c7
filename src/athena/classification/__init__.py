"""Boundary classification module for Athena.

Provides keyword-based classification of institutional boundary behavior
into Class A (respecting), Class B (ambiguous) and Class C (violating).
"""

from athena.classification.models import ClassificationResult, SubClassification
from athena.classification.rules import (
    CatalogError,
    ClassificationEngine,
    classify,
    has_discrepancies,
)

__all__ = [
    "CatalogError",
    "ClassificationEngine",
    "ClassificationResult",
    "SubClassification",
    "classify",
    "has_discrepancies",
]
