"""Boundary classification rules engine for Athena.

Scores the observed behaviors against three fixed keyword sets, selects a
BoundaryClass, and attaches the fixed catalog text for that class. The
catalog is loaded from YAML; the keyword sets and selection order are code.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from athena.classification.models import (
    ClassificationResult,
    ClassProfile,
    SubClassification,
)
from athena.core.types import BoundaryClass

# Default catalog shipped alongside this module
_DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent / "catalog.yml"

RESPECTING_KEYWORDS: tuple[str, ...] = (
    "consistent",
    "adheres",
    "maintains",
    "follows",
    "respects",
    "clear",
    "explicit",
)

VIOLATING_KEYWORDS: tuple[str, ...] = (
    "violates",
    "overreach",
    "exceeded",
    "beyond",
    "outside",
    "substitutes",
    "contrary",
)

AMBIGUOUS_KEYWORDS: tuple[str, ...] = (
    "unclear",
    "ambiguous",
    "inconsistent",
    "varies",
    "sometimes",
    "ad hoc",
)

DISCREPANCY_KEYWORDS: tuple[str, ...] = (
    "beyond",
    "outside",
    "exceeded",
    "violation",
    "overreach",
    "inconsistent",
    "contrary",
    "despite",
    "however",
    "but",
)


class CatalogError(ValueError):
    """Raised when the classification catalog is missing or malformed."""


def count_keywords(text: str, keywords: tuple[str, ...]) -> int:
    """Count the distinct keywords that occur as substrings of ``text``."""
    return sum(1 for keyword in keywords if keyword in text)


def select_class(observed: str) -> BoundaryClass:
    """Pick the primary class for lowercased observed-behavior text.

    Violating must strictly beat both other scores; ambiguous must strictly
    beat respecting. Everything else, ties included, is Class A.
    """
    respecting = count_keywords(observed, RESPECTING_KEYWORDS)
    violating = count_keywords(observed, VIOLATING_KEYWORDS)
    ambiguous = count_keywords(observed, AMBIGUOUS_KEYWORDS)

    if violating > respecting and violating > ambiguous:
        return BoundaryClass.VIOLATING
    if ambiguous > respecting:
        return BoundaryClass.AMBIGUOUS
    return BoundaryClass.RESPECTING


def has_discrepancies(stated: str, observed: str) -> bool:
    """Whether the observed behaviors carry any discrepancy marker.

    A coarse signal used for logging only; it never changes the class.
    """
    observed_lower = observed.lower()
    return any(keyword in observed_lower for keyword in DISCREPANCY_KEYWORDS)


def load_catalog(path: str | Path) -> dict[BoundaryClass, ClassProfile]:
    """Load and validate a classification catalog from YAML."""
    path = Path(path)
    try:
        with open(path) as fh:
            data = yaml.safe_load(fh) or {}
    except OSError as exc:
        raise CatalogError(f"Cannot read classification catalog {path}: {exc}") from exc

    raw_classes: dict[str, Any] = data.get("classes") or {}
    catalog: dict[BoundaryClass, ClassProfile] = {}

    for boundary_class in BoundaryClass:
        raw = raw_classes.get(boundary_class.value)
        if raw is None:
            raise CatalogError(
                f"Catalog {path} does not define class {boundary_class.value!r}"
            )
        try:
            catalog[boundary_class] = ClassProfile.model_validate(raw)
        except ValidationError as exc:
            raise CatalogError(
                f"Invalid entry for class {boundary_class.value!r} in {path}: {exc}"
            ) from exc

    return catalog


class ClassificationEngine:
    """Keyword-scoring classification engine.

    Selection depends only on the observed-behavior text. Conditional
    sub-classifications may also look at the stated boundaries.
    """

    def __init__(self, catalog_path: str | Path | None = None) -> None:
        self._catalog_path = Path(catalog_path) if catalog_path else _DEFAULT_CATALOG_PATH
        self._catalog = load_catalog(self._catalog_path)

    def classify(self, stated: str, observed: str) -> ClassificationResult:
        """Classify an institution from its stated boundaries and observed behaviors.

        Args:
            stated: Free-text description of the stated policy boundaries.
            observed: Free-text description of the observed behaviors.

        Returns:
            A ClassificationResult built from the catalog entry of the
            selected class.
        """
        stated_lower = stated.lower()
        observed_lower = observed.lower()

        primary = select_class(observed_lower)
        profile = self._catalog[primary]

        sub_classifications: list[SubClassification] = list(profile.sub_classifications)
        for trigger in profile.conditional:
            if trigger.matches(stated_lower, observed_lower):
                sub_classifications.append(trigger.sub_classification)

        return ClassificationResult(
            primary=primary,
            title=profile.title,
            analysis=profile.analysis,
            sub_classifications=sub_classifications,
            recommendations=list(profile.recommendations),
            next_steps=profile.next_steps,
        )

    def get_profile(self, boundary_class: BoundaryClass) -> ClassProfile:
        """Return the catalog entry for a class."""
        return self._catalog[boundary_class]

    @property
    def catalog_path(self) -> Path:
        return self._catalog_path


# Module-level convenience: singleton engine and classify function
_engine: ClassificationEngine | None = None


def _get_engine() -> ClassificationEngine:
    global _engine
    if _engine is None:
        _engine = ClassificationEngine()
    return _engine


def classify(stated: str, observed: str) -> ClassificationResult:
    """Convenience function to classify with the packaged catalog.

    Uses a module-level singleton ``ClassificationEngine``.
    """
    return _get_engine().classify(stated, observed)
