"""Data models for the boundary classification module."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from athena.core.types import BoundaryClass


class SubClassification(BaseModel):
    """A labelled sub-classification such as ``C1: Scope Overreach``."""

    model_config = ConfigDict(frozen=True)

    code: str
    name: str
    description: str


class SubClassificationTrigger(BaseModel):
    """A sub-classification appended when any trigger substring is present.

    ``stated`` and ``observed`` list substrings looked up in the lowercased
    stated boundaries and observed behaviors respectively.
    """

    model_config = ConfigDict(frozen=True)

    sub_classification: SubClassification
    stated: tuple[str, ...] = ()
    observed: tuple[str, ...] = ()

    def matches(self, stated: str, observed: str) -> bool:
        return any(s in stated for s in self.stated) or any(s in observed for s in self.observed)


class ClassProfile(BaseModel):
    """Fixed catalog entry describing one boundary class."""

    model_config = ConfigDict(frozen=True)

    title: str
    analysis: str
    sub_classifications: tuple[SubClassification, ...]
    conditional: tuple[SubClassificationTrigger, ...] = ()
    recommendations: tuple[str, ...]
    next_steps: str


class ClassificationResult(BaseModel):
    """Outcome of classifying a stated/observed pair."""

    model_config = ConfigDict(frozen=True)

    primary: BoundaryClass
    title: str
    analysis: str
    sub_classifications: list[SubClassification] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    next_steps: str

    @property
    def primary_label(self) -> str:
        """Heading text, e.g. ``Class C: Boundary-Violating Behaviors``."""
        return f"Class {self.primary.value}: {self.title}"
