"""Request and response models for the diagnostic workflow."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from athena.core.errors import MissingFieldsError
from athena.core.types import format_institution_type

REQUIRED_FIELDS: tuple[str, ...] = (
    "institutionName",
    "institutionType",
    "statedBoundaries",
    "observedBehaviors",
)


def _text(value: Any) -> str | None:
    # Uploaded files and other non-text parts count as absent.
    if isinstance(value, str) and value:
        return value
    return None


class DiagnosticInput(BaseModel):
    """One diagnostic submission, as received from the intake form."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    institution_name: str = Field(alias="institutionName", min_length=1)
    institution_type: str = Field(alias="institutionType", min_length=1)
    stated_boundaries: str = Field(alias="statedBoundaries", min_length=1)
    observed_behaviors: str = Field(alias="observedBehaviors", min_length=1)
    specific_concerns: str | None = Field(default=None, alias="specificConcerns")

    @classmethod
    def from_form(cls, form: Mapping[str, Any]) -> DiagnosticInput:
        """Build an input from submitted form fields.

        Raises:
            MissingFieldsError: if any required field is absent or empty.
        """
        values = {name: _text(form.get(name)) for name in REQUIRED_FIELDS}
        missing = [name for name, value in values.items() if value is None]
        if missing:
            raise MissingFieldsError(missing)

        return cls(
            **values,
            specificConcerns=_text(form.get("specificConcerns")),
        )

    @property
    def institution_type_label(self) -> str:
        return format_institution_type(self.institution_type)


class DiagnosticResponse(BaseModel):
    """Response body for a successful diagnostic."""

    diagnostic: str
