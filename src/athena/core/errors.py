"""Error types surfaced by the diagnostic endpoint."""

from __future__ import annotations

from typing import Any


class DiagnosticError(Exception):
    """Base class for errors that map to an HTTP error response."""

    status_code: int = 500
    error: str = "Internal server error"

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.error}


class MissingFieldsError(DiagnosticError):
    """One or more required form fields were absent or empty."""

    status_code = 400
    error = "Missing required fields"

    def __init__(self, fields: list[str]) -> None:
        super().__init__(f"{self.error}: {', '.join(fields)}")
        self.fields = fields

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.error, "fields": list(self.fields)}
