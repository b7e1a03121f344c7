"""HTML fragment renderer for diagnostic results."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from jinja2 import Environment, FileSystemLoader, select_autoescape

from athena.core.types import BoundaryClass

if TYPE_CHECKING:
    from athena.classification.models import ClassificationResult
    from athena.diagnostic.models import DiagnosticInput

_TEMPLATES_DIR = Path(__file__).parent / "templates"


class DiagnosticRenderer:
    """Renders a classification result as an HTML fragment.

    User-supplied text is escaped by Jinja2 autoescaping; catalog text is
    rendered through the same template and contains no markup of its own.
    """

    def __init__(self, template_name: str = "diagnostic.html") -> None:
        self._env = Environment(
            loader=FileSystemLoader(str(_TEMPLATES_DIR)),
            autoescape=select_autoescape(default=True, default_for_string=True),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self._template = self._env.get_template(template_name)

    def render(self, data: DiagnosticInput, result: ClassificationResult) -> str:
        if result.primary == BoundaryClass.RESPECTING:
            alignment = "boundary-respecting"
        else:
            alignment = "boundary-ambiguous or boundary-violating"

        return self._template.render(data=data, result=result, alignment=alignment)
