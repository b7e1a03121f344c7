#!/usr/bin/env python3
"""CLI script to run a boundary diagnostic and print the HTML fragment."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Ensure the project source is importable when running the script directly.
_project_root = Path(__file__).resolve().parent.parent
_src = _project_root / "src"
if str(_src) not in sys.path:
    sys.path.insert(0, str(_src))

from athena.classification.rules import ClassificationEngine  # noqa: E402
from athena.core.config import Settings  # noqa: E402
from athena.core.errors import MissingFieldsError  # noqa: E402
from athena.core.types import InstitutionType  # noqa: E402
from athena.diagnostic.models import DiagnosticInput  # noqa: E402
from athena.diagnostic.service import DiagnosticService  # noqa: E402


def _read_text(value: str) -> str:
    """Return the argument, or the file contents when given ``@path``."""
    if value.startswith("@"):
        return Path(value[1:]).read_text()
    return value


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Classify an institution's boundary behavior and print the diagnostic."
    )
    parser.add_argument("--name", required=True, help="Institution name.")
    parser.add_argument(
        "--type",
        default=InstitutionType.OTHER.value,
        help="Institution type (%s)." % ", ".join(t.value for t in InstitutionType),
    )
    parser.add_argument(
        "--stated",
        required=True,
        help="Stated policy boundaries, or @path to read them from a file.",
    )
    parser.add_argument(
        "--observed",
        required=True,
        help="Observed behaviors, or @path to read them from a file.",
    )
    parser.add_argument(
        "--concerns",
        default=None,
        help="Optional specific concerns, or @path to read them from a file.",
    )
    parser.add_argument(
        "--catalog",
        type=str,
        default=None,
        help="Path to an alternate classification catalog YAML file.",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()

    settings = Settings()
    catalog_path = args.catalog or settings.classification.catalog_path
    service = DiagnosticService(engine=ClassificationEngine(catalog_path=catalog_path))

    form = {
        "institutionName": args.name,
        "institutionType": args.type,
        "statedBoundaries": _read_text(args.stated),
        "observedBehaviors": _read_text(args.observed),
        "specificConcerns": _read_text(args.concerns) if args.concerns else None,
    }

    try:
        data = DiagnosticInput.from_form(form)
    except MissingFieldsError as exc:
        print(f"ERROR: {exc}")
        sys.exit(2)

    print(service.run(data))


if __name__ == "__main__":
    main()
