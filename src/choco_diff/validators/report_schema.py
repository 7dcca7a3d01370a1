"""JSON Schema validation for comparison reports."""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator, ValidationError

DEFAULT_SCHEMA = Path(__file__).resolve().parents[1] / "schemas" / "comparison-report.schema.json"


@lru_cache(maxsize=None)
def _validator_for(schema_path: Path) -> Draft202012Validator:
    schema = json.loads(schema_path.read_text(encoding="utf-8"))
    return Draft202012Validator(schema)


def _pointer(error: ValidationError) -> str:
    return "/".join(str(part) for part in error.absolute_path) or "<root>"


def validate_report(report: dict[str, Any], schema_path: Path | None = None) -> None:
    """Raise ValueError listing every schema violation in ``report``.

    One ``- <pointer>: <message>`` line per violation, ordered by pointer.
    """
    validator = _validator_for(schema_path or DEFAULT_SCHEMA)
    errors = sorted(validator.iter_errors(report), key=_pointer)
    if errors:
        raise ValueError("\n" + "\n".join(f"- {_pointer(e)}: {e.message}" for e in errors))
