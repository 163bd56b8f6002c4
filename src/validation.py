"""Input record construction and schema validation for records and score results."""

import json
import math
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

import jsonschema

from src.features import FEATURE_KEYS

SCHEMAS_DIR = Path(__file__).resolve().parent / "schemas"


class InvalidInputError(ValueError):
    """Raised when one or more fields are missing, non-numeric or non-finite."""

    def __init__(self, fields: dict[str, str]):
        self.fields = fields
        detail = ", ".join(f"{k} ({v})" for k, v in fields.items())
        super().__init__(f"Invalid wine input: {detail}")


def _load_schema(name: str) -> dict:
    path = SCHEMAS_DIR / f"{name}.schema.json"
    return json.loads(path.read_text(encoding="utf-8"))


def validate_input_record(data: Mapping) -> None:
    """Validate an input record against schema. Raises jsonschema.ValidationError if invalid."""
    schema = _load_schema("wine_input")
    jsonschema.validate(dict(data), schema)


def validate_score_result(data: dict) -> None:
    """Validate a ScoreResult dict against schema. Raises jsonschema.ValidationError if invalid."""
    schema = _load_schema("score_result")
    jsonschema.validate(data, schema)


def _to_float(raw) -> float:
    if isinstance(raw, bool):
        raise ValueError("not a number")
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            raise ValueError("missing")
    value = float(raw)
    if not math.isfinite(value):
        raise ValueError("not finite")
    return value


def build_input_record(raw: Mapping) -> Mapping[str, float]:
    """
    Build an immutable InputRecord from a raw field map (strings or numbers).
    Unknown keys are ignored. Every missing or unparseable field is collected
    into a single InvalidInputError.
    """
    values: dict[str, float] = {}
    errors: dict[str, str] = {}
    for key in FEATURE_KEYS:
        if key not in raw or raw[key] is None:
            errors[key] = "missing"
            continue
        try:
            values[key] = _to_float(raw[key])
        except (TypeError, ValueError) as e:
            reason = str(e)
            errors[key] = reason if reason in ("missing", "not finite") else "not a number"
    if errors:
        raise InvalidInputError(errors)

    validate_input_record(values)
    return MappingProxyType(values)
