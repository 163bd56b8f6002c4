"""Form helpers: raw field extraction and per-field validity against UI bounds."""

import math
from collections.abc import Mapping

from src.features import FEATURE_KEYS, FORM_FIELDS, FORM_FIELDS_BY_KEY, TOOLTIPS

VALID = "valid"
INVALID = "invalid"


def extract_fields(source: Mapping) -> dict:
    """Pick the 11 feature fields out of a request form or JSON body, preserving raw values."""
    return {key: source.get(key) for key in FEATURE_KEYS if key in source}


def field_validity(raw: Mapping) -> dict[str, str]:
    """
    Validity state for each submitted field: "invalid" when the value lies outside
    the field's UI min/max, "valid" otherwise. Unparseable or non-finite values are "invalid";
    fields not submitted are omitted.
    """
    states = {}
    for key, value in raw.items():
        field = FORM_FIELDS_BY_KEY.get(key)
        if field is None:
            continue
        try:
            number = float(value)
        except (TypeError, ValueError):
            states[key] = INVALID
            continue
        if not math.isfinite(number) or number < field["min"] or number > field["max"]:
            states[key] = INVALID
        else:
            states[key] = VALID
    return states


def form_context(values: Mapping | None = None, validity: Mapping | None = None) -> list[dict]:
    """Field descriptors for the template: bounds, tooltip, current value and validity."""
    values = values or {}
    validity = validity or {}
    out = []
    for field in FORM_FIELDS:
        key = field["key"]
        out.append({
            **field,
            "tooltip": TOOLTIPS.get(key, ""),
            "value": values.get(key, ""),
            "state": validity.get(key, ""),
        })
    return out
