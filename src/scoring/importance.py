"""Top contributing features: weighted, direction-aware normalized values."""

import math
from collections.abc import Mapping

from src.scoring.normalize import normalize_feature

TOP_N = 5

# (display name, input key, weight, inverted). Inverted features are better when lower.
IMPORTANCE_FEATURES = (
    ("Alcohol Content", "alcohol", 0.28, False),
    ("Volatile Acidity", "volatile-acidity", 0.25, True),
    ("Citric Acid", "citric-acid", 0.18, False),
    ("Sulphates", "sulphates", 0.19, False),
    ("Density", "density", 0.12, True),
    ("Chlorides", "chlorides", 0.15, True),
    ("Free Sulfur", "free-sulfur", 0.14, False),
    ("pH Level", "ph", 0.07, False),
    ("Fixed Acidity", "fixed-acidity", 0.08, False),
    ("Residual Sugar", "residual-sugar", 0.06, False),
)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def raw_importance(record: Mapping[str, float]) -> list[tuple[str, float]]:
    """Unrounded importance per display feature, in declaration order."""
    out = []
    for name, key, weight, inverted in IMPORTANCE_FEATURES:
        norm = normalize_feature(key, record[key])
        if inverted:
            norm = 1 - norm
        out.append((name, norm * weight * 100))
    return out


def rank_feature_importance(record: Mapping[str, float], top_n: int = TOP_N) -> list[dict]:
    """
    Sort descending on the unrounded value (stable: ties keep declaration order),
    keep top_n, round half-up and floor each at 1.
    Returns [{"name": ..., "value": int}, ...].
    """
    ranked = sorted(raw_importance(record), key=lambda item: item[1], reverse=True)
    return [
        {"name": name, "value": max(1, round_half_up(value))}
        for name, value in ranked[:top_n]
    ]
