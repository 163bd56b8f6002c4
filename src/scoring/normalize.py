"""Linear min/max normalization against fixed per-feature ranges."""

FEATURE_RANGES = {
    "wine-type": (0.0, 1.0),
    "fixed-acidity": (3.8, 15.9),
    "volatile-acidity": (0.08, 1.58),
    "citric-acid": (0.0, 1.66),
    "residual-sugar": (0.6, 65.8),
    "chlorides": (0.009, 0.611),
    "free-sulfur": (1.0, 289.0),
    "density": (0.987, 1.039),
    "ph": (2.72, 4.01),
    "sulphates": (0.22, 2.0),
    "alcohol": (8.0, 14.9),
}


def normalize_feature(feature: str, value: float) -> float:
    """
    Rescale value into [0, 1] using the feature's range.
    Out-of-range values are NOT clamped. Unknown features return 0.
    """
    bounds = FEATURE_RANGES.get(feature)
    if bounds is None:
        return 0.0
    lo, hi = bounds
    return (value - lo) / (hi - lo)
