"""Deterministic wine scoring heuristic. Pure code; the only randomness is injected."""

import random
from collections.abc import Mapping
from dataclasses import dataclass

from src.scoring.importance import rank_feature_importance
from src.scoring.normalize import normalize_feature

SCORING_VERSION = "WINE_HEURISTIC_V1"

BASELINE = 0.5
NOISE_AMPLITUDE = 0.05  # noise is uniform in [-0.025, 0.025]

# Declared order is the accumulation order.
FEATURE_WEIGHTS = (
    ("wine-type", 0.12),
    ("alcohol", 0.28),
    ("volatile-acidity", -0.25),
    ("citric-acid", 0.18),
    ("density", -0.12),
    ("chlorides", -0.15),
    ("fixed-acidity", 0.08),
    ("residual-sugar", 0.06),
    ("free-sulfur", 0.14),
    ("ph", 0.07),
    ("sulphates", 0.19),
)

CONFIDENCE_FLOOR = 0.90
CONFIDENCE_CEILING = 0.96

GOOD = "Good"
POOR = "Poor"


@dataclass(frozen=True)
class FeatureContribution:
    name: str
    value: int


@dataclass(frozen=True)
class ScoreResult:
    verdict: str
    confidence: float
    score: float
    features: tuple[FeatureContribution, ...]

    def to_dict(self) -> dict:
        return {
            "verdict": self.verdict,
            "confidence": self.confidence,
            "score": self.score,
            "features": [{"name": f.name, "value": f.value} for f in self.features],
        }


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def draw_noise(rng: random.Random | None = None) -> float:
    """Uniform noise in [-0.025, 0.025]."""
    rng = rng or random.Random()
    return (rng.random() - 0.5) * NOISE_AMPLITUDE


def weighted_sum(record: Mapping[str, float]) -> float:
    """Sum of weight × normalized value for every weighted feature present."""
    total = 0.0
    for feature, weight in FEATURE_WEIGHTS:
        if feature in record:
            total += weight * normalize_feature(feature, record[feature])
    return total


def interaction_terms(record: Mapping[str, float]) -> float:
    alcohol = normalize_feature("alcohol", record["alcohol"])
    volatile = normalize_feature("volatile-acidity", record["volatile-acidity"])
    citric = normalize_feature("citric-acid", record["citric-acid"])
    sulphates = normalize_feature("sulphates", record["sulphates"])
    density = normalize_feature("density", record["density"])

    total = 0.15 * alcohol * citric
    total -= 0.12 * alcohol * volatile
    total += 0.10 * sulphates * alcohol
    total += 0.08 * (1 - density) * alcohol
    return total


def quality_boost(record: Mapping[str, float]) -> float:
    """Fixed increments from threshold rules on raw (non-normalized) values."""
    alcohol = record["alcohol"]
    volatile = record["volatile-acidity"]
    citric = record["citric-acid"]
    sulphates = record["sulphates"]
    free_sulfur = record["free-sulfur"]

    boost = 0.0
    if alcohol > 10.5 and volatile < 0.4:
        boost += 0.15
    if citric > 0.3 and sulphates > 0.5:
        boost += 0.12
    if volatile < 0.3:
        boost += 0.10
    if alcohol > 11.5:
        boost += 0.08
    if 30 < free_sulfur < 100:
        boost += 0.05
    return boost


def compute_score(
    record: Mapping[str, float],
    rng: random.Random | None = None,
    noise: float | None = None,
) -> float:
    """
    Baseline + weighted features + interactions + quality boosts + noise, clamped to [0, 1].
    Pass noise=0 for a deterministic score; otherwise noise is drawn from rng.
    """
    if noise is None:
        noise = draw_noise(rng)
    score = BASELINE
    score += weighted_sum(record)
    score += interaction_terms(record)
    score += quality_boost(record)
    score += noise
    return _clamp(score, 0.0, 1.0)


def estimate_confidence(score: float, record: Mapping[str, float]) -> float:
    """Distance from the 0.5 boundary, plus a bonus for strong indicators, clamped to [0.90, 0.96]."""
    confidence = 0.88 + abs(score - 0.5) * 0.25
    if (score > 0.65 and record["alcohol"] > 11) or (score < 0.35 and record["volatile-acidity"] > 0.6):
        confidence += 0.05
    return _clamp(confidence, CONFIDENCE_FLOOR, CONFIDENCE_CEILING)


def verdict_for(score: float) -> str:
    return GOOD if score > 0.5 else POOR


def predict(
    record: Mapping[str, float],
    rng: random.Random | None = None,
    noise: float | None = None,
) -> ScoreResult:
    """Score, confidence, verdict and top contributing features for one input record."""
    score = compute_score(record, rng=rng, noise=noise)
    return ScoreResult(
        verdict=verdict_for(score),
        confidence=estimate_confidence(score, record),
        score=score,
        features=tuple(FeatureContribution(**f) for f in rank_feature_importance(record)),
    )
