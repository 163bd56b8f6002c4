"""Wine scoring engine: normalization, heuristic score, confidence, feature importance."""

from src.scoring.engine import ScoreResult, compute_score, estimate_confidence, predict, verdict_for
from src.scoring.importance import rank_feature_importance
from src.scoring.normalize import normalize_feature

__all__ = [
    "ScoreResult",
    "compute_score",
    "estimate_confidence",
    "predict",
    "verdict_for",
    "rank_feature_importance",
    "normalize_feature",
]
