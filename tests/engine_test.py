"""Scoring engine: weighted sum, interactions, boosts, noise band, clamping, confidence, verdict."""

import random

import pytest

from src.scoring import compute_score, estimate_confidence, predict, verdict_for
from src.scoring.engine import FeatureContribution, ScoreResult, interaction_terms, quality_boost, weighted_sum
from src.validation import build_input_record
from tests.samples import BEST_WINE, WORST_WINE, FixedRandom

DEMO_ZERO_NOISE_SCORE = 0.8823


def test_demo_sample_zero_noise_score(demo_record):
    assert compute_score(demo_record, noise=0.0) == pytest.approx(DEMO_ZERO_NOISE_SCORE, abs=1e-3)


def test_demo_sample_parts(demo_record):
    assert weighted_sum(demo_record) == pytest.approx(0.2220, abs=1e-3)
    assert interaction_terms(demo_record) == pytest.approx(0.0103, abs=1e-3)
    # volatile < 0.3 and 30 < free-sulfur < 100
    assert quality_boost(demo_record) == pytest.approx(0.15)


def test_noise_is_injected_from_rng(demo_record):
    low = compute_score(demo_record, rng=FixedRandom(0.0))
    high = compute_score(demo_record, rng=FixedRandom(1.0))
    assert low == pytest.approx(DEMO_ZERO_NOISE_SCORE - 0.025, abs=1e-3)
    assert high == pytest.approx(DEMO_ZERO_NOISE_SCORE + 0.025, abs=1e-3)


def test_noisy_scores_stay_in_band(demo_record):
    base = compute_score(demo_record, noise=0.0)
    rng = random.Random(99)
    for _ in range(200):
        assert abs(compute_score(demo_record, rng=rng) - base) <= 0.025 + 1e-12


def test_score_clamped_to_unit_interval():
    best = build_input_record(BEST_WINE)
    worst = build_input_record(WORST_WINE)
    assert compute_score(best, noise=0.0) == 1.0
    assert compute_score(worst, noise=0.0) == 0.0
    assert compute_score(best, rng=FixedRandom(1.0)) == 1.0
    assert compute_score(worst, rng=FixedRandom(0.0)) == 0.0


def test_weighted_sum_skips_absent_features():
    assert weighted_sum({"alcohol": 14.9}) == pytest.approx(0.28)
    assert weighted_sum({}) == 0.0


def test_quality_boost_thresholds_are_strict():
    record = {
        "alcohol": 10.5,
        "volatile-acidity": 0.3,
        "citric-acid": 0.3,
        "sulphates": 0.5,
        "free-sulfur": 30,
    }
    assert quality_boost(record) == 0.0
    record.update({"alcohol": 11.6, "volatile-acidity": 0.2, "citric-acid": 0.31, "sulphates": 0.51, "free-sulfur": 99})
    assert quality_boost(record) == pytest.approx(0.15 + 0.12 + 0.10 + 0.08 + 0.05)


@pytest.mark.parametrize(
    "score, alcohol, volatile, expected",
    [
        (0.5, 10.0, 0.3, 0.90),   # 0.88 floored to 0.90
        (0.6, 12.0, 0.3, 0.905),  # no bonus at score <= 0.65
        (0.7, 10.0, 0.3, 0.93),
        (0.7, 12.0, 0.3, 0.96),   # 0.98 capped
        (0.3, 10.0, 0.5, 0.93),
        (0.3, 10.0, 0.7, 0.96),
        (1.0, 8.0, 0.3, 0.96),
    ],
)
def test_confidence(score, alcohol, volatile, expected):
    record = {"alcohol": alcohol, "volatile-acidity": volatile}
    assert estimate_confidence(score, record) == pytest.approx(expected)


def test_confidence_always_in_bounds(demo_record):
    rng = random.Random(5)
    for _ in range(100):
        score = rng.random()
        c = estimate_confidence(score, demo_record)
        assert 0.90 <= c <= 0.96


def test_verdict_is_strictly_above_half():
    assert verdict_for(0.5) == "Poor"
    assert verdict_for(0.5000001) == "Good"
    assert verdict_for(0.0) == "Poor"
    assert verdict_for(1.0) == "Good"


def test_predict_demo_sample(demo_record):
    result = predict(demo_record, noise=0.0)
    assert isinstance(result, ScoreResult)
    assert result.verdict == "Good"
    assert result.confidence == pytest.approx(0.96)
    assert len(result.features) == 5
    d = result.to_dict()
    assert set(d) == {"verdict", "confidence", "score", "features"}
    assert d["features"][0] == {"name": "Volatile Acidity", "value": 22}


def test_predict_worst_wine_is_poor():
    result = predict(build_input_record(WORST_WINE), noise=0.0)
    assert result.verdict == "Poor"
    assert result.score == 0.0
    assert result.confidence == pytest.approx(0.96)


def test_score_result_is_hashable(demo_record):
    a = predict(demo_record, noise=0.0)
    b = predict(demo_record, noise=0.0)
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    assert a.features[0] == FeatureContribution(name="Volatile Acidity", value=22)
