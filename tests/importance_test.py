"""Feature importance: top 5, sorted descending, rounded, floored at 1."""

from src.scoring.importance import IMPORTANCE_FEATURES, rank_feature_importance, raw_importance, round_half_up
from src.validation import build_input_record
from tests.samples import WORST_WINE


def test_demo_sample_top_five(demo_record):
    ranked = rank_feature_importance(demo_record)
    assert ranked == [
        {"name": "Volatile Acidity", "value": 22},
        {"name": "Chlorides", "value": 14},
        {"name": "Density", "value": 9},
        {"name": "Citric Acid", "value": 4},
        {"name": "Alcohol Content", "value": 3},
    ]


def test_sorted_descending_and_at_least_one(demo_record):
    values = [f["value"] for f in rank_feature_importance(demo_record)]
    assert values == sorted(values, reverse=True)
    assert all(v >= 1 for v in values)


def test_all_zero_contributions_floor_at_one():
    ranked = rank_feature_importance(build_input_record(WORST_WINE))
    assert len(ranked) == 5
    assert all(f["value"] == 1 for f in ranked)


def test_inverted_features_reward_low_values(demo_record):
    raw = dict(raw_importance(demo_record))
    # volatile-acidity 0.27 normalizes to ~0.127, so the inverted share is ~0.873 * 25
    assert round(raw["Volatile Acidity"], 2) == 21.83
    assert len(raw) == len(IMPORTANCE_FEATURES) == 10


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(2.49) == 2
    assert round_half_up(-0.2) == 0
