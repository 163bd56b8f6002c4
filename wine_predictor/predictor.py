"""Orchestrates one prediction: build record, delay, score, render, log and audit."""

import logging
import random
import time
import uuid
from collections.abc import Mapping

from src.scoring import predict
from src.scoring.engine import SCORING_VERSION
from src.utils import hash_record
from src.validation import build_input_record, validate_score_result
from wine_predictor.audit import log_prediction
from wine_predictor.form import INVALID, field_validity
from wine_predictor.presenter import build_result_panel

log = logging.getLogger("wine_predictor.predictor")


def describe_noise(seed: int | None, noise: float | None) -> str:
    if noise is not None:
        return "zero" if noise == 0 else f"fixed={noise}"
    return f"seed={seed}" if seed is not None else "random"


def run_prediction(
    raw_fields: Mapping,
    *,
    delay_seconds: float = 0.0,
    seed: int | None = None,
    noise: float | None = None,
    source: str = "web",
    sleep=time.sleep,
) -> dict:
    """
    Run one prediction end to end.
    Raises InvalidInputError / jsonschema.ValidationError for bad input, before any delay.
    A fresh random.Random(seed) is used per call; noise overrides it when given.
    Returns dict with run_id, inputs, input_hash, result, panel, validity.
    """
    record = build_input_record(raw_fields)
    validity = field_validity(record)
    run_id = uuid.uuid4().hex[:8]

    if delay_seconds > 0:
        sleep(delay_seconds)

    score_result = predict(record, rng=random.Random(seed), noise=noise)
    result = score_result.to_dict()
    validate_score_result(result)

    input_hash = hash_record(record)
    invalid_fields = [k for k, state in validity.items() if state == INVALID]
    log_prediction(
        run_id=run_id,
        source=source,
        scoring_version=SCORING_VERSION,
        input_hash=input_hash,
        inputs=dict(record),
        result=result,
        invalid_fields=invalid_fields,
    )
    log.info(
        "Prediction %s: verdict=%s score=%.3f confidence=%.2f noise=%s out_of_range=%d",
        run_id,
        result["verdict"],
        result["score"],
        result["confidence"],
        describe_noise(seed, noise),
        len(invalid_fields),
    )

    return {
        "run_id": run_id,
        "scoring_version": SCORING_VERSION,
        "inputs": dict(record),
        "input_hash": input_hash,
        "result": result,
        "panel": build_result_panel(result),
        "validity": validity,
    }
