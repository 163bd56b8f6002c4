"""Generate a prediction run report (JSON) for auditability."""

import json
from collections.abc import Mapping
from pathlib import Path

from src.utils import hash_record, iso_now


def write_run_report(
    output_path: Path,
    run_id: str,
    record: Mapping[str, float],
    scoring_version: str,
    score_result: dict,
    noise: str,
) -> dict:
    """
    Write run_report.json with input hash, inputs, scoring version and result.
    `noise` describes the noise source used ("zero", "seed=<n>", "random").
    Returns the report dict.
    """
    report = {
        "run_id": run_id,
        "timestamp": iso_now(),
        "input_hash": hash_record(record),
        "inputs": dict(record),
        "scoring_version": scoring_version,
        "noise": noise,
        "verdict": score_result.get("verdict"),
        "confidence": score_result.get("confidence"),
        "score": score_result.get("score"),
        "features": score_result.get("features", []),
    }
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(report, indent=2), encoding="utf-8")
    return report
