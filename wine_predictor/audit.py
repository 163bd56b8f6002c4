"""Audit trail for predictions and API operations."""

import csv
import json
import logging
from pathlib import Path

from src.utils import iso_now

AUDIT_DIR = Path(__file__).resolve().parent.parent / "logs"

CSV_HEADERS = [
    "timestamp",
    "run_id",
    "source",
    "scoring_version",
    "input_hash",
    "verdict",
    "confidence",
    "score",
    "top_features",
    "invalid_fields",
    "inputs",
]


def use_log_dir(path: Path | None) -> Path:
    """Point every log writer at path (None keeps the current directory). Returns the active directory."""
    global AUDIT_DIR
    if path is not None:
        AUDIT_DIR = Path(path)
    return AUDIT_DIR


def _ensure_log_dir():
    AUDIT_DIR.mkdir(parents=True, exist_ok=True)


def log_prediction(
    *,
    run_id: str,
    source: str,
    scoring_version: str,
    input_hash: str,
    inputs: dict,
    result: dict,
    invalid_fields: list[str] | None = None,
):
    """
    Log one prediction for later review: inputs, verdict, and which features drove it.
    Appends to predictions.jsonl and predictions.csv.
    """
    _ensure_log_dir()
    ts = iso_now()
    entry = {
        "timestamp": ts,
        "run_id": run_id,
        "source": source,
        "scoring_version": scoring_version,
        "input_hash": input_hash,
        "verdict": result["verdict"],
        "confidence": result["confidence"],
        "score": result["score"],
        "top_features": result["features"],
        "invalid_fields": invalid_fields or [],
        "inputs": inputs,
    }

    with open(AUDIT_DIR / "predictions.jsonl", "a", encoding="utf-8") as f:
        f.write(json.dumps(entry, default=str) + "\n")

    csv_path = AUDIT_DIR / "predictions.csv"
    csv_exists = csv_path.exists()
    with open(csv_path, "a", encoding="utf-8", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=CSV_HEADERS)
        if not csv_exists:
            writer.writeheader()
        row = dict(entry)
        row["top_features"] = "; ".join(f"{x['name']}={x['value']}" for x in result["features"])
        row["invalid_fields"] = ",".join(invalid_fields or [])
        row["inputs"] = json.dumps(inputs, sort_keys=True)
        writer.writerow(row)


def audit_log(
    action: str,
    status: str,
    *,
    run_id: str | None = None,
    verdict: str | None = None,
    score: float | None = None,
    error: str | None = None,
    extra: dict | None = None,
):
    """Append a structured audit entry to the audit log (JSONL)."""
    _ensure_log_dir()
    entry = {
        "timestamp": iso_now(),
        "action": action,
        "status": status,
    }
    if run_id:
        entry["run_id"] = run_id
    if verdict:
        entry["verdict"] = verdict
    if score is not None:
        entry["score"] = score
    if error:
        entry["error"] = error
    if extra:
        entry.update(extra)

    with open(AUDIT_DIR / "audit.log", "a", encoding="utf-8") as f:
        f.write(json.dumps(entry, default=str) + "\n")


def setup_app_logging():
    """Configure application logging to console and file."""
    _ensure_log_dir()
    logger = logging.getLogger("wine_predictor")
    if logger.handlers:
        return logger
    logger.setLevel(logging.DEBUG)

    fmt = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"

    # Console
    ch = logging.StreamHandler()
    ch.setLevel(logging.INFO)
    ch.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    logger.addHandler(ch)

    # File
    fh = logging.FileHandler(AUDIT_DIR / "app.log", encoding="utf-8")
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    logger.addHandler(fh)

    return logger
