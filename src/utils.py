"""Utilities for hashing and audit metadata."""

import hashlib
import json
from collections.abc import Mapping
from datetime import datetime, timezone


def hash_record(record: Mapping) -> str:
    """SHA256 of the record's canonical JSON (sorted keys). Deterministic."""
    payload = json.dumps(dict(record), sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def iso_now() -> str:
    """Current UTC timestamp as ISO string."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"
