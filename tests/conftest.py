"""Shared fixtures: keep audit/app logs out of the repo during tests."""

import os
import tempfile

os.environ.setdefault("WINE_LOG_DIR", tempfile.mkdtemp(prefix="wine_logs_"))

import pytest

from src.features import DEMO_DATA
from src.validation import build_input_record


@pytest.fixture(autouse=True)
def audit_dir(tmp_path, monkeypatch):
    from wine_predictor import audit
    monkeypatch.setattr(audit, "AUDIT_DIR", tmp_path)
    return tmp_path


@pytest.fixture
def demo_record():
    return build_input_record(DEMO_DATA)
