"""Settings: defaults and environment overrides."""

import pytest

from wine_predictor.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("WINE_PREDICT_DELAY_SECONDS", "WINE_NOISE_SEED", "PORT", "WINE_LOG_DIR"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("wine_predictor.config.load_dotenv", lambda *args, **kwargs: False)


def test_defaults():
    s = Settings.from_env()
    assert s.predict_delay_seconds == 1.5
    assert s.noise_seed is None
    assert s.port == 5000
    assert s.log_dir is None


def test_overrides(monkeypatch):
    monkeypatch.setenv("WINE_PREDICT_DELAY_SECONDS", "0")
    monkeypatch.setenv("WINE_NOISE_SEED", "42")
    monkeypatch.setenv("PORT", "8080")
    s = Settings.from_env()
    assert s.predict_delay_seconds == 0.0
    assert s.noise_seed == 42
    assert s.port == 8080


@pytest.mark.parametrize(
    "name, value",
    [
        ("WINE_PREDICT_DELAY_SECONDS", "soon"),
        ("WINE_PREDICT_DELAY_SECONDS", "-1"),
        ("WINE_NOISE_SEED", "abc"),
        ("PORT", "http"),
    ],
)
def test_invalid_values_raise(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(RuntimeError):
        Settings.from_env()


def test_env_file_sets_log_dir(tmp_path, monkeypatch):
    import dotenv

    monkeypatch.setattr("wine_predictor.config.load_dotenv", dotenv.load_dotenv)
    log_dir = tmp_path / "envlogs"
    env_file = tmp_path / ".env"
    env_file.write_text(f"WINE_LOG_DIR={log_dir}\nWINE_NOISE_SEED=9\n", encoding="utf-8")

    s = Settings.from_env(env_file)
    assert s.log_dir == log_dir
    assert s.noise_seed == 9


def test_log_writers_follow_settings_log_dir(tmp_path, monkeypatch):
    from src.features import DEMO_DATA
    from wine_predictor.audit import audit_log, use_log_dir
    from wine_predictor.predictor import run_prediction

    log_dir = tmp_path / "envlogs"
    monkeypatch.setenv("WINE_LOG_DIR", str(log_dir))
    assert use_log_dir(Settings.from_env().log_dir) == log_dir

    run_prediction(DEMO_DATA, noise=0.0)
    audit_log(action="predict", status="success")
    assert (log_dir / "predictions.jsonl").exists()
    assert (log_dir / "predictions.csv").exists()
    assert (log_dir / "audit.log").exists()
