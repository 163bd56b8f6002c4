"""Runtime settings read from the environment (.env via python-dotenv)."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_PREDICT_DELAY_SECONDS = 1.5
DEFAULT_PORT = 5000


@dataclass(frozen=True)
class Settings:
    predict_delay_seconds: float
    noise_seed: int | None
    port: int
    log_dir: Path | None

    @staticmethod
    def from_env(env_file: str | os.PathLike | None = None) -> "Settings":
        load_dotenv(env_file)
        delay_raw = os.environ.get("WINE_PREDICT_DELAY_SECONDS", str(DEFAULT_PREDICT_DELAY_SECONDS)).strip()
        seed_raw = os.environ.get("WINE_NOISE_SEED", "").strip()
        port_raw = os.environ.get("PORT", str(DEFAULT_PORT)).strip()
        log_dir_raw = os.environ.get("WINE_LOG_DIR", "").strip()

        try:
            delay = float(delay_raw)
        except ValueError:
            raise RuntimeError(f"WINE_PREDICT_DELAY_SECONDS must be a number, got {delay_raw!r}")
        if delay < 0:
            raise RuntimeError("WINE_PREDICT_DELAY_SECONDS must be >= 0")
        try:
            seed = int(seed_raw) if seed_raw else None
        except ValueError:
            raise RuntimeError(f"WINE_NOISE_SEED must be an integer, got {seed_raw!r}")
        try:
            port = int(port_raw)
        except ValueError:
            raise RuntimeError(f"PORT must be an integer, got {port_raw!r}")

        return Settings(
            predict_delay_seconds=delay,
            noise_seed=seed,
            port=port,
            log_dir=Path(log_dir_raw) if log_dir_raw else None,
        )
