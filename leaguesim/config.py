"""
Runtime configuration read from the environment.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent

DEFAULT_CORS_ORIGINS = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000",
]


def db_path() -> Path:
    """SQLite file; LEAGUE_DB_PATH overrides <project root>/data/league.db."""
    raw = os.environ.get("LEAGUE_DB_PATH", "").strip()
    return Path(raw) if raw else PROJECT_ROOT / "data" / "league.db"


def simulation_seed() -> int | None:
    """Optional RNG seed for reproducible seasons (LEAGUE_SEED)."""
    raw = os.environ.get("LEAGUE_SEED", "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"LEAGUE_SEED must be an integer, got {raw!r}") from None


def prediction_min_week() -> int:
    """Predictions are reported once this many weeks have been played."""
    return int(os.environ.get("LEAGUE_PREDICTION_MIN_WEEK", "4"))


def cors_origins() -> list[str]:
    raw = os.environ.get("LEAGUE_CORS_ORIGINS", "").strip()
    if not raw:
        return list(DEFAULT_CORS_ORIGINS)
    return [o.strip() for o in raw.split(",") if o.strip()]


def log_level() -> str:
    return os.environ.get("LEAGUE_LOG_LEVEL", "INFO").upper()


_logging_configured = False


def configure_logging(level: str | None = None) -> None:
    """Install a basic stderr handler once per process."""
    global _logging_configured
    if _logging_configured:
        return
    logging.basicConfig(
        level=level or log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    _logging_configured = True
