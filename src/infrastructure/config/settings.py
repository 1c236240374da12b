"""
Runtime configuration read from environment variables.
A local .env file is loaded first so development runs need no exported variables.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_DATE_FORMAT = "%d-%b-%y"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _float_env(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc


def _log_level_env(name: str, default: str) -> str:
    level = os.environ.get(name, default).strip().upper() or default
    if level not in LOG_LEVELS:
        raise ValueError(f"{name} must be one of {', '.join(LOG_LEVELS)}, got {level!r}")
    return level


@dataclass(frozen=True)
class Settings:
    max_pct_change: float = 5.0
    date_format: str = DEFAULT_DATE_FORMAT
    yf_period: str = "1y"
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()
        return cls(
            max_pct_change=_float_env("SIDEWAYS_MAX_PCT_CHANGE", cls.max_pct_change),
            date_format=os.environ.get("SIDEWAYS_DATE_FORMAT", DEFAULT_DATE_FORMAT),
            yf_period=os.environ.get("SIDEWAYS_YF_PERIOD", cls.yf_period),
            log_level=_log_level_env("SIDEWAYS_LOG_LEVEL", cls.log_level),
        )
