from __future__ import annotations

import pytest

from src.infrastructure.config import settings as settings_module
from src.infrastructure.config.settings import Settings

_VARS = (
    "SIDEWAYS_MAX_PCT_CHANGE",
    "SIDEWAYS_DATE_FORMAT",
    "SIDEWAYS_YF_PERIOD",
    "SIDEWAYS_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings_module, "load_dotenv", lambda: False)
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    assert Settings.from_env() == Settings(
        max_pct_change=5.0, date_format="%d-%b-%y", yf_period="1y", log_level="WARNING"
    )


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SIDEWAYS_MAX_PCT_CHANGE", "2.5")
    monkeypatch.setenv("SIDEWAYS_DATE_FORMAT", "%Y-%m-%d")
    monkeypatch.setenv("SIDEWAYS_YF_PERIOD", "5y")
    monkeypatch.setenv("SIDEWAYS_LOG_LEVEL", "debug")

    cfg = Settings.from_env()

    assert cfg.max_pct_change == 2.5
    assert cfg.date_format == "%Y-%m-%d"
    assert cfg.yf_period == "5y"
    assert cfg.log_level == "DEBUG"


def test_malformed_number_names_the_variable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SIDEWAYS_MAX_PCT_CHANGE", "five")
    with pytest.raises(ValueError, match="SIDEWAYS_MAX_PCT_CHANGE"):
        Settings.from_env()


def test_log_level_is_validated(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SIDEWAYS_LOG_LEVEL", "verbose")
    with pytest.raises(ValueError, match="SIDEWAYS_LOG_LEVEL"):
        Settings.from_env()
