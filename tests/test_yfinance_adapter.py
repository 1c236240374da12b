from __future__ import annotations

from datetime import date

import pandas as pd
import pytest

from src.infrastructure.price_data import yfinance_adapter
from src.infrastructure.price_data.yfinance_adapter import YFinancePriceSource


class _FakeTicker:
    calls: list[dict] = []

    def __init__(self, symbol: str, history: pd.DataFrame) -> None:
        self.symbol = symbol
        self._history = history

    def history(self, **kwargs) -> pd.DataFrame:
        _FakeTicker.calls.append({"symbol": self.symbol, **kwargs})
        return self._history


def _install(monkeypatch: pytest.MonkeyPatch, history: pd.DataFrame) -> list[dict]:
    _FakeTicker.calls = []
    monkeypatch.setattr(
        yfinance_adapter.yf, "Ticker", lambda symbol: _FakeTicker(symbol, history)
    )
    return _FakeTicker.calls


def _history(closes: list[float | None], start: str = "2024-03-01") -> pd.DataFrame:
    index = pd.date_range(start=start, periods=len(closes), freq="D", tz="America/New_York")
    return pd.DataFrame({"Open": closes, "Close": closes, "Volume": [1000] * len(closes)}, index=index)


def test_loads_closes_in_cents(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = _install(monkeypatch, _history([178.22, 177.58, None, 175.1]))

    series = YFinancePriceSource(period="6mo").load(" amzn ")

    assert calls == [{"symbol": "AMZN", "period": "6mo", "interval": "1d"}]
    assert series.symbol == "AMZN"
    assert series.prices == (17822, 17758, 17510)
    assert series.dates == (date(2024, 3, 1), date(2024, 3, 2), date(2024, 3, 4))


def test_start_date_overrides_period(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = _install(monkeypatch, _history([10.0]))

    YFinancePriceSource(start_date="2024-01-01", end_date="2024-02-01").load("MSFT")

    assert calls == [
        {"symbol": "MSFT", "start": "2024-01-01", "end": "2024-02-01", "interval": "1d"}
    ]


def test_empty_history_is_an_error(monkeypatch: pytest.MonkeyPatch) -> None:
    _install(monkeypatch, pd.DataFrame())
    with pytest.raises(ValueError, match="No historical data"):
        YFinancePriceSource().load("NOPE")
