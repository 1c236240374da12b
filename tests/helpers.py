from __future__ import annotations

from datetime import date, timedelta

from src.domain.entities.price_series import PriceSeries
from src.domain.ports.price_source_port import IPriceSource


def make_series(prices: list[int], symbol: str = "TEST", start: date = date(2022, 1, 3)) -> PriceSeries:
    dates = tuple(start + timedelta(days=offset) for offset in range(len(prices)))
    return PriceSeries(symbol=symbol, dates=dates, prices=tuple(prices))


class FakePriceSource(IPriceSource):
    """Stands in for the CSV and Yahoo Finance adapters; records what was requested."""

    def __init__(self, series: PriceSeries) -> None:
        self.series = series
        self.requested: list[str] = []

    def load(self, source: str) -> PriceSeries:
        self.requested.append(source)
        return self.series
