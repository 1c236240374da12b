"""
Infrastructure adapter: yfinance → IPriceSource.
All yfinance-specific details (Ticker.history(), the Close column) are confined here;
the rest of the codebase depends only on IPriceSource.
"""

import logging
from typing import Optional

import yfinance as yf

from src.domain.entities.price_series import PriceSeries
from src.domain.ports.price_source_port import IPriceSource

logger = logging.getLogger(__name__)


class YFinancePriceSource(IPriceSource):
    """Fetches daily closing prices from Yahoo Finance via the yfinance library."""

    def __init__(
        self,
        period: str = "1y",
        interval: str = "1d",
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        scale: int = 100,
    ) -> None:
        self._period = period
        self._interval = interval
        self._start_date = start_date
        self._end_date = end_date
        self._scale = scale

    def load(self, source: str) -> PriceSeries:
        symbol = source.upper().strip()
        ticker = yf.Ticker(symbol)
        history = (
            ticker.history(start=self._start_date, end=self._end_date, interval=self._interval)
            if self._start_date
            else ticker.history(period=self._period, interval=self._interval)
        )

        if history.empty:
            raise ValueError(f"No historical data available for symbol: {symbol!r}")

        closes = history["Close"].dropna().sort_index()
        logger.debug("Fetched %d closes for %s", len(closes), symbol)
        return PriceSeries(
            symbol=symbol,
            dates=tuple(ts.date() for ts in closes.index),
            prices=tuple(int(round(float(close) * self._scale)) for close in closes),
            scale=self._scale,
        )
