"""
Domain entities for loaded closing prices and the trend reported back to callers.
Zero external dependencies, pure Python dataclasses only.
"""

from dataclasses import dataclass
from datetime import date

from src.domain.entities.price_range import Range


@dataclass(frozen=True)
class PriceSeries:
    """Date-ascending closing prices in integer minor units (e.g. cents).

    The core search only sees ``prices``; ``dates`` is kept alongside so a
    Range's indices can be mapped back to trading days.
    """

    symbol: str
    dates: tuple[date, ...]
    prices: tuple[int, ...]
    scale: int = 100

    def __post_init__(self) -> None:
        if not self.prices:
            raise ValueError(f"No prices loaded for {self.symbol!r}")
        if len(self.dates) != len(self.prices):
            raise ValueError(
                f"Got {len(self.dates)} dates but {len(self.prices)} prices for {self.symbol!r}"
            )
        if self.scale <= 0:
            raise ValueError(f"scale must be positive, got {self.scale}")
        bad = next((p for p in self.prices if p <= 0), None)
        if bad is not None:
            raise ValueError(f"Prices must be positive, got {bad} in {self.symbol!r}")

    def __len__(self) -> int:
        return len(self.prices)


@dataclass(frozen=True)
class SidewaysTrend:
    symbol: str
    start_date: date
    end_date: date
    trading_days: int
    low_price: float
    high_price: float
    percent_change: float
    max_pct_change: float
    algorithm: str
    price_range: Range

    @classmethod
    def from_range(
        cls,
        series: PriceSeries,
        price_range: Range,
        max_pct_change: float,
        algorithm: str,
    ) -> "SidewaysTrend":
        """Map a Range over *series* back to dates and major currency units."""
        return cls(
            symbol=series.symbol,
            start_date=series.dates[price_range.first_index],
            end_date=series.dates[price_range.last_index],
            trading_days=price_range.length,
            low_price=price_range.low_price / series.scale,
            high_price=price_range.high_price / series.scale,
            percent_change=price_range.percent_change,
            max_pct_change=max_pct_change,
            algorithm=algorithm,
            price_range=price_range,
        )
