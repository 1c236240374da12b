"""
Use-case: find the longest sideways trend in a security's closing prices.
Depends only on Domain ports, entities and services, no infrastructure imports.
"""

import logging
import math

from src.domain.entities.price_series import SidewaysTrend
from src.domain.ports.price_source_port import IPriceSource
from src.domain.services.sideways_search import longest_sideways, longest_sideways_naive

logger = logging.getLogger(__name__)

DIVIDE_AND_CONQUER = "divide-and-conquer"
NAIVE = "naive"


class FindLongestSidewaysTrendUseCase:
    DEFAULT_MAX_PCT_CHANGE: float = 5.0

    def __init__(self, price_source: IPriceSource) -> None:
        self._price_source = price_source

    def execute(
        self,
        source: str,
        max_pct_change: float = DEFAULT_MAX_PCT_CHANGE,
        naive: bool = False,
    ) -> SidewaysTrend:
        """Load prices for *source* and return its longest sideways trend.

        Args:
            source:         CSV path or ticker symbol, as understood by the
                            injected IPriceSource.
            max_pct_change: Widest allowed spread, as a percentage of the low.
            naive:          Use the O(n^2) baseline instead of divide and conquer.

        Raises:
            ValueError: if *source* is blank or *max_pct_change* is negative,
                        NaN or infinite.
            Any exception propagated from IPriceSource on load failure.
        """
        if not source or not source.strip():
            raise ValueError("source must be a non-empty string")
        if not math.isfinite(max_pct_change) or max_pct_change < 0:
            raise ValueError(
                f"max_pct_change must be a finite, non-negative number, got {max_pct_change!r}"
            )

        series = self._price_source.load(source.strip())
        algorithm = NAIVE if naive else DIVIDE_AND_CONQUER
        logger.info(
            "Searching %d prices of %s for a sideways trend within %.2f%% (%s)",
            len(series),
            series.symbol,
            max_pct_change,
            algorithm,
        )

        if naive:
            longest = longest_sideways_naive(max_pct_change, series.prices)
        else:
            longest = longest_sideways(max_pct_change, series.prices, 0, len(series) - 1)

        logger.debug("Longest range for %s: %s", series.symbol, longest)
        return SidewaysTrend.from_range(series, longest, max_pct_change, algorithm)
