"""
Port (interface) for closing-price sources.
Infrastructure adapters (e.g. CsvPriceSource, YFinancePriceSource) must implement this interface.
"""

from abc import ABC, abstractmethod

from src.domain.entities.price_series import PriceSeries


class IPriceSource(ABC):
    @abstractmethod
    def load(self, source: str) -> PriceSeries:
        """Load date-ascending closing prices for *source* (a file path or ticker symbol).

        Raises:
            ValueError: if the source yields no usable prices.
        """
        ...
