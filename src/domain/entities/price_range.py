"""
Domain entity for a contiguous span of trading days and its price bounds.
Zero external dependencies, pure Python dataclass only.

A Range never changes after construction: merging two adjacent ranges builds a
new one.  Growing a range can only lower its low or raise its high, so its
spread never shrinks.  The sideways search depends on that property.
"""

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class Range:
    """Closed index interval [first_index, last_index] with min/max price."""

    first_index: int
    last_index: int
    low_price: int
    high_price: int

    def __post_init__(self) -> None:
        assert self.first_index <= self.last_index, "range must not be empty"
        assert self.low_price <= self.high_price, "low price exceeds high price"

    @classmethod
    def unit(cls, index: int, prices: Sequence[int]) -> "Range":
        """Return the single-day range at *index*."""
        assert 0 <= index < len(prices), f"index {index} out of bounds"
        price = prices[index]
        return cls(first_index=index, last_index=index, low_price=price, high_price=price)

    @property
    def length(self) -> int:
        """Number of trading days covered."""
        return self.last_index - self.first_index + 1

    @property
    def percent_change(self) -> float:
        return 100.0 * (self.high_price - self.low_price) / self.low_price


def merge(a: Range, b: Range) -> Range:
    """Return the range spanning two adjacent ranges, in either order."""
    assert (
        b.first_index == a.last_index + 1 or a.first_index == b.last_index + 1
    ), f"ranges {a} and {b} are not adjacent"
    return Range(
        first_index=min(a.first_index, b.first_index),
        last_index=max(a.last_index, b.last_index),
        low_price=min(a.low_price, b.low_price),
        high_price=max(a.high_price, b.high_price),
    )


def qualifies(price_range: Range, max_pct_change: float) -> bool:
    """True when the range's spread is at most *max_pct_change* percent of its low."""
    assert price_range.low_price > 0, "prices must be positive"
    return 100 * (price_range.high_price - price_range.low_price) <= (
        max_pct_change * price_range.low_price
    )
