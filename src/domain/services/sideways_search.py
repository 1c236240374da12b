"""
Domain service: longest sideways trend search over integer closing prices.
Zero external dependencies.

Two searches share one contract:
  - longest_sideways:       divide and conquer, O(n log n).
  - longest_sideways_naive: every (i, j) pair, O(n^2). Reference baseline only.

Both rely on the Range monotonicity property: extending a range never narrows
its spread, so once an extension fails the threshold every longer one fails too.
"""

from typing import Optional, Sequence

from src.domain.entities.price_range import Range, merge, qualifies


def longest_sideways(
    max_pct_change: float,
    prices: Sequence[int],
    first_index: int,
    last_index: int,
) -> Range:
    """Return the longest qualifying range within [first_index, last_index].

    Ties go to the left half, then the right half, then the range crossing the
    midpoint.
    """
    assert 0 <= first_index <= last_index < len(prices), (
        f"invalid interval [{first_index}, {last_index}] for {len(prices)} prices"
    )

    if first_index == last_index:
        return Range.unit(first_index, prices)

    mid = (first_index + last_index) // 2
    left = longest_sideways(max_pct_change, prices, first_index, mid)
    right = longest_sideways(max_pct_change, prices, mid + 1, last_index)
    crossing = longest_crossing(max_pct_change, prices, first_index, mid + 1, last_index)

    best = left
    if right.length > best.length:
        best = right
    if crossing is not None and crossing.length > best.length:
        best = crossing
    return best


def longest_crossing(
    max_pct_change: float,
    prices: Sequence[int],
    first_index: int,
    mid_index: int,
    last_index: int,
) -> Optional[Range]:
    """Return the longest qualifying range holding both mid_index-1 and mid_index.

    The left side is fixed at its longest qualifying extension before any right
    side is tried, so this can miss a longer crossing range built from a shorter
    left side.  Returns None if even the two innermost days do not qualify.
    """
    assert first_index < mid_index <= last_index

    # Left: grow leftwards from mid_index-1, keep the longest that qualifies.
    longest_lower = Range.unit(mid_index - 1, prices)
    for i in range(mid_index - 2, first_index - 1, -1):
        extended = merge(Range.unit(i, prices), longest_lower)
        if not qualifies(extended, max_pct_change):
            break
        longest_lower = extended

    # Right: every qualifying prefix starting at mid_index, shortest first.
    upper_candidates: list[Range] = []
    upper = Range.unit(mid_index, prices)
    upper_candidates.append(upper)
    for i in range(mid_index + 1, last_index + 1):
        upper = merge(upper, Range.unit(i, prices))
        if qualifies(upper, max_pct_change):
            upper_candidates.append(upper)

    best: Optional[Range] = None
    for upper in upper_candidates:
        crossing = merge(longest_lower, upper)
        if not qualifies(crossing, max_pct_change):
            break
        best = crossing
    return best


def longest_sideways_naive(max_pct_change: float, prices: Sequence[int]) -> Range:
    """Return the longest qualifying range by checking every (i, j) pair.

    Ties go to the smallest start index, then the smallest end index.
    """
    assert len(prices) > 0, "prices must not be empty"

    longest = Range.unit(0, prices)
    for i in range(len(prices)):
        current = Range.unit(i, prices)
        for j in range(i + 1, len(prices)):
            current = merge(current, Range.unit(j, prices))
            if qualifies(current, max_pct_change) and current.length > longest.length:
                longest = current
    return longest
