from __future__ import annotations

import pytest

from tests.helpers import FakePriceSource, make_series


@pytest.fixture
def sideways_prices() -> list[int]:
    # Indices 2..6 stay within 4% of 100.00; the edges break out.
    return [9000, 9500, 10000, 10200, 10400, 10100, 10300, 11500, 12000]


@pytest.fixture
def fake_source(sideways_prices: list[int]) -> FakePriceSource:
    return FakePriceSource(make_series(sideways_prices))
