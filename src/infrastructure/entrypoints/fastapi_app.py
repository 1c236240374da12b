"""
FastAPI entry point: HTTP access to the sideways trend search.

This module is the Composition Root for API runs: it wires the yfinance adapter
into FindLongestSidewaysTrendUseCase.  The use case is provided through a
FastAPI dependency so tests can swap in another IPriceSource.

Run locally (uvicorn comes with the "server" extra):
    uvicorn src.infrastructure.entrypoints.fastapi_app:app --reload --port 8000
"""

import logging
from datetime import date

from fastapi import Depends, FastAPI, HTTPException, Query
from pydantic import BaseModel

from src.application.use_cases.find_sideways_trend import FindLongestSidewaysTrendUseCase
from src.infrastructure.config.settings import Settings
from src.infrastructure.price_data.yfinance_adapter import YFinancePriceSource

logger = logging.getLogger(__name__)

_settings = Settings.from_env()

app = FastAPI(title="Sideways Trend API")


class SidewaysTrendResponse(BaseModel):
    symbol: str
    start_date: date
    end_date: date
    trading_days: int
    first_index: int
    last_index: int
    low_price: float
    high_price: float
    percent_change: float
    max_pct_change: float
    algorithm: str


def get_use_case(period: str = Query(default=_settings.yf_period)) -> FindLongestSidewaysTrendUseCase:
    """FastAPI dependency: a use case backed by Yahoo Finance for *period*."""
    return FindLongestSidewaysTrendUseCase(YFinancePriceSource(period=period))


@app.get("/sideways-trend", response_model=SidewaysTrendResponse)
def sideways_trend(
    symbol: str,
    max_pct_change: float = Query(default=_settings.max_pct_change, ge=0),
    naive: bool = False,
    use_case: FindLongestSidewaysTrendUseCase = Depends(get_use_case),
):
    """Return the longest sideways trend for *symbol*."""
    try:
        trend = use_case.execute(symbol, max_pct_change=max_pct_change, naive=naive)
    except ValueError as exc:
        logger.info("Rejected sideways-trend request for %r: %s", symbol, exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return SidewaysTrendResponse(
        symbol=trend.symbol,
        start_date=trend.start_date,
        end_date=trend.end_date,
        trading_days=trend.trading_days,
        first_index=trend.price_range.first_index,
        last_index=trend.price_range.last_index,
        low_price=trend.low_price,
        high_price=trend.high_price,
        percent_change=trend.percent_change,
        max_pct_change=trend.max_pct_change,
        algorithm=trend.algorithm,
    )


@app.get("/health")
async def health():
    return {"status": "ok"}
