"""
CLI entry point: report the longest sideways trend in a price file or ticker.

This module is the Composition Root for command-line runs: it picks the
IPriceSource adapter and passes it to FindLongestSidewaysTrendUseCase.

    python -m src.infrastructure.entrypoints.cli data/amzn.csv --max-pct-change 5
    python -m src.infrastructure.entrypoints.cli AMZN --yahoo --period 2y --naive
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from src.application.use_cases.find_sideways_trend import FindLongestSidewaysTrendUseCase
from src.domain.entities.price_series import SidewaysTrend
from src.domain.ports.price_source_port import IPriceSource
from src.infrastructure.config.settings import LOG_LEVELS, Settings
from src.infrastructure.price_data.csv_price_loader import CsvPriceSource
from src.infrastructure.price_data.yfinance_adapter import YFinancePriceSource

logger = logging.getLogger(__name__)

REPORT_DATE_FORMAT = "%d-%b-%y"


def _build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sideways-trend",
        description="Find the longest sideways trend in closing price data.",
    )
    parser.add_argument("source", help="CSV price file, or a ticker symbol with --yahoo.")
    parser.add_argument(
        "--max-pct-change",
        type=float,
        default=settings.max_pct_change,
        help="Widest allowed high/low spread, in percent of the low (default: %(default)s).",
    )
    parser.add_argument(
        "--naive",
        action="store_true",
        help="Use the O(n^2) baseline search instead of divide and conquer.",
    )
    parser.add_argument(
        "--yahoo",
        action="store_true",
        help="Treat SOURCE as a ticker and download closes from Yahoo Finance.",
    )
    parser.add_argument(
        "--period",
        default=settings.yf_period,
        help="yfinance period used with --yahoo (default: %(default)s).",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        choices=LOG_LEVELS,
        type=str.upper,
    )
    return parser


def format_trend(trend: SidewaysTrend) -> str:
    return (
        "Longest sideways trend is from {start} to {end} ({days} trading days)\n"
        "Price range is {low:.2f} to {high:.2f}, a {pct:.1f}% change".format(
            start=trend.start_date.strftime(REPORT_DATE_FORMAT),
            end=trend.end_date.strftime(REPORT_DATE_FORMAT),
            days=trend.trading_days,
            low=trend.low_price,
            high=trend.high_price,
            pct=trend.percent_change,
        )
    )


def _make_price_source(args: argparse.Namespace, settings: Settings) -> IPriceSource:
    if args.yahoo:
        return YFinancePriceSource(period=args.period)
    return CsvPriceSource(date_format=settings.date_format)


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        settings = Settings.from_env()
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    args = _build_parser(settings).parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("yfinance").setLevel(logging.CRITICAL)

    use_case = FindLongestSidewaysTrendUseCase(_make_price_source(args, settings))
    try:
        trend = use_case.execute(args.source, max_pct_change=args.max_pct_change, naive=args.naive)
    except (FileNotFoundError, ValueError) as exc:
        logger.debug("Search failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(format_trend(trend))
    return 0


if __name__ == "__main__":
    sys.exit(main())
