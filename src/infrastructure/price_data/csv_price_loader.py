"""
Infrastructure adapter: delimited price file → IPriceSource.

Expected layout is a header row followed by one row per trading day, with the
date in the first column and the closing price in the second, e.g.

    Date,Close,Open,High,Low,Volume,Change %
    19-Oct-22,160.25,158.10,161.00,157.80,1.2M,0.84%

Remaining columns are ignored.  Rows may be in any order; they are sorted by
date before prices are converted to integer minor units.
"""

import logging
from pathlib import Path

import pandas as pd

from src.domain.entities.price_series import PriceSeries
from src.domain.ports.price_source_port import IPriceSource
from src.infrastructure.config.settings import DEFAULT_DATE_FORMAT

logger = logging.getLogger(__name__)


class CsvPriceSource(IPriceSource):
    """Reads closing prices from a CSV file with pandas."""

    def __init__(
        self,
        date_format: str = DEFAULT_DATE_FORMAT,
        scale: int = 100,
        delimiter: str = ",",
    ) -> None:
        self._date_format = date_format
        self._scale = scale
        self._delimiter = delimiter

    def load(self, source: str) -> PriceSeries:
        path = Path(source)
        frame = pd.read_csv(path, sep=self._delimiter, skipinitialspace=True)
        if len(frame.columns) < 2:
            raise ValueError(f"{path} needs a date column and a close column")

        date_col, close_col = frame.columns[0], frame.columns[1]
        dates = self._parse_dates(frame[date_col], path)
        # Quoted closes may carry thousands separators ("1,234.50").
        closes = pd.to_numeric(
            frame[close_col].astype(str).str.replace(",", "", regex=False),
            errors="coerce",
        )
        if closes.isna().any():
            bad_row = int(closes.isna().to_numpy().nonzero()[0][0])
            raise ValueError(
                f"Unparsable closing price {frame[close_col].iloc[bad_row]!r} "
                f"on data row {bad_row + 1} of {path}"
            )

        ordered = (
            pd.DataFrame({"date": dates, "close": closes})
            .sort_values("date", kind="stable")
            .reset_index(drop=True)
        )
        logger.debug("Loaded %d rows from %s", len(ordered), path)
        return PriceSeries(
            symbol=path.stem,
            dates=tuple(ts.date() for ts in ordered["date"]),
            prices=tuple(int(round(close * self._scale)) for close in ordered["close"]),
            scale=self._scale,
        )

    def _parse_dates(self, column: pd.Series, path: Path) -> pd.Series:
        dates = pd.to_datetime(column, format=self._date_format, errors="coerce")
        if not dates.isna().any():
            return dates
        logger.info(
            "Dates in %s do not all match %r; falling back to pandas' parser",
            path,
            self._date_format,
        )
        try:
            return pd.to_datetime(column, format="mixed")
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Unparsable dates in {path}: {exc}") from exc
