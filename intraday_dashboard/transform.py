"""
Reshaping of the provider's nested time series.

raw map  ->  list[Row]         (strings, verbatim, for the table)
rows     ->  list[ChartPoint]  (floats, for the candlestick chart)
"""

from dataclasses import astuple, dataclass, fields
from typing import Mapping

import numpy as np
import pandas as pd

# provider field names, in Row order
FIELD_MAP = {
    "open": "1. open",
    "high": "2. high",
    "low": "3. low",
    "close": "4. close",
    "volume": "5. volume",
}
OHLC = ["open", "high", "low", "close"]


@dataclass(frozen=True)
class Row:
    timestamp: str
    open: str
    high: str
    low: str
    close: str
    volume: str


@dataclass(frozen=True)
class ChartPoint:
    x: str
    y: tuple


ROW_COLUMNS = [f.name for f in fields(Row)]


def to_rows(raw_map: Mapping[str, Mapping[str, str]]) -> list:
    """
    Flatten {timestamp: {"1. open": ..., ...}} into Rows.
    Keeps the mapping's iteration order; values are copied as-is.
    """
    return [
        Row(timestamp=timestamp, **{name: bar[key] for name, key in FIELD_MAP.items()})
        for timestamp, bar in raw_map.items()
    ]


def to_chart_points(rows: list) -> list:
    """
    Pair each row's timestamp with its (open, high, low, close) as floats.
    Unparseable prices come through as NaN.
    """
    if not rows:
        return []
    prices = pd.DataFrame([[getattr(row, name) for name in OHLC] for row in rows], columns=OHLC)
    prices = prices.apply(pd.to_numeric, errors="coerce")
    values = prices.to_numpy(dtype=np.float64).tolist()
    return [ChartPoint(x=row.timestamp, y=tuple(ohlc)) for row, ohlc in zip(rows, values)]


def rows_to_frame(rows: list) -> pd.DataFrame:
    return pd.DataFrame([astuple(row) for row in rows], columns=ROW_COLUMNS)
