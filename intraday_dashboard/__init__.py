"""Intraday stock time series dashboard: fetch, reshape, and render as table or candlestick."""

from intraday_dashboard.config import DashboardSettings, get_settings
from intraday_dashboard.fetch import Failure, FailureReason, FetchState, IntradayFetcher, Success
from intraday_dashboard.state import DisplayState
from intraday_dashboard.transform import ChartPoint, Row, to_chart_points, to_rows

__version__ = "0.1.0"

__all__ = [
    "ChartPoint",
    "DashboardSettings",
    "DisplayState",
    "Failure",
    "FailureReason",
    "FetchState",
    "IntradayFetcher",
    "Row",
    "Success",
    "get_settings",
    "to_chart_points",
    "to_rows",
]
