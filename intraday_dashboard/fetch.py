"""
Intraday bar fetching with a single fallback credential.

The free Alpha Vantage key is limited to a handful of requests per day. When
the primary key fails for any reason (network, bad JSON, or a body without
the series because the provider answered with a rate-limit note) the whole
request is repeated once with the fallback key, usually "demo".

    IDLE -> FETCHING_PRIMARY -> SUCCESS
                             -> FETCHING_FALLBACK -> SUCCESS | FAILED
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

import requests
from loguru import logger

from intraday_dashboard.config import DashboardSettings
from intraday_dashboard.transform import to_rows

# keys Alpha Vantage uses to explain an answer without data
PROVIDER_MESSAGE_KEYS = ("Note", "Information", "Error Message")


class FetchState(str, Enum):
    IDLE = "idle"
    FETCHING_PRIMARY = "fetching_primary"
    FETCHING_FALLBACK = "fetching_fallback"
    SUCCESS = "success"
    FAILED = "failed"


class FailureReason(str, Enum):
    NETWORK = "network"
    DECODE = "decode"
    MISSING_DATA = "missing_data"


@dataclass(frozen=True)
class Success:
    rows: list = field(default_factory=list)


@dataclass(frozen=True)
class Failure:
    reason: FailureReason
    detail: str = ""


LoadResult = Union[Success, Failure]


class IntradayFetcher:
    """Fetches one symbol's intraday series and flattens it into rows."""

    def __init__(self, settings: DashboardSettings, session: Optional[requests.Session] = None):
        self.settings = settings
        self.session = session or requests.Session()
        self.state = FetchState.IDLE

    def query_params(self, credential: str) -> dict:
        return {
            "function": "TIME_SERIES_INTRADAY",
            "symbol": self.settings.symbol,
            "interval": self.settings.interval,
            "apikey": credential,
        }

    def load(self, primary_credential: Optional[str] = None,
             fallback_credential: Optional[str] = None) -> LoadResult:
        """
        Run the primary attempt and, if it fails, exactly one fallback attempt.
        Never raises for network, decode or missing-data failures.
        """
        primary = primary_credential or self.settings.api_key
        fallback = fallback_credential or self.settings.fallback_api_key

        self.state = FetchState.FETCHING_PRIMARY
        result = self._attempt(primary)
        if isinstance(result, Success):
            return self._succeed(result)

        logger.warning(
            "Primary fetch for {} failed ({}: {}), retrying with fallback key",
            self.settings.symbol, result.reason.value, result.detail,
        )
        self.state = FetchState.FETCHING_FALLBACK
        result = self._attempt(fallback)
        if isinstance(result, Success):
            return self._succeed(result)

        logger.error(
            "Fallback fetch for {} failed ({}: {}), no data available",
            self.settings.symbol, result.reason.value, result.detail,
        )
        self.state = FetchState.FAILED
        return result

    def _succeed(self, result: Success) -> Success:
        logger.info("Loaded {} {} bars for {}", len(result.rows), self.settings.interval, self.settings.symbol)
        self.state = FetchState.SUCCESS
        return result

    def _attempt(self, credential: str) -> LoadResult:
        try:
            response = self.session.get(
                self.settings.base_url,
                params=self.query_params(credential),
                timeout=self.settings.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            return Failure(FailureReason.NETWORK, str(e))

        try:
            payload = response.json()
        except ValueError as e:
            return Failure(FailureReason.DECODE, str(e))

        series = payload.get(self.settings.series_key) if isinstance(payload, dict) else None
        if not isinstance(series, dict):
            return Failure(FailureReason.MISSING_DATA, self._missing_detail(payload))

        try:
            return Success(to_rows(series))
        except (KeyError, TypeError, AttributeError) as e:
            return Failure(FailureReason.MISSING_DATA, f"malformed bar, missing {e}")

    def _missing_detail(self, payload) -> str:
        detail = f"'{self.settings.series_key}' not in response"
        if isinstance(payload, dict):
            messages = [str(payload[k]) for k in PROVIDER_MESSAGE_KEYS if k in payload]
            if messages:
                detail += ": " + " ".join(messages)
        return detail
