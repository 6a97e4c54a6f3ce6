"""Shared fixtures for the dashboard test suite."""

from unittest.mock import MagicMock

import pytest
import requests
from loguru import logger

from intraday_dashboard.config import DashboardSettings

SAMPLE_SERIES = {
    "2024-01-01 10:05:00": {
        "1. open": "100.75",
        "2. high": "102.00",
        "3. low": "100.50",
        "4. close": "101.90",
        "5. volume": "23456",
    },
    "2024-01-01 10:00:00": {
        "1. open": "100.00",
        "2. high": "101.50",
        "3. low": "99.00",
        "4. close": "100.75",
        "5. volume": "12345",
    },
}


@pytest.fixture
def settings():
    return DashboardSettings(api_key="primary-key", fallback_api_key="demo", timeout=5)


def make_response(payload=None, json_error=None, http_error=None):
    response = MagicMock(spec=requests.Response)
    if http_error is not None:
        response.raise_for_status.side_effect = http_error
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def log_messages():
    """Collect loguru records as (level, message) pairs."""
    messages = []
    handler_id = logger.add(lambda m: messages.append((m.record["level"].name, m.record["message"])),
                            level="DEBUG")
    yield messages
    logger.remove(handler_id)
