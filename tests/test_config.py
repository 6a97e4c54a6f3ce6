import io

import pytest
from loguru import logger
from pydantic import ValidationError

from intraday_dashboard.config import DashboardSettings, get_settings
from intraday_dashboard.logging import configure_logging


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("INTRADAY_API_KEY", raising=False)
        settings = DashboardSettings(_env_file=None)

        assert settings.base_url == "https://www.alphavantage.co/query"
        assert settings.symbol == "IBM"
        assert settings.interval == "5min"
        assert settings.fallback_api_key == "demo"
        assert settings.series_key == "Time Series (5min)"
        assert settings.scroll_height == "300px"
        assert settings.chart_height == 350

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("INTRADAY_API_KEY", "from-env")
        monkeypatch.setenv("INTRADAY_INTERVAL", "15min")

        settings = DashboardSettings(_env_file=None)

        assert settings.api_key == "from-env"
        assert settings.series_key == "Time Series (15min)"

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            DashboardSettings(timeout=0)

    def test_get_settings_is_cached(self):
        get_settings.cache_clear()

        assert get_settings() is get_settings()


def test_configure_logging_filters_by_level():
    stream = io.StringIO()
    configure_logging("warning", sink=stream)
    try:
        logger.info("hidden")
        logger.warning("shown")
    finally:
        configure_logging("INFO")

    output = stream.getvalue()
    assert "shown" in output
    assert "hidden" not in output
