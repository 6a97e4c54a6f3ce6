"""
Runtime settings for the intraday dashboard.

Values come from `INTRADAY_*` environment variables or a local `.env` file,
falling back to the defaults below.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DashboardSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="INTRADAY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    base_url: str = Field("https://www.alphavantage.co/query", description="Alpha Vantage query endpoint")
    symbol: str = Field("IBM", description="Ticker requested from the provider")
    interval: str = Field("5min", description="Intraday bar interval")
    # free tier key, 25 requests per day; "demo" only serves IBM
    api_key: str = Field("RIBXT3XYLI69PC0Q", description="Primary API credential")
    fallback_api_key: str = Field("demo", description="Credential used when the primary attempt fails")
    timeout: float = Field(10.0, gt=0, description="Request timeout in seconds")
    log_level: str = Field("INFO", description="loguru level")
    scroll_height: str = Field("300px", description="Max table height when scrolling is contained")
    chart_height: int = Field(350, gt=0, description="Candlestick chart height in pixels")

    @property
    def series_key(self) -> str:
        """Name of the top-level field holding the bars, e.g. 'Time Series (5min)'."""
        return f"Time Series ({self.interval})"


@lru_cache(maxsize=1)
def get_settings() -> DashboardSettings:
    return DashboardSettings()
