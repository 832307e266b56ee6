"""
Raw data sources for intraday series.

Uses:
- Alpha Vantage TIME_SERIES_INTRADAY over httpx
- Saved JSON payloads on disk for offline runs
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import httpx

from .interfaces import RawSeriesSource

logger = logging.getLogger(__name__)

ALPHA_VANTAGE_URL = "https://www.alphavantage.co/query"
VALID_INTERVALS = ("1min", "5min", "15min", "30min", "60min")


def series_key_for(interval: str) -> str:
    return f"Time Series ({interval})"


class AlphaVantageConnector(RawSeriesSource):
    """Fetches raw intraday bars from Alpha Vantage."""

    def __init__(
        self,
        api_key: str,
        interval: str = "1min",
        client: Optional[httpx.Client] = None,
        base_url: str = ALPHA_VANTAGE_URL,
    ) -> None:
        if not api_key:
            raise ValueError("Alpha Vantage API key is required")
        if interval not in VALID_INTERVALS:
            raise ValueError(f"interval must be one of {VALID_INTERVALS}, got {interval}")
        self.api_key = api_key
        self.interval = interval
        self.base_url = base_url
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=10)

    def close(self) -> None:
        """Close the HTTP client if this connector created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "AlphaVantageConnector":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    @property
    def series_key(self) -> str:
        return series_key_for(self.interval)

    def fetch_raw(self, symbol: str) -> Dict[str, Any]:
        params = {
            "function": "TIME_SERIES_INTRADAY",
            "symbol": symbol,
            "interval": self.interval,
            "apikey": self.api_key,
        }
        resp = self._client.get(self.base_url, params=params)
        resp.raise_for_status()
        payload = resp.json()
        logger.debug(f"Fetched intraday payload for {symbol} ({self.interval})")
        return payload


class JsonFileConnector(RawSeriesSource):
    """Loads a previously saved raw payload from a JSON file."""

    def __init__(self, path: str | Path, interval: str = "1min") -> None:
        self.path = Path(path)
        self.interval = interval

    @property
    def series_key(self) -> str:
        return series_key_for(self.interval)

    def fetch_raw(self, symbol: str) -> Dict[str, Any]:
        if not self.path.exists():
            raise FileNotFoundError(f"JSON payload file not found: {self.path}")
        with self.path.open("r") as f:
            payload = json.load(f)
        logger.debug(f"Loaded raw payload for {symbol} from {self.path}")
        return payload
