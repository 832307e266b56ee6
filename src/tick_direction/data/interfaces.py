from typing import Any, Dict, Protocol


class RawSeriesSource(Protocol):
    """Protocol for sources returning a raw intraday time-series payload."""

    @property
    def series_key(self) -> str:
        ...

    def fetch_raw(self, symbol: str) -> Dict[str, Any]:
        ...
