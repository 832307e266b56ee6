import os
from dataclasses import dataclass
from typing import Optional

from .data.alpha_vantage import VALID_INTERVALS, series_key_for
from .data.parser import FallbackPolicy


@dataclass
class PipelineConfig:
    symbol: str = "IBM"
    api_key: Optional[str] = None
    interval: str = "1min"
    fallback_policy: FallbackPolicy = FallbackPolicy.DEFAULT
    var_smoothing: float = 1e-9
    min_length: int = 2
    sort_chronologically: bool = False  # source order is kept unless asked otherwise

    def validate(self) -> None:
        """
        Validate configuration parameters.

        Raises:
            ValueError: If any parameter is invalid
        """
        if not self.symbol or not self.symbol.strip():
            raise ValueError("symbol cannot be empty")

        if self.interval not in VALID_INTERVALS:
            raise ValueError(f"interval must be one of {VALID_INTERVALS}, got {self.interval}")

        if self.var_smoothing <= 0:
            raise ValueError(f"var_smoothing must be positive, got {self.var_smoothing}")

        if self.min_length < 2:
            raise ValueError(f"min_length must be at least 2, got {self.min_length}")

    @property
    def series_key(self) -> str:
        return series_key_for(self.interval)

    @classmethod
    def from_env(cls, **overrides) -> "PipelineConfig":
        cfg = cls(
            symbol=os.getenv("TICK_DIRECTION_SYMBOL", cls.symbol),
            api_key=os.getenv("ALPHAVANTAGE_API_KEY") or None,
        )
        for key, value in overrides.items():
            if value is not None:
                setattr(cfg, key, value)
        return cfg
