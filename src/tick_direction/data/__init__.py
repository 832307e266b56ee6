from .alpha_vantage import AlphaVantageConnector, JsonFileConnector
from .interfaces import RawSeriesSource
from .parser import FallbackPolicy, parse_observations, parse_time_series
from .schemas import Observation, ParseReport

__all__ = [
    "AlphaVantageConnector",
    "JsonFileConnector",
    "RawSeriesSource",
    "FallbackPolicy",
    "parse_observations",
    "parse_time_series",
    "Observation",
    "ParseReport",
]
