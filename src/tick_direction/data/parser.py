"""Converts raw intraday time-series payloads into ``Observation`` records.

Entries are emitted in the iteration order of the source mapping. No chronological
re-sorting happens here; see ``features.builder.check_ordering``.
"""

import logging
import math
from enum import Enum
from typing import Any, List, Mapping

from pydantic import ValidationError

from ..errors import MalformedInput
from .schemas import AlphaVantagePayload, Observation, ParseReport, SeriesEntry

logger = logging.getLogger(__name__)

DEFAULT_SERIES_KEY = "Time Series (1min)"
UPSTREAM_ERROR_KEYS = ("Error Message", "Note", "Information")


class FallbackPolicy(str, Enum):
    """What to do when a price or volume string is not a valid number.

    DEFAULT substitutes 0.0 price / 0 volume and keeps going, which yields degenerate
    feature rows; the substitutions are counted in ``ParseReport.fallback_count``.
    STRICT raises ``MalformedInput`` instead.
    """

    DEFAULT = "default"
    STRICT = "strict"


def parse_time_series(
    raw: Any,
    series_key: str = DEFAULT_SERIES_KEY,
    policy: FallbackPolicy = FallbackPolicy.DEFAULT,
) -> ParseReport:
    if not isinstance(raw, Mapping):
        raise MalformedInput(f"Expected a JSON object, got {type(raw).__name__}")

    series = raw.get(series_key)
    if series is None:
        for key in UPSTREAM_ERROR_KEYS:
            if key in raw:
                raise MalformedInput(f"Upstream returned no data: {raw[key]}")

    try:
        payload = AlphaVantagePayload.model_validate(raw)
    except ValidationError as e:
        raise MalformedInput(f"Missing symbol: {e.errors()[0]['msg']}") from e
    symbol = payload.meta_data.symbol

    if series is None:
        raise MalformedInput(f"Missing time-series container '{series_key}'")
    if not isinstance(series, Mapping):
        raise MalformedInput(f"'{series_key}' must be an object, got {type(series).__name__}")

    report = ParseReport(symbol=symbol)
    for timestamp, data in series.items():
        try:
            entry = SeriesEntry.model_validate(data)
        except ValidationError as e:
            raise MalformedInput(f"Invalid entry at {timestamp}: {e.errors()[0]['msg']}") from e

        price, price_ok = _parse_price(entry.open)
        volume, volume_ok = _parse_volume(entry.volume)
        if not (price_ok and volume_ok):
            if policy is FallbackPolicy.STRICT:
                raise MalformedInput(
                    f"Unparseable numbers at {timestamp}: open={entry.open!r} volume={entry.volume!r}"
                )
            logger.warning(
                "Numeric fallback at %s: open=%r volume=%r", timestamp, entry.open, entry.volume
            )
            report.fallback_count += 1
            report.fallback_timestamps.append(str(timestamp))

        report.observations.append(
            Observation(symbol=symbol, price=price, volume=volume, timestamp=str(timestamp))
        )

    logger.debug(
        "Parsed %d observations for %s (%d fallbacks)",
        len(report.observations),
        symbol,
        report.fallback_count,
    )
    return report


def parse_observations(
    raw: Any,
    series_key: str = DEFAULT_SERIES_KEY,
    policy: FallbackPolicy = FallbackPolicy.DEFAULT,
) -> List[Observation]:
    return parse_time_series(raw, series_key=series_key, policy=policy).observations


def _parse_price(text: str) -> tuple[float, bool]:
    # float() would also take surrounding whitespace and digit separators
    if not text.isascii() or text != text.strip() or "_" in text:
        return 0.0, False
    try:
        value = float(text)
    except ValueError:
        return 0.0, False
    if not math.isfinite(value) or value <= 0:
        return 0.0, False
    return value, True


def _parse_volume(text: str) -> tuple[int, bool]:
    # unsigned decimal digits only; int() would also take signs and underscores
    if not text.isascii() or not text.isdigit():
        return 0, False
    return int(text), True
