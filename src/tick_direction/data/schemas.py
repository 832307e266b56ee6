from dataclasses import dataclass, field
from typing import List

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class Observation:
    """One parsed price/volume/timestamp record for an instrument."""

    symbol: str
    price: float
    volume: int
    timestamp: str


@dataclass
class ParseReport:
    """Parsed observations plus a count of entries that hit the numeric fallback."""

    symbol: str
    observations: List[Observation] = field(default_factory=list)
    fallback_count: int = 0
    fallback_timestamps: List[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.observations)


class MetaData(BaseModel):
    model_config = ConfigDict(extra="ignore")

    symbol: str = Field(alias="2. Symbol")


class SeriesEntry(BaseModel):
    """Single time-series bar. Numbers arrive as text and are parsed later."""

    model_config = ConfigDict(extra="ignore")

    open: str = Field(alias="1. open")
    volume: str = Field(alias="5. volume")


class AlphaVantagePayload(BaseModel):
    model_config = ConfigDict(extra="allow")

    meta_data: MetaData = Field(alias="Meta Data")
