from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Type tags used by the PowerDNS statistics API
STATISTIC_ITEM = "StatisticItem"
MAP_STATISTIC_ITEM = "MapStatisticItem"
RING_STATISTIC_ITEM = "RingStatisticItem"


class StatisticEnvelope(BaseModel):
    """One element of the statistics array before type-specific decoding.

    ``raw_value`` holds the decoded JSON under the ``value`` key as-is; its
    shape depends on ``type`` and is only interpreted by the classifier.
    Missing or null ``name`` and ``type`` are accepted as empty strings.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    type: str = ""
    raw_value: Any = Field(default=None, alias="value")
    size: str | None = None

    @field_validator("name", "type", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class SimpleStatisticItem(BaseModel):
    """A ``{name, value}`` pair inside a map or ring statistic."""

    name: str = ""
    value: float


class ScalarRecord(BaseModel):
    kind: Literal["scalar"] = "scalar"
    name: str
    value: float


class MapRecord(BaseModel):
    kind: Literal["map"] = "map"
    name: str
    entries: list[SimpleStatisticItem] = []


class RingRecord(BaseModel):
    """Bounded ring buffer of keyed counts. Decoded, never exported."""

    kind: Literal["ring"] = "ring"
    name: str
    size: str = ""
    entries: list[SimpleStatisticItem] = []


StatisticRecord = ScalarRecord | MapRecord | RingRecord


class ClassifiedStatistics(BaseModel):
    """Typed records of one scrape, each list in source order."""

    scalars: list[ScalarRecord] = []
    maps: list[MapRecord] = []
    rings: list[RingRecord] = []


class OutputMetric(BaseModel):
    """A single flat sample handed to the collector."""

    name: str
    kind: Literal["counter"] = "counter"
    value: float
    documentation: str = ""


class TransportConfig(BaseModel):
    """How to reach the statistics endpoint."""

    model_config = ConfigDict(frozen=True)

    api_url: str
    api_key: str = Field(default="", repr=False)
    connect_timeout_sec: float = 5.0
    request_deadline_sec: float = 5.0
