"""Route statistic envelopes to typed records by their ``type`` tag.

Malformed numbers are fatal to the scrape; unknown tags are skipped so new
upstream statistic kinds never break the exporter.
"""

from __future__ import annotations

from typing import Any, Callable

from loguru import logger

from pdns_exporter.models.statistics_models import (
    MAP_STATISTIC_ITEM,
    RING_STATISTIC_ITEM,
    STATISTIC_ITEM,
    ClassifiedStatistics,
    MapRecord,
    RingRecord,
    ScalarRecord,
    SimpleStatisticItem,
    StatisticEnvelope,
    StatisticRecord,
)
from pdns_exporter.utils.exceptions import StatisticParseException


def parse_statistic_value(statistic_name: str, raw_value: Any) -> float:
    """Parse a textual statistic value into a float.

    Only JSON strings are accepted. Surrounding whitespace and ``_`` digit
    separators are rejected even though ``float()`` would take them.
    """
    if not isinstance(raw_value, str):
        raise StatisticParseException(statistic_name, raw_value, "expected a numeric string")
    if raw_value != raw_value.strip() or "_" in raw_value:
        raise StatisticParseException(statistic_name, raw_value)
    try:
        return float(raw_value)
    except ValueError as e:
        raise StatisticParseException(statistic_name, raw_value, str(e)) from e


def _decode_entries(envelope: StatisticEnvelope) -> list[SimpleStatisticItem]:
    if not isinstance(envelope.raw_value, list):
        logger.warning(
            f"Statistic '{envelope.name}' of type {envelope.type} has no list value "
            f"(got {type(envelope.raw_value).__name__}), decoding it as empty"
        )
        return []

    entries: list[SimpleStatisticItem] = []
    for item in envelope.raw_value:
        if not isinstance(item, dict):
            raise StatisticParseException(envelope.name, item, "expected a {name, value} object")
        entry_name = item.get("name")
        if entry_name is None:
            entry_name = ""
        if not isinstance(entry_name, str):
            raise StatisticParseException(envelope.name, item, "entry name is not a string")
        entries.append(
            SimpleStatisticItem(
                name=entry_name,
                value=parse_statistic_value(f"{envelope.name}/{entry_name}", item.get("value")),
            )
        )
    return entries


def _decode_scalar(envelope: StatisticEnvelope) -> ScalarRecord:
    return ScalarRecord(name=envelope.name, value=parse_statistic_value(envelope.name, envelope.raw_value))


def _decode_map(envelope: StatisticEnvelope) -> MapRecord:
    return MapRecord(name=envelope.name, entries=_decode_entries(envelope))


def _decode_ring(envelope: StatisticEnvelope) -> RingRecord:
    return RingRecord(name=envelope.name, size=envelope.size or "", entries=_decode_entries(envelope))


STATISTIC_DECODERS: dict[str, Callable[[StatisticEnvelope], StatisticRecord]] = {
    STATISTIC_ITEM: _decode_scalar,
    MAP_STATISTIC_ITEM: _decode_map,
    RING_STATISTIC_ITEM: _decode_ring,
}


def decode_statistic(envelope: StatisticEnvelope) -> StatisticRecord | None:
    """Decode one envelope, or return None when its type tag is not recognized."""
    decoder = STATISTIC_DECODERS.get(envelope.type)
    if decoder is None:
        logger.debug(f"Skipping statistic '{envelope.name}' with unrecognized type '{envelope.type}'")
        return None
    return decoder(envelope)


def classify_statistics(envelopes: list[StatisticEnvelope]) -> ClassifiedStatistics:
    """Partition envelopes into scalar, map and ring records, preserving source order.

    Raises:
        StatisticParseException: a value of a recognized statistic is not numeric.
    """
    classified = ClassifiedStatistics()
    for envelope in envelopes:
        record = decode_statistic(envelope)
        if isinstance(record, ScalarRecord):
            classified.scalars.append(record)
        elif isinstance(record, MapRecord):
            classified.maps.append(record)
        elif isinstance(record, RingRecord):
            classified.rings.append(record)
    return classified
