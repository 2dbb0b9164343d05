"""Decode the raw statistics response into untyped envelopes."""

from __future__ import annotations

from pydantic import TypeAdapter, ValidationError

from pdns_exporter.models.statistics_models import StatisticEnvelope
from pdns_exporter.utils.exceptions import EnvelopeDecodeException

_ENVELOPES_ADAPTER = TypeAdapter(list[StatisticEnvelope])


def decode_envelopes(content: bytes | str) -> list[StatisticEnvelope]:
    """Parse a JSON array of statistics, keeping each ``value`` undecoded.

    Raises:
        EnvelopeDecodeException: the body is not valid JSON or not an array of objects.
    """
    try:
        return _ENVELOPES_ADAPTER.validate_json(content)
    except ValidationError as e:
        raise EnvelopeDecodeException(f"Failed to decode statistics JSON: {e}") from e
