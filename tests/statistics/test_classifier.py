"""Behavioral tests for routing envelopes to typed records."""

import pytest

from pdns_exporter.models.statistics_models import (
    MapRecord,
    RingRecord,
    ScalarRecord,
    StatisticEnvelope,
)
from pdns_exporter.statistics.classifier import (
    STATISTIC_DECODERS,
    classify_statistics,
    decode_statistic,
    parse_statistic_value,
)
from pdns_exporter.statistics.decoder import decode_envelopes
from pdns_exporter.utils.exceptions import StatisticParseException


def _envelope(**kwargs) -> StatisticEnvelope:
    return StatisticEnvelope.model_validate(kwargs)


class TestParseStatisticValue:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("12345", 12345.0),
            ("0", 0.0),
            ("-3", -3.0),
            ("1.5", 1.5),
            ("1e3", 1000.0),
        ],
    )
    def test_numeric_strings(self, raw, expected):
        assert parse_statistic_value("uptime", raw) == expected

    def test_infinity(self):
        assert parse_statistic_value("uptime", "+Inf") == float("inf")

    @pytest.mark.parametrize("raw", ["abc", "", " 1", "1 ", "1_000", "0x10"])
    def test_rejects_non_numeric_strings(self, raw):
        with pytest.raises(StatisticParseException) as exc_info:
            parse_statistic_value("uptime", raw)
        assert exc_info.value.statistic_name == "uptime"
        assert exc_info.value.raw_value == raw

    @pytest.mark.parametrize("raw", [12345, 1.5, None, ["1"], {"value": "1"}])
    def test_rejects_non_string_values(self, raw):
        with pytest.raises(StatisticParseException):
            parse_statistic_value("uptime", raw)


class TestClassifyStatistics:
    def test_partitions_by_type_in_source_order(self, statistics_payload):
        classified = classify_statistics(decode_envelopes(statistics_payload))

        assert [r.name for r in classified.scalars] == ["corrupt-packets", "uptime", "udp-queries"]
        assert [r.value for r in classified.scalars] == [0.0, 12345.0, 987.0]
        assert [r.name for r in classified.maps] == ["response-by-qtype", "query-types"]
        assert [r.name for r in classified.rings] == ["logmessages"]

    def test_map_entries_keep_source_order(self, statistics_payload):
        classified = classify_statistics(decode_envelopes(statistics_payload))

        qtypes = classified.maps[0]
        assert [(e.name, e.value) for e in qtypes.entries] == [("A", 120.0), ("AAAA", 34.0)]

    def test_ring_record_captures_size(self, statistics_payload):
        classified = classify_statistics(decode_envelopes(statistics_payload))

        ring = classified.rings[0]
        assert isinstance(ring, RingRecord)
        assert ring.size == "10000"
        assert ring.entries[0].name == "Query for example.com. failed"
        assert ring.entries[0].value == 3.0

    def test_unknown_and_missing_types_are_dropped(self):
        envelopes = [
            _envelope(name="future", type="FutureItem", value="abc"),
            _envelope(name="no-type", value="1"),
            _envelope(name="uptime", type="StatisticItem", value="7"),
        ]

        classified = classify_statistics(envelopes)

        assert [r.name for r in classified.scalars] == ["uptime"]
        assert classified.maps == []
        assert classified.rings == []

    def test_bad_scalar_value_aborts(self):
        envelopes = [
            _envelope(name="uptime", type="StatisticItem", value="12"),
            _envelope(name="corrupt-packets", type="StatisticItem", value="abc"),
        ]

        with pytest.raises(StatisticParseException, match="corrupt-packets"):
            classify_statistics(envelopes)

    def test_missing_scalar_value_aborts(self):
        with pytest.raises(StatisticParseException):
            classify_statistics([_envelope(name="uptime", type="StatisticItem")])

    def test_bad_map_entry_value_aborts(self):
        envelope = _envelope(
            name="query-types",
            type="MapStatisticItem",
            value=[{"name": "A", "value": "1"}, {"name": "MX", "value": "many"}],
        )

        with pytest.raises(StatisticParseException, match="query-types/MX"):
            classify_statistics([envelope])

    def test_bad_ring_entry_value_aborts(self):
        envelope = _envelope(
            name="remotes",
            type="RingStatisticItem",
            size="100",
            value=[{"name": "192.0.2.1", "value": "x"}],
        )

        with pytest.raises(StatisticParseException):
            classify_statistics([envelope])

    def test_map_entry_that_is_not_an_object_aborts(self):
        envelope = _envelope(name="query-types", type="MapStatisticItem", value=["A"])

        with pytest.raises(StatisticParseException):
            classify_statistics([envelope])

    @pytest.mark.parametrize("value", [None, "10", {"name": "A", "value": "1"}])
    def test_map_without_list_value_is_empty(self, value):
        classified = classify_statistics([_envelope(name="query-types", type="MapStatisticItem", value=value)])

        assert len(classified.maps) == 1
        assert classified.maps[0].entries == []

    def test_map_entry_without_name(self):
        classified = classify_statistics(
            [_envelope(name="query-types", type="MapStatisticItem", value=[{"value": "4"}])]
        )
        assert classified.maps[0].entries[0].name == ""
        assert classified.maps[0].entries[0].value == 4.0

    def test_ring_without_size(self):
        classified = classify_statistics([_envelope(name="remotes", type="RingStatisticItem", value=[])])
        assert classified.rings[0].size == ""


class TestDecodeStatistic:
    def test_registered_tags(self):
        assert set(STATISTIC_DECODERS) == {"StatisticItem", "MapStatisticItem", "RingStatisticItem"}

    def test_returns_typed_variant(self):
        assert isinstance(decode_statistic(_envelope(name="a", type="StatisticItem", value="1")), ScalarRecord)
        assert isinstance(decode_statistic(_envelope(name="b", type="MapStatisticItem", value=[])), MapRecord)
        assert isinstance(decode_statistic(_envelope(name="c", type="RingStatisticItem", value=[])), RingRecord)

    def test_unrecognized_returns_none(self):
        assert decode_statistic(_envelope(name="x", type="FutureItem", value="1")) is None

    def test_type_tag_is_case_sensitive(self):
        assert decode_statistic(_envelope(name="x", type="statisticitem", value="1")) is None


def test_null_envelope_fields_do_not_stop_other_statistics():
    classified = classify_statistics(
        decode_envelopes(
            b'[{"name":null,"type":null,"value":"1"},'
            b'{"name":"uptime","type":"StatisticItem","value":"5","size":null},'
            b'{"name":"query-types","type":"MapStatisticItem","value":[{"name":null,"value":"2"}]}]'
        )
    )

    assert [(r.name, r.value) for r in classified.scalars] == [("uptime", 5.0)]
    assert classified.maps[0].entries[0].name == ""
    assert classified.maps[0].entries[0].value == 2.0
