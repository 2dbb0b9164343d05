import json

import pytest

STATISTICS = [
    {"name": "corrupt-packets", "type": "StatisticItem", "value": "0"},
    {"name": "uptime", "type": "StatisticItem", "value": "12345"},
    {
        "name": "response-by-qtype",
        "type": "MapStatisticItem",
        "value": [
            {"name": "A", "value": "120"},
            {"name": "AAAA", "value": "34"},
        ],
    },
    {
        "name": "query-types",
        "type": "MapStatisticItem",
        "value": [{"name": "A Record", "value": "10"}],
    },
    {
        "name": "logmessages",
        "size": "10000",
        "type": "RingStatisticItem",
        "value": [{"name": "Query for example.com. failed", "value": "3"}],
    },
    {"name": "udp-queries", "type": "StatisticItem", "value": "987"},
]


@pytest.fixture
def statistics_payload() -> bytes:
    return json.dumps(STATISTICS).encode()
