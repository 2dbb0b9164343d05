"""Pure functions turning PowerDNS statistic names into metric names."""

from __future__ import annotations

from pdns_exporter.telemetry.metric_registry import MAP_STATISTIC_PREFIX, STATISTIC_PREFIX


def format_map_entry_name(entry_name: str) -> str:
    """``"A Record"`` -> ``"arecord"``, ``"Serv-Fail"`` -> ``"serv_fail"``."""
    return entry_name.lower().replace(" ", "").replace("-", "_")


def scalar_metric_name(name: str) -> str:
    return f"{STATISTIC_PREFIX}_{name.replace('-', '_')}"


def map_metric_name(name: str, entry_name: str) -> str:
    return f"{MAP_STATISTIC_PREFIX}_{name.replace('-', '_')}_{format_map_entry_name(entry_name)}"
