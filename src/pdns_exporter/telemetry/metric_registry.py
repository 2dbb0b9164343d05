"""Metric namespaces and the exporter's own Prometheus metrics.

Exporter health metrics live on a dedicated CollectorRegistry so they never
mix with the statistics scraped from PowerDNS (and not python_gc_*, process_*, etc.).
"""

from __future__ import annotations

from prometheus_client import CollectorRegistry, Counter, Histogram

# Namespace of metrics derived from scalar statistics
STATISTIC_PREFIX = "pdns_auth"
# Namespace of metrics derived from map statistic entries
MAP_STATISTIC_PREFIX = "pdns_auth_map"

HELP_TEMPLATE = "See PowerDNS statistic '{name}'."
MAP_ENTRY_HELP_TEMPLATE = "See PowerDNS statistic '{name}' entry '{entry}'."

EXPORTER_PREFIX = "pdns_exporter_"

EXPORTER_REGISTRY = CollectorRegistry()

SCRAPES_TOTAL = Counter(
    f"{EXPORTER_PREFIX}scrapes_total",
    "Total scrape cycles of the PowerDNS statistics endpoint",
    labelnames=["status"],
    registry=EXPORTER_REGISTRY,
)

SCRAPE_DURATION_SECONDS = Histogram(
    f"{EXPORTER_PREFIX}scrape_duration_seconds",
    "Duration of a full scrape cycle in seconds",
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
    registry=EXPORTER_REGISTRY,
)
