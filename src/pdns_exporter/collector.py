"""One scrape cycle: fetch, decode, classify, emit and render."""

from __future__ import annotations

import time

from loguru import logger
from prometheus_client import CollectorRegistry, generate_latest
from prometheus_client.core import CounterMetricFamily
from prometheus_client.registry import Collector

from pdns_exporter.models.statistics_models import OutputMetric
from pdns_exporter.statistics.classifier import classify_statistics
from pdns_exporter.statistics.decoder import decode_envelopes
from pdns_exporter.statistics_api_client import StatisticsAPIClient
from pdns_exporter.telemetry.emitter import build_metric_families, emit_metrics
from pdns_exporter.telemetry.metric_registry import (
    EXPORTER_REGISTRY,
    SCRAPE_DURATION_SECONDS,
    SCRAPES_TOTAL,
)
from pdns_exporter.utils.exceptions import ScrapeException


class _ScrapedFamilies(Collector):
    """Hands a fixed list of metric families to a CollectorRegistry."""

    def __init__(self, families: list[CounterMetricFamily]):
        self._families = families

    def collect(self):
        return iter(self._families)


def render_metrics(metrics: list[OutputMetric]) -> bytes:
    """Render output metrics in the Prometheus text exposition format.

    Uses a throwaway registry so nothing from this cycle outlives it.
    """
    registry = CollectorRegistry(auto_describe=False)
    registry.register(_ScrapedFamilies(build_metric_families(metrics)))
    return generate_latest(registry)


class PowerDNSCollector:
    """Runs a full scrape of the PowerDNS statistics endpoint per call.

    Holds no per-scrape state; concurrent calls never share records.
    """

    def __init__(self, api_client: StatisticsAPIClient):
        self.api_client = api_client

    async def scrape(self) -> list[OutputMetric]:
        """Fetch and flatten the statistics.

        Raises:
            ScrapeException: the whole cycle failed; no partial result is returned.
        """
        content = await self.api_client.fetch_statistics()
        envelopes = decode_envelopes(content)
        statistics = classify_statistics(envelopes)
        metrics = emit_metrics(statistics)
        logger.debug(
            f"Scraped {len(envelopes)} statistics: {len(statistics.scalars)} scalar, "
            f"{len(statistics.maps)} map, {len(statistics.rings)} ring -> {len(metrics)} metrics"
        )
        return metrics

    async def collect(self) -> bytes:
        """Scrape once and return the exposition text, including exporter health metrics."""
        start = time.perf_counter()
        try:
            body = render_metrics(await self.scrape())
        except ScrapeException:
            SCRAPES_TOTAL.labels(status="error").inc()
            raise
        finally:
            SCRAPE_DURATION_SECONDS.observe(time.perf_counter() - start)
        SCRAPES_TOTAL.labels(status="success").inc()
        return body + generate_latest(EXPORTER_REGISTRY)
