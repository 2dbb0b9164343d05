"""Flatten typed statistic records into counter samples."""

from __future__ import annotations

from prometheus_client.core import CounterMetricFamily

from pdns_exporter.models.statistics_models import ClassifiedStatistics, OutputMetric
from pdns_exporter.telemetry.metric_registry import HELP_TEMPLATE, MAP_ENTRY_HELP_TEMPLATE
from pdns_exporter.telemetry.naming import map_metric_name, scalar_metric_name
from pdns_exporter.utils.exceptions import MetricNameException


def emit_metrics(statistics: ClassifiedStatistics) -> list[OutputMetric]:
    """One counter per scalar record, then one per map entry, all in source order.

    Ring records are decoded upstream but not exported.
    """
    metrics: list[OutputMetric] = [
        OutputMetric(
            name=scalar_metric_name(record.name),
            value=record.value,
            documentation=HELP_TEMPLATE.format(name=record.name),
        )
        for record in statistics.scalars
    ]

    for record in statistics.maps:
        for entry in record.entries:
            metrics.append(
                OutputMetric(
                    name=map_metric_name(record.name, entry.name),
                    value=entry.value,
                    documentation=MAP_ENTRY_HELP_TEMPLATE.format(name=record.name, entry=entry.name),
                )
            )

    return metrics


def build_metric_families(metrics: list[OutputMetric]) -> list[CounterMetricFamily]:
    """Convert output metrics into prometheus_client metric families.

    Raises:
        MetricNameException: a name is not a valid Prometheus metric name, or two
            statistics format to the same name.
    """
    families: list[CounterMetricFamily] = []
    seen: set[str] = set()
    for metric in metrics:
        try:
            family = CounterMetricFamily(metric.name, metric.documentation, value=metric.value)
        except ValueError as e:
            raise MetricNameException(f"Invalid metric name '{metric.name}': {e}") from e
        # family names drop a trailing _total, so compare those
        if family.name in seen:
            raise MetricNameException(f"Duplicate metric name '{family.name}'")
        seen.add(family.name)
        families.append(family)
    return families
