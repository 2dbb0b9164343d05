from pdns_exporter.telemetry.emitter import build_metric_families, emit_metrics
from pdns_exporter.telemetry.naming import format_map_entry_name, map_metric_name, scalar_metric_name

__all__ = [
    "build_metric_families",
    "emit_metrics",
    "format_map_entry_name",
    "map_metric_name",
    "scalar_metric_name",
]
