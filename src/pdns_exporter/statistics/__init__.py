from pdns_exporter.statistics.classifier import classify_statistics, decode_statistic, parse_statistic_value
from pdns_exporter.statistics.decoder import decode_envelopes

__all__ = ["classify_statistics", "decode_envelopes", "decode_statistic", "parse_statistic_value"]
