"""Prometheus exporter for the PowerDNS Authoritative statistics API."""

__version__ = "0.1.0"
