from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Sequence

from loguru import logger

from pdns_exporter import settings
from pdns_exporter.collector import PowerDNSCollector
from pdns_exporter.exporter_api import start_exporter_server
from pdns_exporter.models.statistics_models import TransportConfig
from pdns_exporter.statistics_api_client import StatisticsAPIClient
from pdns_exporter.utils.exceptions import ScrapeException

DEFAULT_BIND_HOST = "0.0.0.0"


def parse_listen_address(address: str) -> tuple[str, int]:
    """Split ``host:port`` (or ``:port``) into a bind host and port."""
    host, sep, port = address.rpartition(":")
    if not sep or not port.isdigit() or not 0 < int(port) < 65536:
        raise ValueError(f"Invalid listen address '{address}', expected host:port")
    host = host.strip("[]") or DEFAULT_BIND_HOST
    return host, int(port)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pdns-exporter",
        description="Export PowerDNS Authoritative statistics as Prometheus metrics.",
        epilog=(
            "Counters are exposed with a _total suffix (pdns_auth_uptime_total, "
            "pdns_auth_map_query_types_arecord_total); queries written for exporters "
            "without the suffix need updating."
        ),
    )
    parser.add_argument(
        "--listen-address",
        default=settings.LISTEN_ADDRESS,
        help="Address to listen on for incoming connections (default: %(default)s).",
    )
    parser.add_argument(
        "--api-url",
        default=settings.API_URL,
        help="PowerDNS statistics endpoint URL (default: %(default)s).",
    )
    parser.add_argument(
        "--api-key",
        default=settings.API_KEY,
        help="PowerDNS API key.",
    )
    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        help="Log level (default: %(default)s).",
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Scrape once, print the metrics to stdout and exit.",
    )
    return parser


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level.upper())


def build_collector(args: argparse.Namespace) -> PowerDNSCollector:
    config = TransportConfig(
        api_url=args.api_url,
        api_key=args.api_key,
        connect_timeout_sec=settings.CONNECT_TIMEOUT_SEC,
        request_deadline_sec=settings.REQUEST_DEADLINE_SEC,
    )
    return PowerDNSCollector(StatisticsAPIClient(config))


def run_once(collector: PowerDNSCollector) -> int:
    try:
        body = asyncio.run(collector.collect())
    except ScrapeException as e:
        logger.error(f"Scrape failed: {e}")
        return 1
    sys.stdout.write(body.decode("utf-8"))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        host, port = parse_listen_address(args.listen_address)
    except ValueError as e:
        parser.error(str(e))

    collector = build_collector(args)
    if args.once:
        return run_once(collector)

    logger.info(f"🔄 Scraping PowerDNS statistics from {args.api_url}")
    start_exporter_server(collector, host=host, port=port)
    return 0
