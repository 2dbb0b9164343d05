from __future__ import annotations

import asyncio

import aiohttp
from loguru import logger

from pdns_exporter.models.statistics_models import TransportConfig
from pdns_exporter.utils.exceptions import StatisticsTransportException

API_KEY_HEADER = "X-API-Key"


class StatisticsAPIClient:
    """Fetches the raw statistics document from the PowerDNS HTTP API."""

    def __init__(self, config: TransportConfig):
        self.config = config

    @property
    def timeout(self) -> aiohttp.ClientTimeout:
        return aiohttp.ClientTimeout(
            total=self.config.request_deadline_sec,
            connect=self.config.connect_timeout_sec,
        )

    async def fetch_statistics(self) -> bytes:
        """GET the statistics endpoint once and return the body.

        No retries: any failure is reported to the caller.

        Raises:
            StatisticsTransportException: connection, read or timeout failure, or a non-200 response.
        """
        headers = {API_KEY_HEADER: self.config.api_key}
        try:
            async with aiohttp.ClientSession(timeout=self.timeout) as session:
                async with session.get(self.config.api_url, headers=headers) as r:
                    content = await r.read()
                    if r.status != 200:
                        raise StatisticsTransportException(
                            f"GET {self.config.api_url} failed {r.status}: {content[:200]!r}",
                            status=r.status,
                        )
                    return content
        except asyncio.TimeoutError as e:
            raise StatisticsTransportException(
                f"GET {self.config.api_url} timed out after {self.config.request_deadline_sec}s"
            ) from e
        except aiohttp.ClientError as e:
            logger.debug(f"Statistics request to {self.config.api_url} failed: {e!r}")
            raise StatisticsTransportException(f"GET {self.config.api_url} failed: {e}") from e
