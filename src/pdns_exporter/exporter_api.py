"""HTTP surface of the exporter.

Every GET /metrics runs exactly one scrape cycle. A failed cycle answers 503
and the server keeps serving later requests.
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse, Response
from loguru import logger
from prometheus_client import CONTENT_TYPE_LATEST

from pdns_exporter.collector import PowerDNSCollector
from pdns_exporter.utils.exceptions import ScrapeException

METRICS_PATH = "/metrics"

_LANDING_PAGE = f"""<html>
<head><title>PowerDNS Exporter</title></head>
<body>
<h1>PowerDNS Exporter</h1>
<p><a href="{METRICS_PATH}">Metrics</a></p>
</body>
</html>
"""


def create_app(collector: PowerDNSCollector) -> FastAPI:
    app = FastAPI(title="PowerDNS Authoritative Exporter")
    app.state.collector = collector

    @app.get("/", response_class=HTMLResponse)
    async def index() -> str:
        return _LANDING_PAGE

    @app.get(METRICS_PATH)
    async def metrics(request: Request) -> Response:
        try:
            body = await request.app.state.collector.collect()
        except ScrapeException as e:
            logger.error(f"Scrape failed: {e}")
            raise HTTPException(status_code=503, detail=str(e))
        return Response(content=body, media_type=CONTENT_TYPE_LATEST)

    @app.get("/health")
    async def health() -> Dict[str, Any]:
        return {"ok": True}

    return app


def start_exporter_server(collector: PowerDNSCollector, host: str, port: int, log_level: str = "warning") -> None:
    """
    Blocking runner; returns when uvicorn shuts down.
    """
    import uvicorn

    logger.info(f"✅ Serving PowerDNS metrics on http://{host}:{port}{METRICS_PATH}")
    uvicorn.run(create_app(collector), host=host, port=port, log_level=log_level)
