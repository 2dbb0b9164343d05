import os

_ENV_PREFIX = "PDNS_EXPORTER_"


def _env(name: str, default: str) -> str:
    return os.getenv(f"{_ENV_PREFIX}{name}", default)


# Address the /metrics server binds to, in host:port form (":9120" binds all interfaces)
LISTEN_ADDRESS: str = _env("LISTEN_ADDRESS", ":9120")

# PowerDNS statistics endpoint and the key sent in the X-API-Key header
API_URL: str = _env("API_URL", "http://localhost:8081/api/v1/servers/localhost/statistics")
API_KEY: str = _env("API_KEY", "")

# Upstream transport limits
CONNECT_TIMEOUT_SEC: float = float(_env("CONNECT_TIMEOUT_SEC", "5.0"))
REQUEST_DEADLINE_SEC: float = float(_env("REQUEST_DEADLINE_SEC", "5.0"))

LOG_LEVEL: str = _env("LOG_LEVEL", "INFO")
