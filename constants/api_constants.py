"""
API constants shared by the HTTP client and the UI layer.

Durations are expressed in milliseconds; the ``*_seconds`` helpers convert
them for Python HTTP libraries (httpx, requests) which take seconds.
"""

from types import MappingProxyType
from typing import Dict, Mapping, Optional

# API Configuration
TIMEOUT = 30000           # ms
RETRY_DELAY = 5000        # ms
MAX_RETRIES = 3
REFRESH_INTERVAL = 10000  # ms

API_CONFIG: Mapping[str, int] = MappingProxyType({
    'TIMEOUT': TIMEOUT,
    'RETRY_DELAY': RETRY_DELAY,
    'MAX_RETRIES': MAX_RETRIES,
    'REFRESH_INTERVAL': REFRESH_INTERVAL,
})

BINANCE_API_URL = "https://api.binance.com/api/v3"

API_HEADERS: Mapping[str, str] = MappingProxyType({
    'Accept': 'application/json',
    'Content-Type': 'application/json',
})

# Number of coins shown on the dashboard
DEFAULT_DISPLAY_COUNT = 9


def ms_to_seconds(value_ms: int) -> float:
    """Convert a millisecond duration to seconds."""
    return value_ms / 1000.0


def get_request_timeout_seconds() -> float:
    return ms_to_seconds(TIMEOUT)


def get_retry_delay_seconds() -> float:
    return ms_to_seconds(RETRY_DELAY)


def get_refresh_interval_seconds() -> float:
    return ms_to_seconds(REFRESH_INTERVAL)


def build_request_headers(extra: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """
    Retourne une copie modifiable des headers par défaut.

    Args:
        extra: Headers additionnels, prioritaires sur les valeurs par défaut

    Returns:
        Nouveau dict; API_HEADERS n'est jamais modifié
    """
    headers = dict(API_HEADERS)
    if extra:
        headers.update(extra)
    return headers


def build_api_url(path: str, base_url: str = BINANCE_API_URL) -> str:
    """Join ``base_url`` and an endpoint path with a single slash."""
    base = base_url.rstrip("/")
    path = (path or "").strip()
    if not path:
        return base
    return f"{base}/{path.lstrip('/')}"
