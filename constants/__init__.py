"""
Module constants pour centraliser les constantes du projet.
"""

from .api_constants import (
    TIMEOUT,
    RETRY_DELAY,
    MAX_RETRIES,
    REFRESH_INTERVAL,
    API_CONFIG,
    BINANCE_API_URL,
    API_HEADERS,
    DEFAULT_DISPLAY_COUNT,
    ms_to_seconds,
    get_request_timeout_seconds,
    get_retry_delay_seconds,
    get_refresh_interval_seconds,
    build_request_headers,
    build_api_url,
)

from .crypto_info import (
    CryptoInfo,
    CRYPTO_INFO,
    DEFAULT_QUOTE_ASSET,
    build_crypto_table,
    get_crypto_info,
    require_crypto_info,
    is_known_symbol,
    list_symbols,
    get_default_display_symbols,
    to_display_dict,
    estimate_market_cap,
    to_binance_pair,
    from_binance_pair,
)

__all__ = [
    # API constants
    "TIMEOUT",
    "RETRY_DELAY",
    "MAX_RETRIES",
    "REFRESH_INTERVAL",
    "API_CONFIG",
    "BINANCE_API_URL",
    "API_HEADERS",
    "DEFAULT_DISPLAY_COUNT",
    "ms_to_seconds",
    "get_request_timeout_seconds",
    "get_retry_delay_seconds",
    "get_refresh_interval_seconds",
    "build_request_headers",
    "build_api_url",
    # Crypto metadata
    "CryptoInfo",
    "CRYPTO_INFO",
    "DEFAULT_QUOTE_ASSET",
    "build_crypto_table",
    "get_crypto_info",
    "require_crypto_info",
    "is_known_symbol",
    "list_symbols",
    "get_default_display_symbols",
    "to_display_dict",
    "estimate_market_cap",
    "to_binance_pair",
    "from_binance_pair",
]
