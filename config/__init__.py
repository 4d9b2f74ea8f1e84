"""Configuration package"""
from .settings import (
    Settings,
    LoggingConfig,
    MarketDataConfig,
    settings,
    get_settings,
    get_logging_config,
    get_market_data_config,
    get_display_symbols,
    get_display_pairs,
    build_market_url,
)

__all__ = [
    'Settings',
    'LoggingConfig',
    'MarketDataConfig',
    'settings',
    'get_settings',
    'get_logging_config',
    'get_market_data_config',
    'get_display_symbols',
    'get_display_pairs',
    'build_market_url',
]
