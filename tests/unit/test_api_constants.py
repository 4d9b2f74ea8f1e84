"""Tests for constants/api_constants.py - API configuration constants"""

import pytest

import constants
from constants.api_constants import (
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


class TestConstants:
    def test_numeric_values(self):
        assert TIMEOUT == 30000
        assert RETRY_DELAY == 5000
        assert MAX_RETRIES == 3
        assert REFRESH_INTERVAL == 10000
        assert DEFAULT_DISPLAY_COUNT == 9

    def test_api_config_mapping(self):
        assert dict(API_CONFIG) == {
            "TIMEOUT": 30000,
            "RETRY_DELAY": 5000,
            "MAX_RETRIES": 3,
            "REFRESH_INTERVAL": 10000,
        }

    def test_api_config_read_only(self):
        with pytest.raises(TypeError):
            API_CONFIG["TIMEOUT"] = 1
        assert API_CONFIG["TIMEOUT"] == 30000

    def test_base_url(self):
        assert BINANCE_API_URL == "https://api.binance.com/api/v3"

    def test_headers(self):
        assert dict(API_HEADERS) == {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    def test_headers_read_only(self):
        with pytest.raises(TypeError):
            API_HEADERS["Accept"] = "text/html"

    def test_package_reexports(self):
        assert constants.TIMEOUT is TIMEOUT
        assert constants.API_HEADERS is API_HEADERS
        for name in constants.__all__:
            assert hasattr(constants, name)


class TestDurations:
    def test_ms_to_seconds(self):
        assert ms_to_seconds(1500) == 1.5
        assert ms_to_seconds(0) == 0.0

    def test_helpers(self):
        assert get_request_timeout_seconds() == 30.0
        assert get_retry_delay_seconds() == 5.0
        assert get_refresh_interval_seconds() == 10.0


class TestBuildRequestHeaders:
    def test_defaults(self):
        assert build_request_headers() == dict(API_HEADERS)

    def test_extra_overrides(self):
        headers = build_request_headers({"Accept": "text/plain", "X-MBX-APIKEY": "k"})
        assert headers["Accept"] == "text/plain"
        assert headers["X-MBX-APIKEY"] == "k"
        assert headers["Content-Type"] == "application/json"

    def test_constants_unchanged(self):
        headers = build_request_headers({"Accept": "text/plain"})
        headers["Content-Type"] = "text/csv"
        assert API_HEADERS["Accept"] == "application/json"
        assert API_HEADERS["Content-Type"] == "application/json"
        assert len(API_HEADERS) == 2


class TestBuildApiUrl:
    def test_path(self):
        assert build_api_url("ticker/24hr") == "https://api.binance.com/api/v3/ticker/24hr"

    def test_leading_slash(self):
        assert build_api_url("/ticker/price") == "https://api.binance.com/api/v3/ticker/price"

    def test_empty_path(self):
        assert build_api_url("") == BINANCE_API_URL

    def test_custom_base(self):
        assert build_api_url("ping", "https://testnet.binance.vision/api/v3/") == \
            "https://testnet.binance.vision/api/v3/ping"
