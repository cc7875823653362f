"""
Configuration management for Binance Python SDK

This module provides base-address resolution and the shared transport
settings used by every generated client.
"""

from .api_config import (
    ApiMode,
    TransportConfig,
    BinanceApiConfig,
    DEFAULT_BASE_DOMAIN,
    DEFAULT_TESTNET_BASE_URL,
    load_api_config_from_env,
    load_api_config_from_json,
    load_api_config_from_file,
)

__all__ = [
    'ApiMode',
    'TransportConfig',
    'BinanceApiConfig',
    'DEFAULT_BASE_DOMAIN',
    'DEFAULT_TESTNET_BASE_URL',
    'load_api_config_from_env',
    'load_api_config_from_json',
    'load_api_config_from_file',
]
