"""
Endpoint and transport configuration for the Binance Python SDK

Provides the base-address resolution used by the service generator and the
immutable connection-pool settings shared by every generated client.
"""

import json
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from ..exceptions import ValidationError

DEFAULT_BASE_DOMAIN = "binance.com"
DEFAULT_TESTNET_BASE_URL = "https://testnet.binance.vision"

_TRUTHY = {"1", "true", "yes", "on"}


class ApiMode(str, Enum):
    """Which exchange network a client talks to"""
    PRODUCTION = "production"
    TESTNET = "testnet"


@dataclass(frozen=True)
class TransportConfig:
    """
    Connection-pool settings for the shared transport.

    Attributes:
        max_requests: Maximum concurrent requests across the whole pool
        max_requests_per_host: Maximum concurrent requests to one remote host
        ping_interval: Keep-alive probe interval in seconds
        read_timeout: Read timeout in seconds
        write_timeout: Connect/send timeout in seconds
    """
    max_requests: int = 500
    max_requests_per_host: int = 500
    ping_interval: float = 20.0
    read_timeout: float = 60.0
    write_timeout: float = 60.0

    def __post_init__(self):
        """Validate transport configuration."""
        if self.max_requests <= 0:
            raise ValidationError("max_requests must be positive")

        if self.max_requests_per_host <= 0:
            raise ValidationError("max_requests_per_host must be positive")

        if self.ping_interval <= 0:
            raise ValidationError("ping_interval must be positive")

        if self.read_timeout <= 0 or self.write_timeout <= 0:
            raise ValidationError("Timeouts must be positive")


@dataclass
class BinanceApiConfig:
    """Base-address configuration for the Binance REST API."""
    base_domain: str = DEFAULT_BASE_DOMAIN
    use_testnet: bool = False
    testnet_base_url: str = DEFAULT_TESTNET_BASE_URL

    def __post_init__(self):
        if not self.base_domain:
            raise ValidationError("base_domain cannot be empty")

        if not self.testnet_base_url.startswith(("http://", "https://")):
            raise ValidationError(f"Invalid testnet URL format: {self.testnet_base_url}")

    @property
    def mode(self) -> ApiMode:
        return ApiMode.TESTNET if self.use_testnet else ApiMode.PRODUCTION

    def get_api_base_url(self) -> str:
        """REST API base URL on the production network."""
        return f"https://api.{self.base_domain}"

    def get_testnet_base_url(self) -> str:
        """REST API base URL on the test network."""
        return self.testnet_base_url.rstrip('/')

    def get_base_url(self, mode: Optional[ApiMode] = None) -> str:
        """
        Resolve the base URL for a network mode.

        Args:
            mode: Network to resolve; defaults to the configured one

        Returns:
            str: Base URL without trailing slash
        """
        mode = ApiMode(mode) if mode is not None else self.mode
        if mode is ApiMode.TESTNET:
            return self.get_testnet_base_url()
        return self.get_api_base_url()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'BinanceApiConfig':
        """Build configuration from a plain mapping, ignoring unknown keys"""
        kwargs: Dict[str, Any] = {}
        if 'base_domain' in data:
            kwargs['base_domain'] = str(data['base_domain'])
        if 'use_testnet' in data:
            kwargs['use_testnet'] = _parse_bool(data['use_testnet'])
        if 'testnet_base_url' in data:
            kwargs['testnet_base_url'] = str(data['testnet_base_url'])
        return cls(**kwargs)


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUTHY


def load_api_config_from_env(environ: Optional[Mapping[str, str]] = None) -> BinanceApiConfig:
    """
    Load API configuration from environment variables.

    Reads ``BINANCE_BASE_DOMAIN``, ``BINANCE_USE_TESTNET`` and
    ``BINANCE_TESTNET_BASE_URL``; missing variables keep their defaults.
    """
    environ = os.environ if environ is None else environ
    data: Dict[str, Any] = {}
    if environ.get('BINANCE_BASE_DOMAIN'):
        data['base_domain'] = environ['BINANCE_BASE_DOMAIN']
    if environ.get('BINANCE_USE_TESTNET'):
        data['use_testnet'] = environ['BINANCE_USE_TESTNET']
    if environ.get('BINANCE_TESTNET_BASE_URL'):
        data['testnet_base_url'] = environ['BINANCE_TESTNET_BASE_URL']
    return BinanceApiConfig.from_dict(data)


def load_api_config_from_json(json_string: str) -> BinanceApiConfig:
    """Load API configuration from a JSON object string"""
    try:
        data = json.loads(json_string)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Failed to parse configuration JSON: {e}", "PARSE_ERROR")

    if not isinstance(data, dict):
        raise ValidationError("Configuration JSON must be an object", "INVALID_FORMAT")
    return BinanceApiConfig.from_dict(data)


def load_api_config_from_file(file_path: Union[str, Path]) -> BinanceApiConfig:
    """Load API configuration from a JSON file"""
    try:
        with open(Path(file_path), 'r', encoding='utf-8') as f:
            json_string = f.read()
    except OSError as e:
        raise ValidationError(f"Failed to read configuration file: {e}", "FILE_ERROR")
    return load_api_config_from_json(json_string)
