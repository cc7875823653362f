"""
HTTP client module for Binance SDK

This module provides the shared pooled transport, the client factory, the
synchronous call executor and rate-limit header harvesting.
"""

from .transport import (
    TransportHandle,
    SharedTransport,
    KeepAliveHTTPAdapter,
    initialize_transport,
    derive_signing_transport,
)
from .rate_limits import (
    RATE_LIMIT_HEADER_PREFIX,
    extract_rate_limits,
    iter_rate_limit_headers,
)
from .service_generator import (
    ServiceGenerator,
    execute_sync,
    get_binance_api_error,
)

__all__ = [
    'TransportHandle',
    'SharedTransport',
    'KeepAliveHTTPAdapter',
    'initialize_transport',
    'derive_signing_transport',
    'RATE_LIMIT_HEADER_PREFIX',
    'extract_rate_limits',
    'iter_rate_limit_headers',
    'ServiceGenerator',
    'execute_sync',
    'get_binance_api_error',
]
