"""
Binance Python SDK
Generated REST clients sharing one connection pool, with HMAC request signing
and rate-limit usage tracking
"""

from .version import __version__
from .exceptions import (
    BinanceSDKError,
    ValidationError,
    BinanceApiException,
    TransportError,
    ApiError,
)
from .config import (
    ApiMode,
    TransportConfig,
    BinanceApiConfig,
    load_api_config_from_env,
    load_api_config_from_json,
    load_api_config_from_file,
)
from .codec import JsonCodec, ErrorBodyDecoder, CodecError
from .domain import (
    BinanceApiError,
    RateLimitType,
    RateLimitInterval,
    RateLimitSink,
    WithRateLimits,
)
from .signing import (
    SecurityType,
    SigningError,
    create_signer,
)
from .api import (
    ApiService,
    ApiResponse,
    PendingCall,
    Endpoint,
    BinanceApiService,
)
from .http_clients import (
    TransportHandle,
    SharedTransport,
    initialize_transport,
    derive_signing_transport,
    extract_rate_limits,
    ServiceGenerator,
    execute_sync,
)

# Public API exports
__all__ = [
    '__version__',
    # Exceptions
    'BinanceSDKError',
    'ValidationError',
    'BinanceApiException',
    'TransportError',
    'ApiError',
    # Configuration
    'ApiMode',
    'TransportConfig',
    'BinanceApiConfig',
    'load_api_config_from_env',
    'load_api_config_from_json',
    'load_api_config_from_file',
    # Codec
    'JsonCodec',
    'ErrorBodyDecoder',
    'CodecError',
    # Domain
    'BinanceApiError',
    'RateLimitType',
    'RateLimitInterval',
    'RateLimitSink',
    'WithRateLimits',
    # Signing
    'SecurityType',
    'SigningError',
    'create_signer',
    # Service descriptions
    'ApiService',
    'ApiResponse',
    'PendingCall',
    'Endpoint',
    'BinanceApiService',
    # Transport and execution
    'TransportHandle',
    'SharedTransport',
    'initialize_transport',
    'derive_signing_transport',
    'extract_rate_limits',
    'ServiceGenerator',
    'execute_sync',
]
