"""
Binance Python SDK - Request Signing Module

HMAC-SHA256 signing of API-key and signed endpoints.
"""

from .types import (
    SecurityType,
    SigningError,
    SigningErrorCodes,
    RequestTransform,
    SECURITY_TYPE_HEADER,
    API_KEY_HEADER,
    SIGNATURE_PARAM,
)

from .hmac_signer import (
    AuthenticationInterceptor,
    create_signer,
    hmac_sha256_hex,
)

__all__ = [
    'SecurityType',
    'SigningError',
    'SigningErrorCodes',
    'RequestTransform',
    'SECURITY_TYPE_HEADER',
    'API_KEY_HEADER',
    'SIGNATURE_PARAM',
    'AuthenticationInterceptor',
    'create_signer',
    'hmac_sha256_hex',
]
