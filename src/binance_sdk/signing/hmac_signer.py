"""
HMAC-SHA256 request signing for Binance API keys

The signer is a request transform: it is installed at the head of a
transport's interceptor chain and decorates every outgoing request that the
endpoint description marks as requiring an API key or a signature.
"""

import logging
from urllib.parse import urlsplit

from cryptography.hazmat.primitives import hashes, hmac
from requests.models import PreparedRequest

from .types import (
    API_KEY_HEADER,
    SECURITY_TYPE_HEADER,
    SIGNATURE_PARAM,
    RequestTransform,
    SecurityType,
    SigningError,
    SigningErrorCodes,
)

logger = logging.getLogger(__name__)


def hmac_sha256_hex(payload: str, secret: str) -> str:
    """
    Compute the lowercase hex HMAC-SHA256 of ``payload`` keyed by ``secret``.

    Raises:
        SigningError: If the digest cannot be computed
    """
    try:
        mac = hmac.HMAC(secret.encode('utf-8'), hashes.SHA256())
        mac.update(payload.encode('utf-8'))
        return mac.finalize().hex()
    except (TypeError, ValueError) as e:
        raise SigningError(
            f"Failed to compute request signature: {e}",
            SigningErrorCodes.SIGNING_FAILED,
        )


class AuthenticationInterceptor:
    """
    Adds the API key header and query signature to outgoing requests.

    One instance is bound to exactly one credential pair and is only ever
    installed on the transport of the client built for those credentials.
    """

    def __init__(self, api_key: str, secret: str):
        if not api_key or not secret:
            raise SigningError(
                "Both API key and secret are required for signing",
                SigningErrorCodes.INVALID_CONFIG,
            )
        self.api_key = api_key
        self._secret = secret

    def __call__(self, request: PreparedRequest) -> PreparedRequest:
        raw_security = request.headers.get(SECURITY_TYPE_HEADER, SecurityType.NONE.value)
        try:
            security = SecurityType(raw_security)
        except ValueError:
            raise SigningError(
                f"Unknown endpoint security type: {raw_security}",
                SigningErrorCodes.INVALID_SECURITY_TYPE,
            )

        if security is SecurityType.NONE:
            return request

        request.headers[API_KEY_HEADER] = self.api_key

        if security is SecurityType.SIGNED:
            payload = urlsplit(request.url).query
            if payload:
                signature = hmac_sha256_hex(payload, self._secret)
                request.url = f"{request.url}&{SIGNATURE_PARAM}={signature}"
                logger.debug(f"Signed {request.method} request to {urlsplit(request.url).path}")

        return request

    def __repr__(self) -> str:
        return f"AuthenticationInterceptor(api_key='{self.api_key[:4]}...')"


def create_signer(api_key: str, secret: str) -> RequestTransform:
    """
    Create a request transform authenticating with the given credentials.

    Args:
        api_key: Binance API key
        secret: Binance secret key

    Returns:
        RequestTransform: Interceptor applied to each outgoing request
    """
    return AuthenticationInterceptor(api_key, secret)
