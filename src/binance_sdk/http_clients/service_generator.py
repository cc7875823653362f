"""
Generation of Binance API clients and synchronous call execution

``ServiceGenerator`` owns the shared transport and the codec. Every client it
creates is bound to the shared transport, or, when built with credentials, to
a signing transport derived from it that reuses the same connection pool.
``execute_sync`` runs a pending call and translates every failure into
``TransportError`` or ``ApiError``.
"""

import logging
from typing import Optional, Type, TypeVar

import requests

from ..api.call import PendingCall, describe
from ..api.service import ApiService
from ..codec import CodecError, JsonCodec
from ..config.api_config import ApiMode, BinanceApiConfig, TransportConfig
from ..domain.general import BinanceApiError
from ..exceptions import ApiError, TransportError, ValidationError
from ..signing.hmac_signer import create_signer
from ..signing.types import SigningError
from .rate_limits import extract_rate_limits
from .transport import SharedTransport, TransportHandle, derive_signing_transport

logger = logging.getLogger(__name__)

S = TypeVar('S', bound=ApiService)
T = TypeVar('T')


class ServiceGenerator:
    """
    Factory of Binance API clients sharing one connection pool.

    Safe to use from many threads: the shared transport is created once on
    first use, and each signed client gets its own interceptor bound to its
    own credentials.
    """

    def __init__(
        self,
        api_config: Optional[BinanceApiConfig] = None,
        transport_config: Optional[TransportConfig] = None,
        codec: Optional[JsonCodec] = None,
        shared_transport: Optional[SharedTransport] = None,
        strict_credentials: bool = False
    ):
        """
        Initialize the generator.

        Args:
            api_config: Base-address configuration
            transport_config: Pool settings; ignored if ``shared_transport`` is given
            codec: Codec bound to every client
            shared_transport: Existing shared transport to reuse
            strict_credentials: Reject partial credentials instead of
                falling back to an unauthenticated client
        """
        self.api_config = api_config or BinanceApiConfig()
        self.codec = codec or JsonCodec()
        self.shared_transport = shared_transport or SharedTransport(transport_config)
        self.strict_credentials = strict_credentials

        logger.info(f"Service generator initialized for {self.api_config.mode.value} network")

    @property
    def base_url(self) -> str:
        return self.api_config.get_base_url()

    def get_shared_transport(self) -> TransportHandle:
        """The transport used by all unauthenticated clients"""
        return self.shared_transport.get()

    def create_service(
        self,
        service_class: Type[S],
        api_key: Optional[str] = None,
        secret: Optional[str] = None,
        mode: Optional[ApiMode] = None
    ) -> S:
        """
        Create a client implementing ``service_class``.

        Args:
            service_class: Service description to instantiate
            api_key: Binance API key
            secret: Binance secret
            mode: Network override; defaults to the configured network

        Returns:
            A new client bound to the resolved base URL, a transport and the codec

        Raises:
            ValidationError: For partial credentials when ``strict_credentials`` is set
        """
        base_url = self.api_config.get_base_url(mode)
        transport = self.get_shared_transport()

        if api_key and secret:
            transport = derive_signing_transport(transport, create_signer(api_key, secret))
            logger.debug(f"Created signed {service_class.__name__} for {base_url}")
        elif api_key or secret:
            if self.strict_credentials:
                raise ValidationError(
                    "Both API key and secret must be provided",
                    "PARTIAL_CREDENTIALS"
                )
            logger.warning(
                f"Partial credentials for {service_class.__name__}; creating an unauthenticated client"
            )
        else:
            logger.debug(f"Created unauthenticated {service_class.__name__} for {base_url}")

        return service_class(base_url, transport, self.codec)

    def execute(self, call: PendingCall[T]) -> T:
        """Execute ``call`` with this generator's error decoder"""
        return execute_sync(call, self.codec)

    def close(self) -> None:
        """Close the shared transport; clients created earlier stop working"""
        self.shared_transport.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def get_binance_api_error(response: requests.Response, codec: JsonCodec) -> BinanceApiError:
    """
    Decode the error payload of an unsuccessful response.

    Raises:
        CodecError: If the payload is not a Binance error object
    """
    return codec.error_decoder(response.content, status=response.status_code)


def execute_sync(call: PendingCall[T], codec: Optional[JsonCodec] = None) -> T:
    """
    Execute a REST call and block until the response is received.

    On success the rate-limit headers are copied into the body before it is
    returned. A call is never retried.

    Args:
        call: Pending call to execute
        codec: Codec whose error decoder parses error payloads; defaults to
            the codec the call was built with

    Returns:
        The decoded success body

    Raises:
        TransportError: No response, unsignable request or undecodable payload
        ApiError: The exchange returned a well-formed error payload
    """
    codec = codec or call.codec
    try:
        response = call.execute()
    except requests.RequestException as e:
        raise TransportError(f"{describe(call)} failed: {e}", cause=e) from e
    except SigningError as e:
        raise TransportError(f"{describe(call)} could not be signed: {e}", cause=e, error_code="SIGNING_ERROR") from e
    except CodecError as e:
        raise TransportError(f"{describe(call)} returned an undecodable body: {e}", cause=e,
                             error_code="DECODE_ERROR") from e

    if response.is_successful:
        extract_rate_limits(response)
        return response.body

    try:
        api_error = get_binance_api_error(response.raw, codec)
    except CodecError as e:
        raise TransportError(
            f"{describe(call)} returned HTTP {response.status_code} with an undecodable error body",
            cause=e,
            error_code="DECODE_ERROR",
            details={'status': response.status_code},
        ) from e
    raise ApiError(api_error)
