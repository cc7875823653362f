"""
Exception classes for Binance Python SDK
"""

from typing import Optional, Dict, Any, TYPE_CHECKING

if TYPE_CHECKING:
    from .domain.general import BinanceApiError


class BinanceSDKError(Exception):
    """Base exception for all Binance SDK errors"""

    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_code = error_code
        self.details = details or {}


class ValidationError(BinanceSDKError):
    """Exception raised for configuration and input validation failures"""
    pass


class BinanceApiException(BinanceSDKError):
    """
    Base of the two exception kinds a call execution may raise.

    Catching this class catches every failure of a remote call.
    """
    pass


class TransportError(BinanceApiException):
    """
    Raised when no usable response was obtained.

    Covers I/O failures, timeouts, signing failures and response payloads
    that could not be decoded. The low-level exception is kept in ``cause``.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None,
                 error_code: str = "TRANSPORT_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code, details)
        self.cause = cause


class ApiError(BinanceApiException):
    """Raised when the exchange answered with a well-formed error payload"""

    def __init__(self, error: 'BinanceApiError'):
        super().__init__(
            f"Binance API error {error.code}: {error.msg}",
            error_code="API_ERROR",
            details={'status': error.status, 'code': error.code}
        )
        self.error = error

    @property
    def status(self) -> int:
        return self.error.status

    @property
    def code(self) -> int:
        return self.error.code

    @property
    def msg(self) -> str:
        return self.error.msg
