"""
Type definitions for request signing functionality
"""

from enum import Enum
from typing import Any, Callable, Dict, Optional

from requests.models import PreparedRequest

# Internal marker naming an endpoint's security type; never sent on the wire
SECURITY_TYPE_HEADER = "X-SDK-Endpoint-Security"

API_KEY_HEADER = "X-MBX-APIKEY"

SIGNATURE_PARAM = "signature"

RequestTransform = Callable[[PreparedRequest], PreparedRequest]


class SecurityType(str, Enum):
    """Authentication an endpoint requires"""
    NONE = "NONE"
    API_KEY = "API_KEY"        # API key header only
    SIGNED = "SIGNED"          # API key header plus HMAC signature of the query


class SigningError(Exception):
    """
    Error class for signing operations

    Attributes:
        message: Error message
        code: Error code for programmatic handling
        details: Optional additional error details
    """

    def __init__(
        self,
        message: str,
        code: str,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (code: {self.code}, details: {self.details})"
        return f"{self.message} (code: {self.code})"

    def __repr__(self) -> str:
        return f"SigningError(message='{self.message}', code='{self.code}', details={self.details})"


class SigningErrorCodes:
    """Standard error codes for signing operations"""

    INVALID_CONFIG = "INVALID_CONFIG"
    INVALID_SECURITY_TYPE = "INVALID_SECURITY_TYPE"
    SIGNING_FAILED = "SIGNING_FAILED"
