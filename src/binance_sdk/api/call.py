"""
Pending calls and response envelopes
"""

import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, Mapping, Optional, TypeVar

import requests

if TYPE_CHECKING:
    from ..codec import JsonCodec
    from ..http_clients.transport import TransportHandle
    from .service import Endpoint

T = TypeVar('T')


@dataclass
class ApiResponse(Generic[T]):
    """
    Decoded response of one executed call.

    Attributes:
        status_code: HTTP status code
        headers: Response headers (case-insensitive mapping)
        body: Decoded success body, None for unsuccessful responses
        raw: Underlying requests response
    """
    status_code: int
    headers: Mapping[str, str]
    body: Optional[T]
    raw: requests.Response

    @property
    def is_successful(self) -> bool:
        return 200 <= self.status_code < 300


class PendingCall(Generic[T]):
    """
    A bound, not yet executed remote invocation.

    A call is one-shot: executing it a second time is a caller error and
    raises ``RuntimeError`` without touching the network. Use ``clone()`` to
    issue the same request again.
    """

    def __init__(
        self,
        endpoint: 'Endpoint',
        request: requests.Request,
        transport: 'TransportHandle',
        codec: 'JsonCodec'
    ):
        self.endpoint = endpoint
        self.request = request
        self.transport = transport
        self.codec = codec
        self._executed = False
        self._lock = threading.Lock()

    @property
    def executed(self) -> bool:
        return self._executed

    def execute(self) -> ApiResponse[T]:
        """
        Send the request and decode a successful body.

        Raises:
            RuntimeError: If the call was already executed
            requests.RequestException: On transport failure
            SigningError: If the request could not be signed
            CodecError: If a successful body could not be decoded
        """
        with self._lock:
            if self._executed:
                raise RuntimeError("Already executed")
            self._executed = True

        raw = self.transport.send(self.request)
        response: ApiResponse[T] = ApiResponse(
            status_code=raw.status_code,
            headers=raw.headers,
            body=None,
            raw=raw,
        )
        if response.is_successful:
            response.body = self.codec.decode(raw.content, self.endpoint.returns)
        return response

    def clone(self) -> 'PendingCall[T]':
        request = requests.Request(
            method=self.request.method,
            url=self.request.url,
            headers=dict(self.request.headers),
            params=list(self.request.params),
        )
        return PendingCall(self.endpoint, request, self.transport, self.codec)

    def __repr__(self) -> str:
        return f"PendingCall({self.endpoint.method} {self.endpoint.path}, executed={self._executed})"


def describe(call: 'PendingCall[Any]') -> str:
    return f"{call.endpoint.method} {call.endpoint.path}"
