"""
Declarative service descriptions

A service is a subclass of ``ApiService`` whose class attributes are
``Endpoint`` descriptors. Accessing an endpoint on a bound service instance
returns a callable that turns keyword arguments into a ``PendingCall``::

    class PingService(ApiService):
        ping = get("/api/v3/ping", returns=dict)

    call = service.ping()
"""

import re
import time
from typing import TYPE_CHECKING, Any, Dict, Optional

import requests

from ..signing.types import SECURITY_TYPE_HEADER, SecurityType
from .call import PendingCall

if TYPE_CHECKING:
    from ..codec import JsonCodec
    from ..http_clients.transport import TransportHandle

# Receiving window applied to signed endpoints when the caller passes none
DEFAULT_RECEIVING_WINDOW = 60_000

_PATH_PARAM = re.compile(r"\{(\w+)\}")


def to_camel_case(name: str) -> str:
    """``new_client_order_id`` -> ``newClientOrderId``; camelCase passes through"""
    head, *rest = name.split('_')
    return head + ''.join(part[:1].upper() + part[1:] for part in rest)


class Endpoint:
    """
    Description of one remote operation.

    Attributes:
        method: HTTP method
        path: Path template relative to the base URL; ``{name}`` segments are
            filled from keyword arguments of the same name
        returns: Success body type understood by ``JsonCodec``
        security: Authentication the endpoint requires
    """

    def __init__(
        self,
        method: str,
        path: str,
        returns: Any = None,
        security: SecurityType = SecurityType.NONE
    ):
        self.method = method.upper()
        self.path = path
        self.returns = returns
        self.security = SecurityType(security)
        self.name: Optional[str] = None

    def __set_name__(self, owner, name):
        self.name = name

    def __get__(self, instance, owner):
        if instance is None:
            return self
        return BoundEndpoint(self, instance)

    def build_request(self, base_url: str, codec: 'JsonCodec', params: Dict[str, Any]) -> requests.Request:
        """Build the unsent request for a call with ``params``"""
        params = {to_camel_case(name): value for name, value in params.items()}

        path = self.path
        for name in _PATH_PARAM.findall(self.path):
            if name not in params:
                raise TypeError(f"{self.name}() missing path parameter '{name}'")
            path = path.replace(f"{{{name}}}", codec.encode_value(params.pop(name)))

        if self.security is SecurityType.SIGNED:
            params.setdefault('recvWindow', DEFAULT_RECEIVING_WINDOW)
            params.setdefault('timestamp', int(time.time() * 1000))

        headers = {}
        if self.security is not SecurityType.NONE:
            headers[SECURITY_TYPE_HEADER] = self.security.value

        return requests.Request(
            method=self.method,
            url=base_url.rstrip('/') + path,
            headers=headers,
            params=codec.encode_params(params),
        )

    def __repr__(self) -> str:
        return f"Endpoint({self.method} {self.path}, security={self.security.value})"


class BoundEndpoint:
    """An endpoint attached to a service instance"""

    def __init__(self, endpoint: Endpoint, service: 'ApiService'):
        self.endpoint = endpoint
        self.service = service

    def __call__(self, **params: Any) -> PendingCall:
        request = self.endpoint.build_request(self.service.base_url, self.service.codec, params)
        return PendingCall(self.endpoint, request, self.service.transport, self.service.codec)


def get(path: str, returns: Any = None, security: SecurityType = SecurityType.NONE) -> Endpoint:
    return Endpoint("GET", path, returns, security)


def post(path: str, returns: Any = None, security: SecurityType = SecurityType.NONE) -> Endpoint:
    return Endpoint("POST", path, returns, security)


def put(path: str, returns: Any = None, security: SecurityType = SecurityType.NONE) -> Endpoint:
    return Endpoint("PUT", path, returns, security)


def delete(path: str, returns: Any = None, security: SecurityType = SecurityType.NONE) -> Endpoint:
    return Endpoint("DELETE", path, returns, security)


class ApiService:
    """
    Base class of service descriptions.

    Instances are produced by ``ServiceGenerator.create_service`` and are
    bound for life to a base URL, a transport handle and a codec.
    """

    def __init__(self, base_url: str, transport: 'TransportHandle', codec: 'JsonCodec'):
        self.base_url = base_url
        self.transport = transport
        self.codec = codec

    @classmethod
    def endpoints(cls) -> Dict[str, Endpoint]:
        """All endpoints declared on the service, including inherited ones"""
        found: Dict[str, Endpoint] = {}
        for klass in reversed(cls.__mro__):
            for name, value in vars(klass).items():
                if isinstance(value, Endpoint):
                    found[name] = value
        return found

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url='{self.base_url}')"
