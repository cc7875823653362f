"""
Shared HTTP transport for generated Binance clients

A single ``requests.Session`` carries the connection pools, keep-alive
settings and timeouts. Signing clients get a derived handle that reuses the
same session and concurrency limiter but runs an extra request interceptor,
so pool capacity is enforced across every client built from one base handle.
"""

import logging
import socket
import threading
from http.cookiejar import DefaultCookiePolicy
from typing import Iterable, List, Optional, Tuple

import requests
from requests.adapters import HTTPAdapter
from requests.models import PreparedRequest
from urllib3.connection import HTTPConnection

from ..config.api_config import TransportConfig
from ..signing.types import SECURITY_TYPE_HEADER, RequestTransform, SigningError, SigningErrorCodes

logger = logging.getLogger(__name__)

# Distinct remote hosts whose pools are kept alive by one session
POOL_CONNECTIONS = 10


def _keepalive_socket_options(ping_interval: float) -> List[Tuple[int, int, int]]:
    """TCP keep-alive options probing idle pooled connections every ``ping_interval`` seconds"""
    interval = max(1, int(ping_interval))
    options = list(HTTPConnection.default_socket_options)
    options.append((socket.SOL_SOCKET, socket.SO_KEEPALIVE, 1))
    if hasattr(socket, 'TCP_KEEPIDLE'):
        options.append((socket.IPPROTO_TCP, socket.TCP_KEEPIDLE, interval))
    if hasattr(socket, 'TCP_KEEPINTVL'):
        options.append((socket.IPPROTO_TCP, socket.TCP_KEEPINTVL, interval))
    return options


class KeepAliveHTTPAdapter(HTTPAdapter):
    """HTTP adapter whose pooled sockets use TCP keep-alive probing"""

    __attrs__ = HTTPAdapter.__attrs__ + ['ping_interval']

    def __init__(self, ping_interval: float, **kwargs):
        # HTTPAdapter.__init__ builds the pool manager, so this must be set first
        self.ping_interval = ping_interval
        super().__init__(**kwargs)

    def init_poolmanager(self, connections, maxsize, block=False, **pool_kwargs):
        pool_kwargs['socket_options'] = _keepalive_socket_options(self.ping_interval)
        super().init_poolmanager(connections, maxsize, block=block, **pool_kwargs)


def _create_session(config: TransportConfig) -> requests.Session:
    """Create the pooled session backing a base transport handle"""
    session = requests.Session()

    # No retries: a failed call is reported, never replayed
    adapter = KeepAliveHTTPAdapter(
        ping_interval=config.ping_interval,
        pool_connections=POOL_CONNECTIONS,
        pool_maxsize=config.max_requests_per_host,
        pool_block=True,
        max_retries=0,
    )
    session.mount("http://", adapter)
    session.mount("https://", adapter)

    # Cookies would otherwise leak between clients sharing the session
    session.cookies.set_policy(DefaultCookiePolicy(allowed_domains=[]))

    session.headers.update({
        'Accept': 'application/json',
        'User-Agent': 'Binance-Python-SDK/0.1.0',
    })
    return session


class TransportHandle:
    """
    Handle to a pooled HTTP transport plus an outbound interceptor chain.

    Handles are immutable once built: deriving a signing handle creates a new
    object and leaves the base untouched. All handles derived from one base
    share its session, its concurrency limiter and its timeouts.
    """

    def __init__(
        self,
        config: TransportConfig,
        session: Optional[requests.Session] = None,
        limiter: Optional[threading.BoundedSemaphore] = None,
        interceptors: Iterable[RequestTransform] = ()
    ):
        self.config = config
        self._owns_session = session is None
        self.session = session if session is not None else _create_session(config)
        self._limiter = limiter if limiter is not None else threading.BoundedSemaphore(config.max_requests)
        self.interceptors: Tuple[RequestTransform, ...] = tuple(interceptors)

    @property
    def timeout(self) -> Tuple[float, float]:
        """Timeout pair in the ``(connect/send, read)`` form requests expects"""
        return (self.config.write_timeout, self.config.read_timeout)

    def with_interceptor(self, interceptor: RequestTransform) -> 'TransportHandle':
        """Return a handle sharing this one's pool, with ``interceptor`` run first"""
        return TransportHandle(
            self.config,
            session=self.session,
            limiter=self._limiter,
            interceptors=(interceptor,) + self.interceptors,
        )

    def shares_pool_with(self, other: 'TransportHandle') -> bool:
        return self.session is other.session and self._limiter is other._limiter

    def prepare(self, request: requests.Request) -> PreparedRequest:
        """
        Prepare ``request`` and run it through the interceptor chain.

        Raises:
            SigningError: If an interceptor fails, whatever it raised
        """
        prepared = self.session.prepare_request(request)
        for interceptor in self.interceptors:
            try:
                prepared = interceptor(prepared)
            except SigningError:
                raise
            except Exception as e:
                raise SigningError(
                    f"Request interceptor failed: {e}",
                    SigningErrorCodes.SIGNING_FAILED,
                    {'interceptor': repr(interceptor), 'error_type': type(e).__name__}
                ) from e
        prepared.headers.pop(SECURITY_TYPE_HEADER, None)
        return prepared

    def send(self, request: requests.Request) -> requests.Response:
        """
        Send a request and block until the full response has been read.

        Raises:
            requests.RequestException: On any transport-level failure
            SigningError: If an interceptor cannot sign the request
        """
        prepared = self.prepare(request)
        settings = self.session.merge_environment_settings(prepared.url, {}, None, None, None)

        with self._limiter:
            logger.debug(f"Sending {prepared.method} request to {prepared.path_url.split('?')[0]}")
            return self.session.send(prepared, timeout=self.timeout, **settings)

    def close(self) -> None:
        """Close the underlying session if this handle created it"""
        if self._owns_session:
            self.session.close()
            logger.debug("Transport session closed")

    def __repr__(self) -> str:
        return (f"TransportHandle(max_requests={self.config.max_requests}, "
                f"interceptors={len(self.interceptors)})")


def initialize_transport(config: Optional[TransportConfig] = None) -> TransportHandle:
    """Build a new base transport handle with its own connection pool"""
    config = config or TransportConfig()
    logger.info(
        f"Initializing transport: max_requests={config.max_requests}, "
        f"max_requests_per_host={config.max_requests_per_host}"
    )
    return TransportHandle(config)


def derive_signing_transport(base: TransportHandle, sign_fn: RequestTransform) -> TransportHandle:
    """
    Derive a handle that signs its requests with ``sign_fn``.

    The result shares the base's connection pool and timeouts; the base
    handle is not modified.
    """
    return base.with_interceptor(sign_fn)


class SharedTransport:
    """
    Lazily created, process-wide base transport.

    ``get()`` builds the handle on first use under a lock; every later call
    returns the same handle, so exactly one pool exists per instance.
    """

    def __init__(self, config: Optional[TransportConfig] = None):
        self.config = config or TransportConfig()
        self._handle: Optional[TransportHandle] = None
        self._lock = threading.Lock()

    @property
    def initialized(self) -> bool:
        return self._handle is not None

    def get(self) -> TransportHandle:
        handle = self._handle
        if handle is None:
            with self._lock:
                if self._handle is None:
                    self._handle = initialize_transport(self.config)
                handle = self._handle
        return handle

    def close(self) -> None:
        with self._lock:
            if self._handle is not None:
                self._handle.close()
                self._handle = None
