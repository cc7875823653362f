"""
Shared fixtures for Binance SDK tests

Requests never leave the process: a recording adapter is mounted on the
shared session in place of the pooled HTTP adapter.
"""

import json
import threading
from typing import Any, Callable, Dict, List, Optional, Union

import pytest
import requests
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict

from binance_sdk import BinanceApiConfig, ServiceGenerator, TransportConfig


def make_response(
    status: int = 200,
    body: Union[bytes, str, Dict[str, Any], List[Any], None] = None,
    headers: Optional[Dict[str, str]] = None
) -> requests.Response:
    """Build a fully-read requests.Response"""
    response = requests.Response()
    response.status_code = status
    if body is None:
        response._content = b""
    elif isinstance(body, bytes):
        response._content = body
    elif isinstance(body, str):
        response._content = body.encode('utf-8')
    else:
        response._content = json.dumps(body).encode('utf-8')
    response.headers = CaseInsensitiveDict(headers or {})
    response.encoding = 'utf-8'
    return response


class RecordingAdapter(BaseAdapter):
    """Transport adapter that records requests and answers from a responder"""

    def __init__(self, responder: Optional[Callable[[requests.PreparedRequest], Any]] = None):
        super().__init__()
        self.responder = responder or (lambda request: make_response(200, {}))
        self.requests: List[requests.PreparedRequest] = []
        self.timeouts: List[Any] = []
        self._lock = threading.Lock()

    def send(self, request, stream=False, timeout=None, verify=True, cert=None, proxies=None):
        with self._lock:
            self.requests.append(request)
            self.timeouts.append(timeout)

        result = self.responder(request)
        if isinstance(result, Exception):
            raise result

        result.request = request
        result.url = request.url
        return result

    def close(self):
        pass


def mount(generator: ServiceGenerator, adapter: BaseAdapter) -> None:
    session = generator.get_shared_transport().session
    session.mount("https://", adapter)
    session.mount("http://", adapter)


@pytest.fixture
def adapter():
    """Recording adapter answering 200 with an empty JSON object."""
    return RecordingAdapter()


@pytest.fixture
def generator(adapter):
    """Service generator whose shared session is served by ``adapter``."""
    gen = ServiceGenerator(
        api_config=BinanceApiConfig(),
        transport_config=TransportConfig(max_requests=4, max_requests_per_host=4),
    )
    mount(gen, adapter)
    yield gen
    gen.close()
