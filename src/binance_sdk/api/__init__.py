"""
Service descriptions and call objects for the Binance REST API
"""

from .call import ApiResponse, PendingCall
from .service import (
    ApiService,
    BoundEndpoint,
    Endpoint,
    DEFAULT_RECEIVING_WINDOW,
    delete,
    get,
    post,
    put,
    to_camel_case,
)
from .binance_service import BinanceApiService

__all__ = [
    'ApiResponse',
    'PendingCall',
    'ApiService',
    'BoundEndpoint',
    'Endpoint',
    'DEFAULT_RECEIVING_WINDOW',
    'delete',
    'get',
    'post',
    'put',
    'to_camel_case',
    'BinanceApiService',
]
