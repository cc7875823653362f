"""
Decoded request and response payloads for the Binance REST API
"""

from .general import (
    BinanceApiError,
    RateLimitType,
    RateLimitInterval,
    RateLimitSink,
    WithRateLimits,
    ServerTime,
)
from .account import (
    OrderSide,
    OrderType,
    TimeInForce,
    AssetBalance,
    Account,
    NewOrderResponse,
    ListenKey,
)
from .market import (
    OrderBookEntry,
    OrderBook,
    TickerPrice,
)

__all__ = [
    'BinanceApiError',
    'RateLimitType',
    'RateLimitInterval',
    'RateLimitSink',
    'WithRateLimits',
    'ServerTime',
    'OrderSide',
    'OrderType',
    'TimeInForce',
    'AssetBalance',
    'Account',
    'NewOrderResponse',
    'ListenKey',
    'OrderBookEntry',
    'OrderBook',
    'TickerPrice',
]
