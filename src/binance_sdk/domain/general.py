"""
General domain types shared by all Binance endpoints

Holds the structured API error, the rate-limit sink capability that decoded
response bodies may implement, and a few small payloads used across services.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Protocol, runtime_checkable


@dataclass
class BinanceApiError:
    """
    Error payload returned by the exchange for unsuccessful requests.

    Attributes:
        code: Exchange-specific error code (e.g. -1121)
        msg: Human readable message
        status: HTTP status code of the response that carried the payload
    """
    code: int
    msg: str
    status: int = 0

    @classmethod
    def from_json(cls, data: Mapping[str, Any], status: int = 0) -> 'BinanceApiError':
        return cls(code=int(data['code']), msg=str(data['msg']), status=status)

    def __str__(self) -> str:
        return f"BinanceApiError(status={self.status}, code={self.code}, msg={self.msg!r})"


class RateLimitType(str, Enum):
    REQUEST_WEIGHT = "REQUEST_WEIGHT"
    ORDERS = "ORDERS"
    RAW_REQUESTS = "RAW_REQUESTS"


class RateLimitInterval(str, Enum):
    SECOND = "SECOND"
    MINUTE = "MINUTE"
    DAY = "DAY"


@runtime_checkable
class RateLimitSink(Protocol):
    """Capability of a response body to receive observed usage counters"""

    def get_rate_limits(self) -> Dict[str, int]:
        """Mutable mapping from limit key (e.g. ``USED-WEIGHT-1M``) to usage"""
        ...


class WithRateLimits:
    """
    Mixin giving a response body its own rate-limit mapping.

    The mapping is created on first access and lives as long as the body
    instance; it is filled in by the call executor after a successful call.
    """

    def get_rate_limits(self) -> Dict[str, int]:
        return self.__dict__.setdefault('_rate_limits', {})

    def get_rate_limit(
        self,
        limit_type: RateLimitType,
        interval: RateLimitInterval,
        count: int
    ) -> Optional[int]:
        """
        Look up an observed counter by limit type and window.

        Args:
            limit_type: REQUEST_WEIGHT or ORDERS
            interval: Window unit
            count: Number of units in the window (the ``1`` of ``1m``)

        Returns:
            Optional[int]: Observed usage, or None if the header was absent

        Raises:
            ValueError: For RAW_REQUESTS, which no header reports
        """
        if RateLimitType(limit_type) is RateLimitType.RAW_REQUESTS:
            raise ValueError(f"rate limit type {limit_type.value} not supported")

        prefix = "order-count" if limit_type is RateLimitType.ORDERS else "used-weight"
        wanted = f"{prefix}-{count}{RateLimitInterval(interval).value.lower()[0]}"
        for key, value in self.get_rate_limits().items():
            if key.lower() == wanted:
                return value
        return None


@dataclass
class ServerTime:
    server_time: int

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> 'ServerTime':
        return cls(server_time=int(data['serverTime']))
