"""
Harvesting of rate-limit usage counters from Binance response headers

The exchange reports current usage in ``X-MBX-USED-WEIGHT-*`` and
``X-MBX-ORDER-COUNT-*`` headers. After a successful call these values are
copied into the decoded body when the body type implements
``RateLimitSink``.
"""

import logging
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from ..domain.general import RateLimitSink

logger = logging.getLogger(__name__)

RATE_LIMIT_HEADER_PREFIX = "x-mbx-"
RATE_LIMIT_KEY_PREFIXES = ("used-weight", "order-count")


def _parse_count(value: Any) -> Optional[int]:
    text = str(value).strip()
    if not (text.isascii() and text.isdigit()):
        return None
    return int(text)


def iter_rate_limit_headers(headers: Mapping[str, Any]) -> Iterable[Tuple[str, int]]:
    """
    Yield ``(key, count)`` pairs for the rate-limit headers in ``headers``.

    Keys are header names without the ``x-mbx-`` prefix, in the case they
    were received. Values that are not non-negative integers are skipped.
    """
    prefix_len = len(RATE_LIMIT_HEADER_PREFIX)
    for name, value in headers.items():
        if not name.lower().startswith(RATE_LIMIT_HEADER_PREFIX):
            continue

        key = name[prefix_len:]
        if not key.lower().startswith(RATE_LIMIT_KEY_PREFIXES):
            continue

        count = _parse_count(value)
        if count is None:
            logger.debug(f"Skipping rate limit header {name} with non-numeric value {value!r}")
            continue
        yield key, count


def extract_rate_limits(response: Any) -> None:
    """
    Copy rate-limit counters from a response's headers into its body.

    ``response`` is anything with ``body`` and ``headers`` attributes (an
    ``ApiResponse``). Does nothing if the body is not a ``RateLimitSink``.
    Existing entries with the same key are overwritten.
    """
    body = getattr(response, 'body', None)
    if not isinstance(body, RateLimitSink):
        return

    rate_limits: Dict[str, int] = body.get_rate_limits()
    for key, count in iter_rate_limit_headers(response.headers):
        rate_limits[key] = count
