"""
Unit tests for rate-limit header harvesting
"""

from types import SimpleNamespace

import pytest
from requests.structures import CaseInsensitiveDict

from binance_sdk import (
    BinanceApiService,
    RateLimitInterval,
    RateLimitSink,
    RateLimitType,
    WithRateLimits,
    execute_sync,
    extract_rate_limits,
)
from binance_sdk.domain import NewOrderResponse
from binance_sdk.http_clients import iter_rate_limit_headers

from conftest import make_response


class Body(WithRateLimits):
    pass


def envelope(body, headers):
    return SimpleNamespace(body=body, headers=CaseInsensitiveDict(headers))


class TestExtractRateLimits:
    """Test the header allow-list and parsing"""

    def test_allow_listed_headers(self):
        """Test used-weight and order-count headers are kept in received case"""
        body = Body()
        extract_rate_limits(envelope(body, {
            "X-MBX-USED-WEIGHT-1M": "42",
            "X-MBX-ORDER-COUNT-10S": "3",
            "X-MBX-Some-Other": "9",
            "Content-Type": "application/json",
        }))

        assert body.get_rate_limits() == {"USED-WEIGHT-1M": 42, "ORDER-COUNT-10S": 3}

    def test_prefix_is_case_insensitive(self):
        """Test lowercase header names are recognized"""
        body = Body()
        extract_rate_limits(envelope(body, {
            "x-mbx-used-weight": "10",
            "X-Mbx-Order-Count-1d": "7",
        }))

        assert body.get_rate_limits() == {"used-weight": 10, "Order-Count-1d": 7}

    def test_other_prefixes_ignored(self):
        """Test headers outside the x-mbx- namespace are ignored"""
        body = Body()
        extract_rate_limits(envelope(body, {
            "X-SAPI-USED-IP-WEIGHT-1M": "5",
            "used-weight-1m": "5",
            "X-MBX-UUID": "abc",
        }))

        assert body.get_rate_limits() == {}

    def test_overwrites_existing_entries(self):
        """Test a new observation replaces the previous counter"""
        body = Body()
        body.get_rate_limits()["USED-WEIGHT-1M"] = 1
        extract_rate_limits(envelope(body, {"X-MBX-USED-WEIGHT-1M": "99"}))

        assert body.get_rate_limits()["USED-WEIGHT-1M"] == 99

    @pytest.mark.parametrize("value", ["abc", "-1", "", "1.5"])
    def test_malformed_values_skipped(self, value):
        """Test non-numeric counters are skipped without failing"""
        body = Body()
        extract_rate_limits(envelope(body, {
            "X-MBX-USED-WEIGHT-1M": value,
            "X-MBX-ORDER-COUNT-10S": "3",
        }))

        assert body.get_rate_limits() == {"ORDER-COUNT-10S": 3}

    def test_body_without_capability_untouched(self):
        """Test plain bodies are left alone"""
        body = {"symbol": "BTCUSDT"}
        extract_rate_limits(envelope(body, {"X-MBX-USED-WEIGHT-1M": "42"}))

        assert body == {"symbol": "BTCUSDT"}
        assert not isinstance(body, RateLimitSink)

    def test_none_body(self):
        """Test a missing body is a no-op"""
        extract_rate_limits(envelope(None, {"X-MBX-USED-WEIGHT-1M": "42"}))

    def test_iter_headers(self):
        """Test the header iterator yields pairs in header order"""
        pairs = list(iter_rate_limit_headers(CaseInsensitiveDict({
            "X-MBX-ORDER-COUNT-10S": "3",
            "X-MBX-USED-WEIGHT-1M": "42",
        })))
        assert pairs == [("ORDER-COUNT-10S", 3), ("USED-WEIGHT-1M", 42)]


class TestWithRateLimits:
    """Test the rate-limit sink mixin"""

    def test_mapping_owned_by_instance(self):
        """Test each body instance has its own mapping"""
        first, second = Body(), Body()
        first.get_rate_limits()["USED-WEIGHT-1M"] = 1

        assert second.get_rate_limits() == {}
        assert first.get_rate_limits() is first.get_rate_limits()
        assert isinstance(first, RateLimitSink)

    def test_get_rate_limit(self):
        """Test lookups by type, interval and count"""
        body = Body()
        body.get_rate_limits().update({"USED-WEIGHT-1M": 42, "ORDER-COUNT-10S": 3, "order-count-1d": 80})

        assert body.get_rate_limit(RateLimitType.REQUEST_WEIGHT, RateLimitInterval.MINUTE, 1) == 42
        assert body.get_rate_limit(RateLimitType.ORDERS, RateLimitInterval.SECOND, 10) == 3
        assert body.get_rate_limit(RateLimitType.ORDERS, RateLimitInterval.DAY, 1) == 80
        assert body.get_rate_limit(RateLimitType.REQUEST_WEIGHT, RateLimitInterval.DAY, 1) is None

    def test_raw_requests_unsupported(self):
        """Test RAW_REQUESTS lookups are rejected"""
        with pytest.raises(ValueError, match="not supported"):
            Body().get_rate_limit(RateLimitType.RAW_REQUESTS, RateLimitInterval.MINUTE, 1)


class TestRateLimitsThroughExecution:
    """Test counters are populated by a real call"""

    def test_new_order_populated(self, generator, adapter):
        """Test the returned order carries counters from its response"""
        adapter.responder = lambda request: make_response(200, {
            "symbol": "BTCUSDT",
            "orderId": 28,
            "clientOrderId": "6gCrw2kRUAF9CvJDGP16IP",
            "transactTime": 1507725176595,
        }, {
            "X-MBX-USED-WEIGHT-1M": "42",
            "X-MBX-ORDER-COUNT-10S": "3",
            "X-MBX-Some-Other": "9",
        })
        client = generator.create_service(BinanceApiService, "key", "secret")

        order = execute_sync(client.new_order(symbol="BTCUSDT", side="BUY", type="MARKET", quantity="1"))

        assert isinstance(order, NewOrderResponse)
        assert order.order_id == 28
        assert order.get_rate_limits() == {"USED-WEIGHT-1M": 42, "ORDER-COUNT-10S": 3}

    def test_separate_calls_separate_counters(self, generator, adapter):
        """Test counters are scoped to the body of the call that observed them"""
        weights = iter(["10", "20"])
        adapter.responder = lambda request: make_response(200, {}, {"X-MBX-USED-WEIGHT-1M": next(weights)})
        client = generator.create_service(BinanceApiService, "key", "secret")

        first = execute_sync(client.get_account())
        second = execute_sync(client.get_account())

        assert first.get_rate_limits() == {"USED-WEIGHT-1M": 10}
        assert second.get_rate_limits() == {"USED-WEIGHT-1M": 20}
