"""
Unit tests for the JSON codec and service descriptions
"""

from enum import Enum
from typing import List

import pytest

from binance_sdk import (
    ApiService,
    BinanceApiService,
    CodecError,
    Endpoint,
    JsonCodec,
    SecurityType,
)
from binance_sdk.api import DEFAULT_RECEIVING_WINDOW, get, to_camel_case
from binance_sdk.domain import OrderSide, TickerPrice
from binance_sdk.signing import SECURITY_TYPE_HEADER


class Color(Enum):
    RED = "red"


class TestJsonCodec:
    """Test payload encoding and decoding"""

    def setup_method(self):
        self.codec = JsonCodec()

    def test_encode_params(self):
        """Test enums, booleans and None are encoded for the wire"""
        pairs = self.codec.encode_params({
            'side': OrderSide.BUY,
            'color': Color.RED,
            'flag': True,
            'limit': 5,
            'skipped': None,
        })
        assert pairs == [('side', 'BUY'), ('color', 'red'), ('flag', 'true'), ('limit', '5')]

    def test_encode_float_without_exponent(self):
        """Test small and large floats are written in plain decimal notation"""
        assert self.codec.encode_value(0.00001) == "0.00001"
        assert self.codec.encode_value(0.1) == "0.1"
        assert self.codec.encode_value(1e16) == "10000000000000000"

    def test_decode_passthrough(self):
        """Test plain types return the decoded JSON"""
        assert self.codec.decode(b'{"a": 1}', dict) == {"a": 1}
        assert self.codec.decode(b'', dict) is None
        assert self.codec.decode(b'{"a": 1}', None) is None

    def test_decode_list(self):
        """Test list types decode each element"""
        prices = self.codec.decode(b'[{"symbol": "A", "price": "1"}]', List[TickerPrice])
        assert prices == [TickerPrice(symbol="A", price="1")]

    def test_decode_list_type_mismatch(self):
        """Test an object where an array is expected is rejected"""
        with pytest.raises(CodecError, match="Expected a JSON array"):
            self.codec.decode(b'{"symbol": "A"}', List[TickerPrice])

    def test_decode_invalid(self):
        """Test invalid JSON and missing fields raise CodecError"""
        with pytest.raises(CodecError, match="Invalid JSON payload"):
            self.codec.decode(b'<html>', dict)
        with pytest.raises(CodecError, match="Cannot decode TickerPrice"):
            self.codec.decode(b'{"symbol": "A"}', TickerPrice)

    def test_decode_non_utf8(self):
        """Test bytes in another encoding raise CodecError"""
        with pytest.raises(CodecError, match="Invalid JSON payload"):
            self.codec.decode(b'\xff\xfe{}', dict)

    def test_decode_object_type_mismatch(self):
        """Test an array where an object is expected is rejected"""
        with pytest.raises(CodecError, match="Expected a JSON object for TickerPrice"):
            self.codec.decode(b'[1, 2]', TickerPrice)

    def test_error_decoder(self):
        """Test error payloads decode with the response status"""
        error = self.codec.error_decoder(b'{"code": -2010, "msg": "Account has insufficient balance."}', status=400)
        assert error.code == -2010
        assert error.msg == "Account has insufficient balance."
        assert error.status == 400

    def test_error_decoder_rejects_non_objects(self):
        """Test arrays and incomplete objects are not error payloads"""
        with pytest.raises(CodecError):
            self.codec.error_decoder(b'[]', status=500)
        with pytest.raises(CodecError, match="Malformed error payload"):
            self.codec.error_decoder(b'{"code": "x"}', status=500)

    def test_error_decoder_built_once(self):
        """Test the codec hands out one decoder instance"""
        assert self.codec.error_decoder is self.codec.error_decoder


class TestServiceDescription:
    """Test endpoint descriptors and request building"""

    def setup_method(self):
        self.codec = JsonCodec()

    def test_to_camel_case(self):
        """Test snake_case keyword arguments become camelCase"""
        assert to_camel_case("new_client_order_id") == "newClientOrderId"
        assert to_camel_case("recvWindow") == "recvWindow"
        assert to_camel_case("symbol") == "symbol"

    def test_endpoints_listing(self):
        """Test a service describes its operations"""
        endpoints = BinanceApiService.endpoints()
        assert endpoints['ping'].path == "/api/v3/ping"
        assert endpoints['new_order'].security is SecurityType.SIGNED
        assert endpoints['start_user_data_stream'].security is SecurityType.API_KEY
        assert isinstance(BinanceApiService.ping, Endpoint)

    def test_signed_request_defaults(self):
        """Test signed endpoints get a receiving window and timestamp"""
        request = BinanceApiService.get_account.build_request("https://api.binance.com", self.codec, {})
        params = dict(request.params)

        assert params['recvWindow'] == str(DEFAULT_RECEIVING_WINDOW)
        assert int(params['timestamp']) > 0
        assert request.headers[SECURITY_TYPE_HEADER] == "SIGNED"

    def test_public_request_has_no_marker(self):
        """Test public endpoints carry no security marker"""
        request = BinanceApiService.ping.build_request("https://api.binance.com/", self.codec, {})
        assert request.url == "https://api.binance.com/api/v3/ping"
        assert SECURITY_TYPE_HEADER not in request.headers

    def test_path_parameters(self):
        """Test path templates are filled from keyword arguments"""

        class AssetService(ApiService):
            asset_detail = get("/sapi/v1/asset/{asset}", returns=dict)

        endpoint = AssetService.asset_detail
        request = endpoint.build_request("https://api.binance.com", self.codec, {'asset': 'BTC', 'limit': 1})
        assert request.url == "https://api.binance.com/sapi/v1/asset/BTC"
        assert request.params == [('limit', '1')]

        with pytest.raises(TypeError, match="missing path parameter 'asset'"):
            endpoint.build_request("https://api.binance.com", self.codec, {})

    def test_bound_endpoint_builds_pending_call(self):
        """Test calling an endpoint on a service returns an unexecuted call"""
        service = BinanceApiService("https://api.binance.com", transport=None, codec=self.codec)
        call = service.get_order_book(symbol="BTCUSDT")

        assert not call.executed
        assert call.endpoint is BinanceApiService.get_order_book
        assert call.request.params == [('symbol', 'BTCUSDT')]
