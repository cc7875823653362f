"""
Binance spot REST endpoints
"""

from typing import List

from ..domain.account import Account, ListenKey, NewOrderResponse
from ..domain.general import ServerTime
from ..domain.market import OrderBook, TickerPrice
from ..signing.types import SecurityType
from .service import ApiService, delete, get, post, put


class BinanceApiService(ApiService):
    """Subset of the Binance spot API used by the SDK"""

    # General
    ping = get("/api/v3/ping", returns=dict)
    get_server_time = get("/api/v3/time", returns=ServerTime)
    get_exchange_info = get("/api/v3/exchangeInfo", returns=dict)

    # Market data
    get_order_book = get("/api/v3/depth", returns=OrderBook)
    get_latest_price = get("/api/v3/ticker/price", returns=TickerPrice)
    get_all_prices = get("/api/v3/ticker/price", returns=List[TickerPrice])

    # Account
    new_order = post("/api/v3/order", returns=NewOrderResponse, security=SecurityType.SIGNED)
    new_order_test = post("/api/v3/order/test", returns=dict, security=SecurityType.SIGNED)
    cancel_order = delete("/api/v3/order", returns=dict, security=SecurityType.SIGNED)
    get_account = get("/api/v3/account", returns=Account, security=SecurityType.SIGNED)

    # User data stream
    start_user_data_stream = post("/api/v3/userDataStream", returns=ListenKey, security=SecurityType.API_KEY)
    keep_alive_user_data_stream = put("/api/v3/userDataStream", returns=dict, security=SecurityType.API_KEY)
    close_user_data_stream = delete("/api/v3/userDataStream", returns=dict, security=SecurityType.API_KEY)
