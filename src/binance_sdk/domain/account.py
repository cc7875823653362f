"""
Account and trading payloads
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Mapping, Optional

from .general import WithRateLimits


class OrderSide(str, Enum):
    BUY = "BUY"
    SELL = "SELL"


class OrderType(str, Enum):
    LIMIT = "LIMIT"
    MARKET = "MARKET"
    STOP_LOSS = "STOP_LOSS"
    STOP_LOSS_LIMIT = "STOP_LOSS_LIMIT"
    TAKE_PROFIT = "TAKE_PROFIT"
    TAKE_PROFIT_LIMIT = "TAKE_PROFIT_LIMIT"
    LIMIT_MAKER = "LIMIT_MAKER"


class TimeInForce(str, Enum):
    GTC = "GTC"
    IOC = "IOC"
    FOK = "FOK"


@dataclass
class AssetBalance:
    asset: str
    free: str
    locked: str

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> 'AssetBalance':
        return cls(asset=data['asset'], free=data['free'], locked=data['locked'])


@dataclass
class Account(WithRateLimits):
    """Account snapshot returned by ``GET /api/v3/account``"""
    maker_commission: int
    taker_commission: int
    can_trade: bool
    can_withdraw: bool
    can_deposit: bool
    update_time: int
    balances: List[AssetBalance] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> 'Account':
        return cls(
            maker_commission=int(data.get('makerCommission', 0)),
            taker_commission=int(data.get('takerCommission', 0)),
            can_trade=bool(data.get('canTrade', False)),
            can_withdraw=bool(data.get('canWithdraw', False)),
            can_deposit=bool(data.get('canDeposit', False)),
            update_time=int(data.get('updateTime', 0)),
            balances=[AssetBalance.from_json(b) for b in data.get('balances', [])],
        )

    def get_asset_balance(self, asset: str) -> Optional[AssetBalance]:
        for balance in self.balances:
            if balance.asset == asset:
                return balance
        return None


@dataclass
class NewOrderResponse(WithRateLimits):
    """Acknowledgement of ``POST /api/v3/order``"""
    symbol: str
    order_id: int
    client_order_id: str
    transact_time: int
    price: Optional[str] = None
    orig_qty: Optional[str] = None
    executed_qty: Optional[str] = None
    status: Optional[str] = None
    type: Optional[str] = None
    side: Optional[str] = None

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> 'NewOrderResponse':
        return cls(
            symbol=data['symbol'],
            order_id=int(data['orderId']),
            client_order_id=data.get('clientOrderId', ''),
            transact_time=int(data.get('transactTime', 0)),
            price=data.get('price'),
            orig_qty=data.get('origQty'),
            executed_qty=data.get('executedQty'),
            status=data.get('status'),
            type=data.get('type'),
            side=data.get('side'),
        )


@dataclass
class ListenKey:
    listen_key: str

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> 'ListenKey':
        return cls(listen_key=data['listenKey'])
