"""
Market data payloads
"""

from dataclasses import dataclass, field
from typing import Any, List, Mapping


@dataclass
class OrderBookEntry:
    price: str
    qty: str


@dataclass
class OrderBook:
    last_update_id: int
    bids: List[OrderBookEntry] = field(default_factory=list)
    asks: List[OrderBookEntry] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> 'OrderBook':
        # Levels arrive as [price, qty] pairs
        return cls(
            last_update_id=int(data['lastUpdateId']),
            bids=[OrderBookEntry(price=p, qty=q) for p, q in data.get('bids', [])],
            asks=[OrderBookEntry(price=p, qty=q) for p, q in data.get('asks', [])],
        )


@dataclass
class TickerPrice:
    symbol: str
    price: str

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> 'TickerPrice':
        return cls(symbol=data['symbol'], price=data['price'])
