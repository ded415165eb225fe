"""
Market data points delivered to cash entities each data cycle.

Every data point exposes a single ``value``: the best point-in-time price it
carries. Conversion rate updates read only that property, so ticks and bars
are treated consistently.
"""

# Standard library imports
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


def _to_decimal(value: Decimal | float | int | str | None) -> Decimal | None:
    if value is None or isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _midpoint(bid: Decimal | None, ask: Decimal | None) -> Decimal:
    if bid and ask:
        return (bid + ask) / 2
    return bid or ask or Decimal("0")


@dataclass(frozen=True)
class MarketDataPoint(ABC):
    """Base class for data routed to a subscription."""

    symbol: str
    time: datetime

    @property
    @abstractmethod
    def value(self) -> Decimal:
        """Best point-in-time price available on this data point."""


@dataclass(frozen=True)
class Tick(MarketDataPoint):
    """
    A single trade or quote update.

    Attributes:
        symbol: Pair or ticker symbol
        time: Tick timestamp
        last_price: Last traded price (zero or None for quote-only ticks)
        bid_price: Best bid (optional)
        ask_price: Best ask (optional)
        quantity: Trade size (optional)
    """

    last_price: Decimal | None = None
    bid_price: Decimal | None = None
    ask_price: Decimal | None = None
    quantity: Decimal | None = None

    def __post_init__(self) -> None:
        """Coerce prices to Decimal."""
        for name in ("last_price", "bid_price", "ask_price", "quantity"):
            object.__setattr__(self, name, _to_decimal(getattr(self, name)))

    @property
    def value(self) -> Decimal:
        """Last trade price, falling back to the bid/ask midpoint."""
        if self.last_price:
            return self.last_price
        return _midpoint(self.bid_price, self.ask_price)


@dataclass(frozen=True)
class TradeBar(MarketDataPoint):
    """OHLCV bar built from trades."""

    open: Decimal = Decimal("0")
    high: Decimal = Decimal("0")
    low: Decimal = Decimal("0")
    close: Decimal = Decimal("0")
    volume: Decimal = Decimal("0")

    def __post_init__(self) -> None:
        """Coerce prices to Decimal and validate bar shape."""
        for name in ("open", "high", "low", "close", "volume"):
            object.__setattr__(self, name, _to_decimal(getattr(self, name)))

        if self.high < self.low:
            raise ValueError(f"High price {self.high} cannot be less than low price {self.low}")
        if self.volume < 0:
            raise ValueError(f"Volume cannot be negative: {self.volume}")

    @property
    def value(self) -> Decimal:
        """Closing price."""
        return self.close


@dataclass(frozen=True)
class QuoteBar(MarketDataPoint):
    """Bar built from quotes; only the closing bid and ask matter for pricing."""

    bid_close: Decimal | None = None
    ask_close: Decimal | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "bid_close", _to_decimal(self.bid_close))
        object.__setattr__(self, "ask_close", _to_decimal(self.ask_close))

    @property
    def value(self) -> Decimal:
        """Midpoint of the closing bid and ask."""
        return _midpoint(self.bid_close, self.ask_close)
