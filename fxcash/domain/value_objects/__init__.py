"""Immutable value objects for type safety."""

from .currency import CurrencySymbol
from .market_data import MarketDataPoint, QuoteBar, Tick, TradeBar
from .pair_orientation import PairOrientation
from .resolution import Resolution, SecurityType

__all__ = [
    "CurrencySymbol",
    "MarketDataPoint",
    "PairOrientation",
    "QuoteBar",
    "Resolution",
    "SecurityType",
    "Tick",
    "TradeBar",
]
