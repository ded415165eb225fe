"""
Subscription Entity - A configured market data feed
"""

# Standard library imports
from dataclasses import dataclass

from ..value_objects import Resolution, SecurityType


@dataclass(frozen=True)
class SubscriptionDataConfig:
    """
    Configuration of one active market data subscription.

    The index is assigned by the subscription registry and is the key under
    which each cycle's data for this feed is delivered. Configs are frozen:
    reusing a subscription never changes its resolution, index or flags.
    """

    symbol: str
    security_type: SecurityType
    resolution: Resolution
    index: int

    # Created only to price a currency, not requested by trading logic
    is_currency_conversion_feed: bool = False
    is_internal_feed: bool = False
    fill_forward: bool = True

    def __post_init__(self) -> None:
        """Validate subscription after initialization"""
        if not self.symbol:
            raise ValueError("Subscription symbol cannot be empty")
        if self.index < 0:
            raise ValueError(f"Subscription index cannot be negative: {self.index}")
