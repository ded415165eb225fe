"""
In-memory subscription registry.

Keeps the ordered list of active market data subscriptions and assigns each
new subscription the next index. Data for a cycle is delivered keyed by these
indexes.
"""

# Standard library imports
import logging
from collections.abc import Iterator, Sequence

# Local imports
from fxcash.domain.entities import SubscriptionDataConfig
from fxcash.domain.value_objects import Resolution, SecurityType

logger = logging.getLogger(__name__)


class SubscriptionManager:
    """List-backed implementation of ISubscriptionRegistry."""

    def __init__(self) -> None:
        self._subscriptions: list[SubscriptionDataConfig] = []

    @property
    def subscriptions(self) -> Sequence[SubscriptionDataConfig]:
        """Active subscriptions, ordered by index."""
        return tuple(self._subscriptions)

    @property
    def count(self) -> int:
        return len(self._subscriptions)

    def add(
        self,
        security_type: SecurityType,
        symbol: str,
        resolution: Resolution,
        *,
        is_currency_conversion_feed: bool = False,
        is_internal_feed: bool = False,
        fill_forward: bool = True,
    ) -> SubscriptionDataConfig:
        """
        Add a subscription.

        Duplicate symbols are accepted; callers wanting a single feed per
        symbol should check ``find`` first.

        Args:
            security_type: Type of the subscribed instrument
            symbol: Instrument symbol, normalized to uppercase
            resolution: Data granularity
            is_currency_conversion_feed: Feed exists only to price a currency
            is_internal_feed: Feed is not exposed to trading logic
            fill_forward: Repeat the last value when no new data arrives

        Returns:
            The new subscription config with its assigned index
        """
        config = SubscriptionDataConfig(
            symbol=symbol.strip().upper(),
            security_type=security_type,
            resolution=resolution,
            index=len(self._subscriptions),
            is_currency_conversion_feed=is_currency_conversion_feed,
            is_internal_feed=is_internal_feed,
            fill_forward=fill_forward,
        )
        self._subscriptions.append(config)

        logger.debug(
            f"Subscribed to {config.symbol} at {resolution.name.lower()} resolution",
            extra={"subscription_index": config.index, "pair": config.symbol},
        )
        return config

    def get(self, index: int) -> SubscriptionDataConfig:
        """Get a subscription by index.

        Raises:
            IndexError: If no subscription has this index
        """
        if index < 0 or index >= len(self._subscriptions):
            raise IndexError(f"No subscription with index {index}")
        return self._subscriptions[index]

    def find(self, symbol: str) -> list[SubscriptionDataConfig]:
        """All subscriptions for ``symbol``."""
        normalized = symbol.strip().upper()
        return [config for config in self._subscriptions if config.symbol == normalized]

    def __iter__(self) -> Iterator[SubscriptionDataConfig]:
        return iter(tuple(self._subscriptions))

    def __len__(self) -> int:
        return len(self._subscriptions)
