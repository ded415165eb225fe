"""
Registry interfaces consumed by currency feed resolution.

The domain defines what it needs from the engine's subscription and security
registries; infrastructure (or a host engine) provides the implementation.
Both registries are passed explicitly to every resolution call.
"""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from ..entities.security import Security
from ..entities.subscription import SubscriptionDataConfig
from ..value_objects import Resolution, SecurityType


@runtime_checkable
class ISubscriptionRegistry(Protocol):
    """Owns the ordered list of active market data subscriptions."""

    @property
    def subscriptions(self) -> Sequence[SubscriptionDataConfig]:
        """Active subscriptions, ordered by index."""
        ...

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
        """Add a subscription and return its config with the assigned index."""
        ...


@runtime_checkable
class ISecurityRegistry(Protocol):
    """Knows which instruments are tradable."""

    def is_tradable(self, symbol: str, security_type: SecurityType) -> bool:
        """Check whether ``symbol`` is a known instrument of ``security_type``."""
        ...

    def add(
        self,
        symbol: str,
        resolution: Resolution = Resolution.MINUTE,
        security_type: SecurityType = SecurityType.EQUITY,
    ) -> Security:
        """Register a security and return it."""
        ...

    def __contains__(self, symbol: object) -> bool: ...
