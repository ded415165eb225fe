"""
Security Entity - A tradable instrument known to the engine
"""

# Standard library imports
from dataclasses import dataclass

from ..constants import CURRENCY_CODE_LENGTH
from ..value_objects import Resolution, SecurityType


@dataclass(frozen=True)
class Security:
    """Tradable instrument identity.

    Only the symbol and type matter to currency conversion; resolution records
    the data granularity the security was registered with.
    """

    symbol: str
    security_type: SecurityType = SecurityType.EQUITY
    resolution: Resolution = Resolution.MINUTE

    def __post_init__(self) -> None:
        if not self.symbol:
            raise ValueError("Security symbol cannot be empty")
        object.__setattr__(self, "symbol", self.symbol.strip().upper())

    def is_forex(self) -> bool:
        """Check if this security is a currency pair."""
        return self.security_type == SecurityType.FOREX

    @property
    def base_currency(self) -> str | None:
        """First currency of a forex pair (the one being priced)."""
        if not self.is_forex() or len(self.symbol) != 2 * CURRENCY_CODE_LENGTH:
            return None
        return self.symbol[:CURRENCY_CODE_LENGTH]

    @property
    def quote_currency(self) -> str | None:
        """Second currency of a forex pair (the one the price is expressed in)."""
        if not self.is_forex() or len(self.symbol) != 2 * CURRENCY_CODE_LENGTH:
            return None
        return self.symbol[CURRENCY_CODE_LENGTH:]
