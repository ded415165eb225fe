"""
In-memory security registry.

Holds the securities registered with the engine. Forex tradability also
consults a universe of known currency pairs, so a conversion pair can be
recognized before anything has subscribed to it.
"""

# Standard library imports
import logging
from collections.abc import Iterable, Iterator

# Local imports
from fxcash.domain.constants import FOREX_CURRENCY_PAIRS
from fxcash.domain.entities import Security
from fxcash.domain.value_objects import Resolution, SecurityType

logger = logging.getLogger(__name__)


class SecurityManager:
    """Dict-backed implementation of ISecurityRegistry."""

    def __init__(self, known_forex_pairs: Iterable[str] | None = None) -> None:
        """
        Initialize the registry.

        Args:
            known_forex_pairs: Tradable forex pair universe; defaults to
                FOREX_CURRENCY_PAIRS
        """
        pairs = FOREX_CURRENCY_PAIRS if known_forex_pairs is None else known_forex_pairs
        self._known_forex_pairs = frozenset(pair.strip().upper() for pair in pairs)
        self._securities: dict[str, Security] = {}

    @property
    def known_forex_pairs(self) -> frozenset[str]:
        return self._known_forex_pairs

    def add(
        self,
        symbol: str,
        resolution: Resolution = Resolution.MINUTE,
        security_type: SecurityType = SecurityType.EQUITY,
    ) -> Security:
        """Register a security, replacing any previous one with the same symbol."""
        security = Security(symbol=symbol, security_type=security_type, resolution=resolution)
        self._securities[security.symbol] = security
        logger.debug(f"Registered {security_type.value} security {security.symbol}")
        return security

    def get(self, symbol: str) -> Security | None:
        return self._securities.get(symbol.strip().upper())

    def is_tradable(self, symbol: str, security_type: SecurityType) -> bool:
        """Check whether ``symbol`` is a known instrument of ``security_type``."""
        normalized = symbol.strip().upper()
        security = self._securities.get(normalized)
        if security is not None and security.security_type == security_type:
            return True
        return security_type == SecurityType.FOREX and normalized in self._known_forex_pairs

    def __contains__(self, symbol: object) -> bool:
        return isinstance(symbol, str) and symbol.strip().upper() in self._securities

    def __iter__(self) -> Iterator[Security]:
        return iter(list(self._securities.values()))

    def __len__(self) -> int:
        return len(self._securities)
