"""Currency Feed Resolver domain service.

This module binds cash holdings to the market data feed that prices them in
the account currency. A currency is priced from a forex pair combining it with
the account currency, quoted in either order:

    - CUR+BASE (e.g. GBPUSD in a USD account): the price is the conversion rate
    - BASE+CUR (e.g. USDJPY in a USD account): the conversion rate is 1 / price

Resolution reuses any subscription already configured for either pair, no
matter who requested it, and otherwise subscribes to the tradable orientation
at the finest resolution already in use so conversion rates are never staler
than the fastest data the strategy consumes.

The service operates on registries passed in by the caller and holds no state
besides the account currency. It mutates the subscription registry (at most
one new subscription per call) and never suspends, so repeated calls from a
single-threaded initialization phase cannot interleave.

Example:
    >>> from fxcash.domain.entities import Cash
    >>> from fxcash.domain.value_objects import Resolution, SecurityType
    >>> from fxcash.infrastructure.market_data import SecurityManager, SubscriptionManager
    >>> subscriptions = SubscriptionManager()
    >>> _ = subscriptions.add(SecurityType.EQUITY, "SPY", Resolution.MINUTE)
    >>> cash = Cash("JPY", 100_000, "0.0067")
    >>> resolver = CurrencyFeedResolver("USD")
    >>> config = resolver.ensure_currency_data_feed(cash, subscriptions, SecurityManager())
    >>> config.symbol, cash.is_inverted
    ('USDJPY', True)
"""

# Standard library imports
import logging

from ..constants import ACCOUNT_CURRENCY
from ..entities.cash import Cash
from ..entities.subscription import SubscriptionDataConfig
from ..exceptions_currency import (
    MissingReferenceSubscriptionException,
    NoConversionInstrumentException,
)
from ..interfaces import ISecurityRegistry, ISubscriptionRegistry
from ..value_objects import CurrencySymbol, PairOrientation, SecurityType

logger = logging.getLogger(__name__)


class CurrencyFeedResolver:
    """Domain service resolving the conversion data feed for cash holdings."""

    def __init__(self, account_currency: str | CurrencySymbol = ACCOUNT_CURRENCY) -> None:
        self.account_currency = CurrencySymbol(account_currency)

    def candidate_pairs(self, currency: CurrencySymbol) -> dict[str, PairOrientation]:
        """Pair symbols able to price ``currency``, in order of preference."""
        return {
            currency.pair_with(self.account_currency): PairOrientation.DIRECT,
            self.account_currency.pair_with(currency): PairOrientation.INVERTED,
        }

    def ensure_currency_data_feed(
        self,
        cash: Cash,
        subscriptions: ISubscriptionRegistry,
        securities: ISecurityRegistry,
    ) -> SubscriptionDataConfig | None:
        """Bind ``cash`` to a subscription pricing it in the account currency.

        Args:
            cash: Holding to resolve
            subscriptions: Active subscription registry
            securities: Registry of tradable instruments

        Returns:
            The bound subscription, or None if ``cash`` is the account currency

        Raises:
            MissingReferenceSubscriptionException: If there are no subscriptions
                to take a resolution from
            NoConversionInstrumentException: If neither pair orientation is tradable
        """
        if cash.symbol == self.account_currency:
            cash.mark_as_base_currency()
            return None

        if cash.subscription is not None:
            logger.debug(f"{cash.symbol} already priced from {cash.subscribed_symbol}")
            return cash.subscription

        existing = list(subscriptions.subscriptions)
        if not existing:
            raise MissingReferenceSubscriptionException(
                cash.symbol.code, self.account_currency.code
            )

        candidates = self.candidate_pairs(cash.symbol)

        # Reuse an active feed for either orientation
        for config in existing:
            orientation = candidates.get(config.symbol)
            if orientation is not None:
                cash.bind(config, orientation)
                logger.info(
                    f"Reusing subscription {config.symbol} for {cash.symbol} conversion",
                    extra={
                        "currency": cash.symbol.code,
                        "pair": config.symbol,
                        "subscription_index": config.index,
                    },
                )
                return config

        pair, orientation = self._select_tradable_pair(cash.symbol, candidates, securities)
        resolution = min(config.resolution for config in existing)

        config = subscriptions.add(
            SecurityType.FOREX,
            pair,
            resolution,
            is_currency_conversion_feed=True,
            is_internal_feed=True,
        )
        if pair not in securities:
            securities.add(pair, resolution, SecurityType.FOREX)

        cash.bind(config, orientation)
        logger.info(
            f"Added {resolution.name.lower()} conversion feed {pair} for {cash.symbol}",
            extra={
                "currency": cash.symbol.code,
                "pair": pair,
                "subscription_index": config.index,
            },
        )
        return config

    def _select_tradable_pair(
        self,
        currency: CurrencySymbol,
        candidates: dict[str, PairOrientation],
        securities: ISecurityRegistry,
    ) -> tuple[str, PairOrientation]:
        for pair, orientation in candidates.items():
            if securities.is_tradable(pair, SecurityType.FOREX):
                return pair, orientation

        raise NoConversionInstrumentException(
            currency.code, self.account_currency.code, list(candidates)
        )
