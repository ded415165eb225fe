"""
Dependency Injection Container - Wires configuration to application objects.

Builds the cash book, the in-memory registries and the cash use cases from
an ApplicationConfig, so a host engine only needs to register its own
subscriptions before resolving currency feeds.
"""

import logging

from fxcash.application.config import ApplicationConfig
from fxcash.application.use_cases import (
    EnsureCurrencyFeedsUseCase,
    GetCashBalancesUseCase,
    UpdateConversionRatesUseCase,
)
from fxcash.domain.constants import FOREX_CURRENCY_PAIRS
from fxcash.domain.entities import CashBook, SubscriptionDataConfig
from fxcash.domain.value_objects import Resolution, SecurityType
from fxcash.infrastructure.market_data import SecurityManager, SubscriptionManager
from fxcash.infrastructure.monitoring import setup_structured_logging

logger = logging.getLogger(__name__)


class CashContainer:
    """
    Container holding one account's cash book and its collaborators.

    Use cases are created lazily and cached.
    """

    def __init__(self, config: ApplicationConfig | None = None, configure_logging: bool = False):
        """
        Initialize the container.

        Args:
            config: Application configuration (defaults to ApplicationConfig())
            configure_logging: Install root logging handlers from config.logging
        """
        self.config = config or ApplicationConfig()
        self.config.validate()

        if configure_logging:
            setup_structured_logging(self.config.logging)

        self.subscriptions = SubscriptionManager()
        self.securities = SecurityManager(
            known_forex_pairs=[*FOREX_CURRENCY_PAIRS, *self.config.feed.extra_forex_pairs]
        )
        self.cash_book = self._build_cash_book()

        self._ensure_feeds: EnsureCurrencyFeedsUseCase | None = None
        self._update_rates: UpdateConversionRatesUseCase | None = None
        self._get_balances: GetCashBalancesUseCase | None = None

    def _build_cash_book(self) -> CashBook:
        cash_book = CashBook(self.config.account.account_currency)
        for currency, amount in self.config.account.starting_cash.items():
            cash_book.add(currency, amount)

        logger.info(
            f"Cash book initialized with {len(cash_book)} currencies",
            extra={"currency": cash_book.account_currency.code},
        )
        return cash_book

    def add_subscription(
        self,
        symbol: str,
        security_type: SecurityType = SecurityType.EQUITY,
        resolution: Resolution | None = None,
    ) -> SubscriptionDataConfig:
        """
        Subscribe to an instrument requested by trading logic.

        Args:
            symbol: Instrument symbol
            security_type: Instrument type
            resolution: Data granularity (defaults to config.feed.default_resolution)

        Returns:
            The new subscription config
        """
        if resolution is None:
            resolution = self.config.feed.default_resolution
        self.securities.add(symbol, resolution, security_type)
        return self.subscriptions.add(security_type, symbol, resolution)

    @property
    def ensure_currency_feeds(self) -> EnsureCurrencyFeedsUseCase:
        if self._ensure_feeds is None:
            self._ensure_feeds = EnsureCurrencyFeedsUseCase(
                self.cash_book, self.subscriptions, self.securities
            )
        return self._ensure_feeds

    @property
    def update_conversion_rates(self) -> UpdateConversionRatesUseCase:
        if self._update_rates is None:
            self._update_rates = UpdateConversionRatesUseCase(self.cash_book)
        return self._update_rates

    @property
    def get_cash_balances(self) -> GetCashBalancesUseCase:
        if self._get_balances is None:
            self._get_balances = GetCashBalancesUseCase(self.cash_book)
        return self._get_balances
