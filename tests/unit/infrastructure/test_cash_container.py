"""
Tests for the cash container.

Covers construction from configuration, subscription registration and
lazily created use cases.
"""

from decimal import Decimal
from unittest.mock import patch

import pytest

from fxcash.application.config import (
    AccountConfig,
    ApplicationConfig,
    FeedConfig,
    LoggingConfig,
)
from fxcash.application.use_cases import (
    EnsureCurrencyFeedsRequest,
    GetCashBalancesRequest,
    UpdateConversionRatesRequest,
)
from fxcash.domain.value_objects import Resolution, SecurityType
from fxcash.infrastructure.container import CashContainer


@pytest.fixture
def config() -> ApplicationConfig:
    return ApplicationConfig(
        account=AccountConfig(
            account_currency="USD",
            starting_cash={"USD": Decimal("5000"), "JPY": Decimal("200000")},
        ),
        feed=FeedConfig(default_resolution=Resolution.HOUR, extra_forex_pairs=["USDXYZ"]),
    )


class TestCashContainerInitialization:
    def test_default_container(self):
        container = CashContainer()

        assert container.cash_book.account_currency == "USD"
        assert len(container.cash_book) == 1
        assert len(container.subscriptions) == 0

    def test_cash_book_from_starting_cash(self, config):
        container = CashContainer(config)

        assert container.cash_book["USD"].quantity == Decimal("5000")
        assert container.cash_book["USD"].is_base_currency
        assert container.cash_book["JPY"].quantity == Decimal("200000")
        assert container.cash_book["JPY"].conversion_rate == Decimal("0")

    def test_extra_forex_pairs_are_tradable(self, config):
        container = CashContainer(config)

        assert container.securities.is_tradable("USDXYZ", SecurityType.FOREX)
        assert container.securities.is_tradable("USDJPY", SecurityType.FOREX)

    def test_invalid_config_rejected(self):
        config = ApplicationConfig(account=AccountConfig(account_currency="DOLLARS"))

        with pytest.raises(ValueError, match="Invalid account currency"):
            CashContainer(config)

    def test_configure_logging(self, config):
        config.logging = LoggingConfig(level="DEBUG")

        with patch("fxcash.infrastructure.container.setup_structured_logging") as setup:
            CashContainer(config, configure_logging=True)

        setup.assert_called_once_with(config.logging)

    def test_logging_untouched_by_default(self, config):
        with patch("fxcash.infrastructure.container.setup_structured_logging") as setup:
            CashContainer(config)

        setup.assert_not_called()


class TestCashContainerSubscriptions:
    def test_add_subscription_uses_default_resolution(self, config):
        container = CashContainer(config)

        subscription = container.add_subscription("SPY")

        assert subscription.resolution == Resolution.HOUR
        assert subscription.index == 0
        assert "SPY" in container.securities

    def test_add_subscription_with_tick_resolution(self, config):
        container = CashContainer(config)

        subscription = container.add_subscription("EURUSD", SecurityType.FOREX, Resolution.TICK)

        assert subscription.resolution == Resolution.TICK
        assert subscription.security_type == SecurityType.FOREX


class TestCashContainerUseCases:
    def test_use_cases_are_cached(self, config):
        container = CashContainer(config)

        assert container.ensure_currency_feeds is container.ensure_currency_feeds
        assert container.update_conversion_rates is container.update_conversion_rates
        assert container.get_cash_balances is container.get_cash_balances

    def test_use_cases_share_cash_book(self, config):
        container = CashContainer(config)

        assert container.ensure_currency_feeds.cash_book is container.cash_book
        assert container.ensure_currency_feeds.subscriptions is container.subscriptions
        assert container.update_conversion_rates.cash_book is container.cash_book
        assert container.get_cash_balances.cash_book is container.cash_book

    @pytest.mark.asyncio
    async def test_full_cycle(self, config, make_tick):
        container = CashContainer(config)
        container.add_subscription("SPY")

        ensured = await container.ensure_currency_feeds.execute(EnsureCurrencyFeedsRequest())
        jpy_index = container.cash_book["JPY"].subscription_index
        updated = await container.update_conversion_rates.execute(
            UpdateConversionRatesRequest(data={jpy_index: [make_tick("USDJPY", "160")]})
        )
        balances = await container.get_cash_balances.execute(GetCashBalancesRequest())

        assert ensured.success and updated.success and balances.success
        assert container.subscriptions.get(jpy_index).resolution == Resolution.HOUR
        assert balances.balances["JPY"]["value"] == Decimal("1250")
        assert balances.total_value == Decimal("6250")
