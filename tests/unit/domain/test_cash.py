"""
Test suite for the Cash entity.
Covers construction, valuation, quantity mutation and conversion rate updates.
"""

# Standard library imports
import logging
from decimal import Decimal

# Third-party imports
import pytest

# Local imports
from fxcash.domain.entities import Cash, SubscriptionDataConfig
from fxcash.domain.exceptions import EntityValidationException
from fxcash.domain.exceptions_currency import InvalidCurrencySymbolException
from fxcash.domain.value_objects import CurrencySymbol, PairOrientation, Resolution, SecurityType


def _bind(cash: Cash, pair: str, orientation: PairOrientation, index: int = 0) -> None:
    config = SubscriptionDataConfig(pair, SecurityType.FOREX, Resolution.MINUTE, index)
    cash.bind(config, orientation)


class TestCashCreation:
    """Test Cash creation and validation"""

    def test_constructor_capitalizes_symbol(self):
        cash = Cash("lower", 0, 0)

        assert cash.symbol == "LOWER"
        assert cash.symbol.code == "LOWER"

    def test_constructor_sets_properties(self):
        cash = Cash("JPY", 1, Decimal("1.2"))

        assert cash.symbol == "JPY"
        assert cash.quantity == Decimal("1")
        assert cash.conversion_rate == Decimal("1.2")
        assert isinstance(cash.quantity, Decimal)

    def test_constructor_accepts_currency_symbol(self):
        cash = Cash(CurrencySymbol("eur"), "10.5", "1.1")

        assert cash.symbol == CurrencySymbol("EUR")
        assert cash.quantity == Decimal("10.5")
        assert cash.conversion_rate == Decimal("1.1")

    def test_floats_are_converted_through_str(self):
        cash = Cash("GBP", 0.1, 1.25)

        assert cash.quantity == Decimal("0.1")
        assert cash.conversion_rate == Decimal("1.25")

    @pytest.mark.parametrize("symbol", ["", "   ", None])
    def test_empty_symbol_is_rejected(self, symbol):
        with pytest.raises(InvalidCurrencySymbolException, match="cannot be empty"):
            Cash(symbol, 0, 0)

    def test_empty_symbol_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            Cash("", 0, 0)

    def test_non_numeric_quantity_is_rejected(self):
        with pytest.raises(EntityValidationException, match="quantity"):
            Cash("JPY", "lots", 0)

    def test_new_cash_is_unresolved(self):
        cash = Cash("JPY", 100, Decimal("0.01"))

        assert not cash.is_resolved
        assert not cash.is_base_currency
        assert not cash.is_inverted
        assert cash.subscription is None
        assert cash.subscribed_symbol is None
        assert cash.subscription_index is None
        assert cash.orientation is None


class TestCashValuation:
    """Test value in base currency"""

    def test_computes_value_in_base_currency(self):
        cash = Cash("JPY", 100, Decimal(1) / 100)

        assert cash.value_in_base_currency == Decimal("1")

    def test_negative_quantity_gives_negative_value(self):
        cash = Cash("GBP", -200, Decimal("1.5"))

        assert cash.value_in_base_currency == Decimal("-300.0")

    def test_set_quantity_is_immediately_visible(self):
        cash = Cash("GBP", 100, Decimal("1.5"))

        cash.set_quantity(40)

        assert cash.quantity == Decimal("40")
        assert cash.value_in_base_currency == Decimal("60.0")

    def test_add_quantity_returns_new_quantity(self):
        cash = Cash("GBP", 100, Decimal("1.5"))

        assert cash.add_quantity("-25.5") == Decimal("74.5")
        assert cash.quantity == Decimal("74.5")

    def test_set_conversion_rate(self):
        cash = Cash("GBP", 10, 0)

        cash.set_conversion_rate("1.3")

        assert cash.conversion_rate == Decimal("1.3")
        assert cash.value_in_base_currency == Decimal("13.0")

    def test_mark_as_base_currency_sets_rate_to_one(self):
        cash = Cash("USD", 50, 0)

        cash.mark_as_base_currency()

        assert cash.is_base_currency
        assert cash.is_resolved
        assert cash.conversion_rate == Decimal("1")
        assert cash.value_in_base_currency == Decimal("50")


class TestCashBinding:
    """Test binding to a conversion feed"""

    def test_bind_records_subscription_and_orientation(self):
        cash = Cash("JPY", 100, Decimal("0.01"))

        _bind(cash, "USDJPY", PairOrientation.INVERTED, index=4)

        assert cash.is_resolved
        assert cash.is_inverted
        assert cash.subscribed_symbol == "USDJPY"
        assert cash.subscription_index == 4
        assert cash.orientation is PairOrientation.INVERTED

    def test_direct_binding_is_not_inverted(self):
        cash = Cash("GBP", 100, Decimal("1"))

        _bind(cash, "GBPUSD", PairOrientation.DIRECT)

        assert not cash.is_inverted


class TestCashUpdate:
    """Test conversion rate updates from market data"""

    def test_update_modifies_conversion_rate(self, make_tick):
        cash = Cash("GBP", 100, Decimal(1) / 100)
        _bind(cash, "GBPUSD", PairOrientation.DIRECT)

        cash.update({0: [make_tick("GBPUSD", Decimal("1.5"))]})

        assert cash.conversion_rate == Decimal("1.5")

    def test_update_modifies_conversion_rate_as_inverted_value(self, make_tick):
        cash = Cash("JPY", 100, Decimal(1) / 100)
        _bind(cash, "USDJPY", PairOrientation.INVERTED)

        cash.update({0: [make_tick("USDJPY", Decimal("120"), "119.95", "120.05")]})

        assert cash.conversion_rate == Decimal(1) / Decimal(120)

    def test_last_data_point_wins(self, make_tick):
        cash = Cash("GBP", 100, Decimal("1"))
        _bind(cash, "GBPUSD", PairOrientation.DIRECT)

        cash.update(
            {
                0: [
                    make_tick("GBPUSD", "1.40"),
                    make_tick("GBPUSD", "1.45"),
                    make_tick("GBPUSD", "1.50"),
                ]
            }
        )

        assert cash.conversion_rate == Decimal("1.50")

    def test_missing_data_leaves_rate_unchanged(self, make_tick):
        cash = Cash("GBP", 100, Decimal("1.3"))
        _bind(cash, "GBPUSD", PairOrientation.DIRECT, index=2)

        cash.update({})
        cash.update({2: []})
        cash.update({0: [make_tick("EURUSD", "1.1")]})

        assert cash.conversion_rate == Decimal("1.3")

    def test_unresolved_cash_ignores_data(self, make_tick):
        cash = Cash("GBP", 100, Decimal("1.3"))

        cash.update({0: [make_tick("GBPUSD", "1.5")]})

        assert cash.conversion_rate == Decimal("1.3")

    def test_base_currency_ignores_data(self, make_tick):
        cash = Cash("USD", 100, 0)
        cash.mark_as_base_currency()

        cash.update({0: [make_tick("EURUSD", "1.1")]})

        assert cash.conversion_rate == Decimal("1")

    def test_zero_price_on_inverted_pair_keeps_previous_rate(self, make_tick, caplog):
        cash = Cash("JPY", 100, Decimal("0.008"))
        _bind(cash, "USDJPY", PairOrientation.INVERTED)

        with caplog.at_level(logging.WARNING, logger="fxcash.domain.entities.cash"):
            cash.update({0: [make_tick("USDJPY", "0")]})

        assert cash.conversion_rate == Decimal("0.008")
        assert "unusable price 0 on inverted pair USDJPY" in caplog.text

    def test_non_positive_direct_price_keeps_previous_rate(self, make_tick, caplog):
        cash = Cash("GBP", 100, Decimal("1.3"))
        _bind(cash, "GBPUSD", PairOrientation.DIRECT)

        with caplog.at_level(logging.WARNING, logger="fxcash.domain.entities.cash"):
            cash.update({0: [make_tick("GBPUSD", "0")]})

        assert cash.conversion_rate == Decimal("1.3")
        assert "non-positive or non-finite rate" in caplog.text

    @pytest.mark.parametrize("price", ["NaN", "Infinity", "-Infinity", "-120", "sNaN"])
    def test_unusable_price_on_inverted_pair_keeps_previous_rate(self, make_tick, price):
        cash = Cash("JPY", 100, Decimal("0.008"))
        _bind(cash, "USDJPY", PairOrientation.INVERTED)

        cash.update({0: [make_tick("USDJPY", price)]})

        assert cash.conversion_rate == Decimal("0.008")

    @pytest.mark.parametrize("price", ["NaN", "Infinity", "-1.5", "sNaN"])
    def test_unusable_price_on_direct_pair_keeps_previous_rate(self, make_tick, caplog, price):
        cash = Cash("GBP", 100, Decimal("1.3"))
        _bind(cash, "GBPUSD", PairOrientation.DIRECT)

        with caplog.at_level(logging.WARNING, logger="fxcash.domain.entities.cash"):
            cash.update({0: [make_tick("GBPUSD", price)]})

        assert cash.conversion_rate == Decimal("1.3")
        assert "Skipping conversion rate update for GBP" in caplog.text

    def test_nan_quote_bar_keeps_previous_rate(self, make_quote_bar):
        cash = Cash("EUR", 100, Decimal("1.1"))
        _bind(cash, "EURUSD", PairOrientation.DIRECT)

        cash.update({0: [make_quote_bar("EURUSD", "NaN", "1.1")]})

        assert cash.conversion_rate == Decimal("1.1")

    def test_recovers_after_bad_print(self, make_tick):
        cash = Cash("JPY", 100, Decimal("0.008"))
        _bind(cash, "USDJPY", PairOrientation.INVERTED)

        cash.update({0: [make_tick("USDJPY", "0")]})
        cash.update({0: [make_tick("USDJPY", "125")]})

        assert cash.conversion_rate == Decimal(1) / Decimal(125)

    def test_trade_bar_uses_close(self, make_trade_bar):
        cash = Cash("EUR", 100, Decimal("1"))
        _bind(cash, "EURUSD", PairOrientation.DIRECT)

        cash.update({0: [make_trade_bar("EURUSD", "1.0875")]})

        assert cash.conversion_rate == Decimal("1.0875")

    def test_quote_bar_uses_midpoint(self, make_quote_bar):
        cash = Cash("EUR", 100, Decimal("1"))
        _bind(cash, "EURUSD", PairOrientation.DIRECT)

        cash.update({0: [make_quote_bar("EURUSD", "1.0870", "1.0880")]})

        assert cash.conversion_rate == Decimal("1.0875")

    def test_quote_tick_without_trade_uses_midpoint(self, make_tick):
        cash = Cash("JPY", 100, Decimal("0.01"))
        _bind(cash, "USDJPY", PairOrientation.INVERTED)

        cash.update({0: [make_tick("USDJPY", None, "149.9", "150.1")]})

        assert cash.conversion_rate == Decimal(1) / Decimal("150.0")

    def test_value_tracks_quantity_times_rate_after_updates(self, make_tick):
        cash = Cash("JPY", 100000, Decimal("0.01"))
        _bind(cash, "USDJPY", PairOrientation.INVERTED)

        for price in ("150", "148.5", "151.25"):
            cash.update({0: [make_tick("USDJPY", price)]})
            assert cash.value_in_base_currency == cash.quantity * cash.conversion_rate
