"""
CashBook Entity - All currency holdings of an account
"""

# Standard library imports
import logging
from collections.abc import Iterator, Mapping, Sequence
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from ..constants import ACCOUNT_CURRENCY
from ..exceptions_currency import CurrencyConversionException, CurrencyNotFoundException
from ..value_objects import CurrencySymbol, MarketDataPoint
from .cash import Cash
from .subscription import SubscriptionDataConfig

if TYPE_CHECKING:
    from ..interfaces import ISecurityRegistry, ISubscriptionRegistry

logger = logging.getLogger(__name__)


class CashBook:
    """
    Collection of cash holdings keyed by currency.

    The account currency is always present with a conversion rate of 1.
    Other currencies are priced once their data feeds are resolved through
    ``ensure_currency_data_feeds`` and kept current by ``update``.
    """

    def __init__(self, account_currency: str | CurrencySymbol = ACCOUNT_CURRENCY) -> None:
        self._account_currency = CurrencySymbol(account_currency)
        self._cash: dict[CurrencySymbol, Cash] = {}

        base = Cash(self._account_currency, Decimal("0"), Decimal("1"), self._account_currency)
        base.mark_as_base_currency()
        self._cash[self._account_currency] = base

    @property
    def account_currency(self) -> CurrencySymbol:
        return self._account_currency

    def add(
        self,
        symbol: str | CurrencySymbol,
        quantity: Decimal | float | int | str = Decimal("0"),
        conversion_rate: Decimal | float | int | str | None = None,
    ) -> Cash:
        """Add a currency holding, or update an existing one in place.

        An existing holding keeps its current rate unless ``conversion_rate``
        is given; a new holding starts at zero until priced. The account
        currency keeps its rate of 1 regardless of ``conversion_rate``.

        Returns:
            The cash entry for ``symbol``
        """
        currency = CurrencySymbol(symbol)
        cash = self._cash.get(currency)
        if cash is None:
            cash = Cash(
                currency,
                quantity,
                Decimal("0") if conversion_rate is None else conversion_rate,
                account_currency=self._account_currency,
            )
            self._cash[currency] = cash
            logger.debug(f"Added {currency} to cash book with quantity {cash.quantity}")
        else:
            cash.set_quantity(quantity)
            if conversion_rate is not None and not cash.is_base_currency:
                cash.set_conversion_rate(conversion_rate)

        if currency == self._account_currency:
            cash.mark_as_base_currency()

        return cash

    def get(self, symbol: str | CurrencySymbol) -> Cash | None:
        """Get the holding for ``symbol`` if present."""
        return self._cash.get(CurrencySymbol(symbol))

    def __getitem__(self, symbol: str | CurrencySymbol) -> Cash:
        cash = self.get(symbol)
        if cash is None:
            raise CurrencyNotFoundException(str(symbol).upper())
        return cash

    def __contains__(self, symbol: object) -> bool:
        if not isinstance(symbol, (str, CurrencySymbol)) or not str(symbol).strip():
            return False
        return CurrencySymbol(symbol) in self._cash

    def __iter__(self) -> Iterator[Cash]:
        return iter(self._cash.values())

    def __len__(self) -> int:
        return len(self._cash)

    @property
    def total_value_in_account_currency(self) -> Decimal:
        """Sum of all holdings valued in the account currency."""
        return sum((cash.value_in_base_currency for cash in self), Decimal("0"))

    def ensure_currency_data_feeds(
        self,
        subscriptions: "ISubscriptionRegistry",
        securities: "ISecurityRegistry",
    ) -> list[SubscriptionDataConfig]:
        """Resolve the conversion data feed of every holding.

        Holdings bound by an earlier call keep their binding and are
        included again, so the result always covers the whole book.

        Returns:
            Subscription pricing each non-account currency, in cash book order,
            whether bound by this call or an earlier one
        """
        from ..services.currency_feed_resolver import CurrencyFeedResolver

        resolver = CurrencyFeedResolver(self._account_currency)
        bound = []
        for cash in self:
            config = resolver.ensure_currency_data_feed(cash, subscriptions, securities)
            if config is not None:
                bound.append(config)
        return bound

    def update(self, data: Mapping[int, Sequence[MarketDataPoint]]) -> None:
        """Apply one cycle of market data to every holding."""
        for cash in self:
            cash.update(data)

    def convert(
        self,
        amount: Decimal | float | int | str,
        source: str | CurrencySymbol,
        target: str | CurrencySymbol,
    ) -> Decimal:
        """Convert an amount between two held currencies at current rates.

        Raises:
            CurrencyNotFoundException: If either currency is not held
            CurrencyConversionException: If the target rate is zero
        """
        if not isinstance(amount, Decimal):
            amount = Decimal(str(amount))

        source_cash = self[source]
        target_cash = self[target]
        if source_cash.symbol == target_cash.symbol:
            return amount

        if target_cash.conversion_rate == 0:
            raise CurrencyConversionException(
                source_cash.symbol.code, target_cash.symbol.code, target_cash.conversion_rate
            )

        return amount * source_cash.conversion_rate / target_cash.conversion_rate

    def convert_to_account_currency(
        self, amount: Decimal | float | int | str, source: str | CurrencySymbol
    ) -> Decimal:
        """Convert an amount in ``source`` into the account currency."""
        return self.convert(amount, source, self._account_currency)

    def to_dict(self) -> dict[str, Any]:
        """Snapshot of all holdings for reporting."""
        return {
            "account_currency": self._account_currency.code,
            "total_value": str(self.total_value_in_account_currency),
            "cash": {
                cash.symbol.code: {
                    "quantity": str(cash.quantity),
                    "conversion_rate": str(cash.conversion_rate),
                    "value_in_account_currency": str(cash.value_in_base_currency),
                    "subscribed_symbol": cash.subscribed_symbol,
                    "is_inverted": cash.is_inverted,
                }
                for cash in self
            },
        }

    def __repr__(self) -> str:
        return f"CashBook(account_currency='{self._account_currency}', currencies={len(self)})"
