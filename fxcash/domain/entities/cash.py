"""
Cash Entity - A holding of one currency valued in the account currency
"""

# Standard library imports
import logging
from collections.abc import Mapping, Sequence
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING

from ..constants import ACCOUNT_CURRENCY
from ..exceptions import EntityValidationException
from ..value_objects import CurrencySymbol, MarketDataPoint, PairOrientation
from .subscription import SubscriptionDataConfig

if TYPE_CHECKING:
    from ..interfaces import ISecurityRegistry, ISubscriptionRegistry

logger = logging.getLogger(__name__)


class Cash:
    """
    Cash entity representing an amount held in a single currency.

    Tracks the quantity held and the rate converting one unit of it into the
    account currency. Once bound to a currency data feed, the rate is kept
    current by ``update``. All financial values use Decimal for precision.
    """

    def __init__(
        self,
        symbol: str | CurrencySymbol,
        quantity: Decimal | float | int | str = Decimal("0"),
        conversion_rate: Decimal | float | int | str = Decimal("0"),
        account_currency: str | CurrencySymbol | None = None,
    ) -> None:
        """Initialize a cash holding.

        Args:
            symbol: Currency code, normalized to uppercase
            quantity: Signed amount held
            conversion_rate: Account currency units per unit of this currency;
                may be a placeholder until a data feed is resolved
            account_currency: Currency this holding is valued in; used by
                ensure_currency_data_feed when no account currency is passed

        Raises:
            InvalidCurrencySymbolException: If symbol is empty
        """
        self._symbol = CurrencySymbol(symbol)
        self._quantity = self._coerce("quantity", quantity)
        self._conversion_rate = self._coerce("conversion_rate", conversion_rate)

        # Feed binding
        self._subscription: SubscriptionDataConfig | None = None
        self._orientation: PairOrientation | None = None
        self._is_base_currency = False
        self._account_currency = (
            CurrencySymbol(account_currency) if account_currency is not None else None
        )

    def _coerce(self, field: str, value: Decimal | float | int | str) -> Decimal:
        if isinstance(value, Decimal):
            return value
        try:
            return Decimal(str(value))
        except InvalidOperation:
            raise EntityValidationException(
                "Cash", self._symbol.code, field, value, "must be numeric"
            ) from None

    # ------------------------------------------------------------------
    # Identity and amounts
    # ------------------------------------------------------------------

    @property
    def symbol(self) -> CurrencySymbol:
        """Currency of this holding."""
        return self._symbol

    @property
    def quantity(self) -> Decimal:
        return self._quantity

    @property
    def conversion_rate(self) -> Decimal:
        """Account currency units per one unit of this currency."""
        return self._conversion_rate

    @property
    def value_in_base_currency(self) -> Decimal:
        """Value of the holding in the account currency."""
        return self._quantity * self._conversion_rate

    def set_quantity(self, quantity: Decimal | float | int | str) -> None:
        """Replace the amount held."""
        self._quantity = self._coerce("quantity", quantity)

    def add_quantity(self, delta: Decimal | float | int | str) -> Decimal:
        """Add a signed amount to the holding.

        Returns:
            The new quantity
        """
        self._quantity += self._coerce("quantity", delta)
        return self._quantity

    def set_conversion_rate(self, conversion_rate: Decimal | float | int | str) -> None:
        """Override the conversion rate, e.g. when seeding from a known price."""
        self._conversion_rate = self._coerce("conversion_rate", conversion_rate)

    # ------------------------------------------------------------------
    # Feed binding
    # ------------------------------------------------------------------

    @property
    def subscription(self) -> SubscriptionDataConfig | None:
        """Subscription supplying this currency's conversion rate."""
        return self._subscription

    @property
    def subscribed_symbol(self) -> str | None:
        """Pair symbol this holding is priced from."""
        return self._subscription.symbol if self._subscription else None

    @property
    def subscription_index(self) -> int | None:
        return self._subscription.index if self._subscription else None

    @property
    def orientation(self) -> PairOrientation | None:
        return self._orientation

    @property
    def is_inverted(self) -> bool:
        """True if the bound pair is quoted BASE+FOREIGN and prices must be inverted."""
        return self._orientation is PairOrientation.INVERTED

    @property
    def is_base_currency(self) -> bool:
        return self._is_base_currency

    @property
    def is_resolved(self) -> bool:
        """Check if this holding can be priced: base currency or bound to a feed."""
        return self._is_base_currency or self._subscription is not None

    def mark_as_base_currency(self) -> None:
        """Flag this holding as the account currency; its rate is always 1."""
        self._is_base_currency = True
        self._subscription = None
        self._orientation = None
        self._conversion_rate = Decimal("1")

    def bind(self, subscription: SubscriptionDataConfig, orientation: PairOrientation) -> None:
        """Bind this holding to the subscription that prices it."""
        self._subscription = subscription
        self._orientation = orientation

    def ensure_currency_data_feed(
        self,
        subscriptions: "ISubscriptionRegistry",
        securities: "ISecurityRegistry",
        account_currency: str | CurrencySymbol | None = None,
    ) -> SubscriptionDataConfig | None:
        """Make sure a data feed exists that prices this currency.

        Args:
            subscriptions: Active subscription registry; may gain one subscription
            securities: Registry of tradable instruments
            account_currency: Account currency (defaults to the one given at
                construction, then USD)

        Returns:
            The bound subscription, or None for the account currency

        Raises:
            MissingReferenceSubscriptionException: If no subscriptions exist yet
            NoConversionInstrumentException: If no tradable pair prices this currency
        """
        from ..services.currency_feed_resolver import CurrencyFeedResolver

        resolver = CurrencyFeedResolver(
            account_currency or self._account_currency or ACCOUNT_CURRENCY
        )
        return resolver.ensure_currency_data_feed(self, subscriptions, securities)

    # ------------------------------------------------------------------
    # Conversion rate updates
    # ------------------------------------------------------------------

    def update(self, data: Mapping[int, Sequence[MarketDataPoint]]) -> None:
        """Update the conversion rate from one cycle of market data.

        The last data point delivered for the bound subscription wins; earlier
        points in the same batch are superseded. Missing data leaves the rate
        unchanged. A price that cannot produce a positive rate is logged and
        skipped, keeping the previous rate.

        Args:
            data: New data points for the cycle, keyed by subscription index
        """
        if self._is_base_currency or self._subscription is None:
            return

        points = data.get(self._subscription.index)
        if not points:
            return

        price = points[-1].value
        try:
            rate = self._orientation.to_conversion_rate(price)  # type: ignore[union-attr]
        except ArithmeticError:
            logger.warning(
                f"Skipping conversion rate update for {self._symbol}: "
                f"unusable price {price} on inverted pair {self._subscription.symbol}",
                extra={
                    "currency": self._symbol.code,
                    "pair": self._subscription.symbol,
                    "subscription_index": self._subscription.index,
                },
            )
            return

        if not rate.is_finite() or rate <= 0:
            logger.warning(
                f"Skipping conversion rate update for {self._symbol}: "
                f"non-positive or non-finite rate {rate} from {self._subscription.symbol}",
                extra={
                    "currency": self._symbol.code,
                    "pair": self._subscription.symbol,
                    "subscription_index": self._subscription.index,
                },
            )
            return

        self._conversion_rate = rate

    def __repr__(self) -> str:
        return (
            f"Cash(symbol='{self._symbol}', quantity={self._quantity}, "
            f"conversion_rate={self._conversion_rate})"
        )
