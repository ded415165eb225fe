"""
Cash Use Cases

Handles conversion feed resolution, conversion rate updates and cash
balance reporting for an account's cash book.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from fxcash.domain.entities import CashBook
from fxcash.domain.interfaces import ISecurityRegistry, ISubscriptionRegistry
from fxcash.domain.value_objects import MarketDataPoint

from .base import UseCase, UseCaseRequest, UseCaseResponse


# Request/Response DTOs
@dataclass
class EnsureCurrencyFeedsRequest(UseCaseRequest):
    """Request to resolve conversion feeds for every held currency."""


@dataclass
class EnsureCurrencyFeedsResponse(UseCaseResponse):
    """Response with the feed bound to each currency."""

    bindings: list[dict[str, Any]] = field(default_factory=list)
    added_subscriptions: int = 0


@dataclass
class UpdateConversionRatesRequest(UseCaseRequest):
    """Request to apply one cycle of market data."""

    data: Mapping[int, Sequence[MarketDataPoint]]


@dataclass
class UpdateConversionRatesResponse(UseCaseResponse):
    """Response with conversion rates after the update."""

    conversion_rates: dict[str, Decimal] = field(default_factory=dict)


@dataclass
class GetCashBalancesRequest(UseCaseRequest):
    """Request to get the cash book balances."""

    currency: str | None = None


@dataclass
class GetCashBalancesResponse(UseCaseResponse):
    """Response with cash balances in the account currency."""

    account_currency: str | None = None
    balances: dict[str, dict[str, Any]] = field(default_factory=dict)
    total_value: Decimal | None = None


# Use Case Implementations
class EnsureCurrencyFeedsUseCase(UseCase[EnsureCurrencyFeedsRequest, EnsureCurrencyFeedsResponse]):
    """
    Binds each currency in the cash book to a data feed pricing it.

    Runs during initialization, after the strategy's own subscriptions are in
    place. Resolution failures are configuration errors and are returned as
    an error response.
    """

    def __init__(
        self,
        cash_book: CashBook,
        subscriptions: ISubscriptionRegistry,
        securities: ISecurityRegistry,
    ) -> None:
        """Initialize ensure currency feeds use case."""
        super().__init__("EnsureCurrencyFeedsUseCase")
        self.cash_book = cash_book
        self.subscriptions = subscriptions
        self.securities = securities

    async def validate(self, request: EnsureCurrencyFeedsRequest) -> str | None:
        """Validate the request."""
        return None

    async def process(self, request: EnsureCurrencyFeedsRequest) -> EnsureCurrencyFeedsResponse:
        """Resolve every currency feed."""
        count_before = len(self.subscriptions.subscriptions)
        self.cash_book.ensure_currency_data_feeds(self.subscriptions, self.securities)
        added = len(self.subscriptions.subscriptions) - count_before

        bindings = [
            {
                "currency": cash.symbol.code,
                "subscribed_symbol": cash.subscribed_symbol,
                "subscription_index": cash.subscription_index,
                "is_inverted": cash.is_inverted,
            }
            for cash in self.cash_book
            if not cash.is_base_currency
        ]

        if added:
            self.logger.info(
                f"Added {added} currency conversion subscription(s)",
                extra={"request_id": str(request.request_id)},
            )

        return EnsureCurrencyFeedsResponse(
            success=True,
            request_id=request.request_id,
            bindings=bindings,
            added_subscriptions=added,
        )


class UpdateConversionRatesUseCase(
    UseCase[UpdateConversionRatesRequest, UpdateConversionRatesResponse]
):
    """
    Applies one data cycle to the cash book.
    """

    def __init__(self, cash_book: CashBook) -> None:
        """Initialize update conversion rates use case."""
        super().__init__("UpdateConversionRatesUseCase")
        self.cash_book = cash_book

    async def validate(self, request: UpdateConversionRatesRequest) -> str | None:
        """Validate the request."""
        if request.data is None:
            return "Market data is required"

        for index in request.data:
            if not isinstance(index, int) or index < 0:
                return f"Invalid subscription index: {index}"

        return None

    async def process(
        self, request: UpdateConversionRatesRequest
    ) -> UpdateConversionRatesResponse:
        """Update conversion rates."""
        self.cash_book.update(request.data)

        return UpdateConversionRatesResponse(
            success=True,
            request_id=request.request_id,
            conversion_rates={cash.symbol.code: cash.conversion_rate for cash in self.cash_book},
        )


class GetCashBalancesUseCase(UseCase[GetCashBalancesRequest, GetCashBalancesResponse]):
    """
    Reports cash holdings valued in the account currency.
    """

    def __init__(self, cash_book: CashBook) -> None:
        """Initialize get cash balances use case."""
        super().__init__("GetCashBalancesUseCase")
        self.cash_book = cash_book

    async def validate(self, request: GetCashBalancesRequest) -> str | None:
        """Validate the request."""
        if request.currency is not None and request.currency not in self.cash_book:
            return f"Currency {request.currency} is not held"
        return None

    async def process(self, request: GetCashBalancesRequest) -> GetCashBalancesResponse:
        """Build the balance snapshot."""
        holdings = (
            [self.cash_book[request.currency]] if request.currency else list(self.cash_book)
        )

        balances = {
            cash.symbol.code: {
                "quantity": cash.quantity,
                "conversion_rate": cash.conversion_rate,
                "value": cash.value_in_base_currency,
                "is_resolved": cash.is_resolved,
            }
            for cash in holdings
        }

        return GetCashBalancesResponse(
            success=True,
            request_id=request.request_id,
            account_currency=self.cash_book.account_currency.code,
            balances=balances,
            total_value=sum((cash.value_in_base_currency for cash in holdings), Decimal("0")),
        )
