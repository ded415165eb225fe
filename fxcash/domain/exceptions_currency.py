"""
Currency-specific exception hierarchy.

Covers invalid currency input, cash book lookups and conversions, and the
failure modes of currency data feed resolution.
"""

from decimal import Decimal
from typing import Any

from .exceptions import DomainException

# ============================================================================
# Currency Exceptions
# ============================================================================


class CurrencyException(DomainException):
    """Base exception for all currency-related errors."""

    def __init__(self, message: str, currency: str | None = None, **kwargs: Any) -> None:
        details = {"currency": currency} if currency else {}
        details.update(kwargs)
        super().__init__(message, details)
        self.currency = currency


class InvalidCurrencySymbolException(CurrencyException, ValueError):
    """Raised when a currency symbol is empty or malformed."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Currency symbol cannot be empty: {value!r}", value=value)


class CurrencyNotFoundException(CurrencyException):
    """Raised when a currency is not held in the cash book."""

    def __init__(self, currency: str) -> None:
        super().__init__(f"Currency {currency} is not present in the cash book", currency)


class CurrencyConversionException(CurrencyException):
    """Raised when an amount cannot be converted between two currencies."""

    def __init__(self, source: str, target: str, rate: Decimal) -> None:
        super().__init__(
            f"Cannot convert {source} to {target}: {target} conversion rate is {rate}",
            source,
            target=target,
            rate=str(rate),
        )
        self.source = source
        self.target = target
        self.rate = rate


# ============================================================================
# Feed Resolution Exceptions
# ============================================================================


class CurrencyFeedResolutionException(CurrencyException):
    """Base exception for failures to bind a cash entry to a data feed."""

    def __init__(
        self, message: str, currency: str, account_currency: str, **kwargs: Any
    ) -> None:
        super().__init__(message, currency, account_currency=account_currency, **kwargs)
        self.account_currency = account_currency


class MissingReferenceSubscriptionException(CurrencyFeedResolutionException):
    """Raised when no subscription exists to infer a conversion feed resolution from."""

    def __init__(self, currency: str, account_currency: str) -> None:
        super().__init__(
            f"Unable to add a conversion feed for {currency} when no subscriptions are present. "
            "Please add subscription(s) before requesting currency conversion feed.",
            currency,
            account_currency,
        )


class NoConversionInstrumentException(CurrencyFeedResolutionException):
    """Raised when neither orientation of the currency pair is a tradable instrument."""

    def __init__(self, currency: str, account_currency: str, candidates: list[str]) -> None:
        super().__init__(
            f"In order to maintain cash in {currency} you are required to add a subscription "
            f"for Forex pair {' or '.join(candidates)}",
            currency,
            account_currency,
            candidates=candidates,
        )
        self.candidates = candidates
