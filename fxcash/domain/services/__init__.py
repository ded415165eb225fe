"""Domain services for business logic that spans entities."""

from .currency_feed_resolver import CurrencyFeedResolver

__all__ = ["CurrencyFeedResolver"]
