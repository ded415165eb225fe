"""Logging setup for the cash tracking system."""

from .logging import CurrencyJSONFormatter, setup_structured_logging

__all__ = ["CurrencyJSONFormatter", "setup_structured_logging"]
