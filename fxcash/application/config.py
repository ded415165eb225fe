"""
Application Configuration - Central configuration management.

This module provides configuration management for the application,
including the account currency, starting cash, data feed settings and
logging.
"""

import os
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any

from fxcash.domain.constants import ACCOUNT_CURRENCY, CURRENCY_CODE_LENGTH
from fxcash.domain.value_objects import Resolution


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


def parse_starting_cash(value: str) -> dict[str, Decimal]:
    """Parse ``"JPY:100000,GBP:250"`` into a currency to amount mapping."""
    starting_cash: dict[str, Decimal] = {}
    for entry in value.split(","):
        entry = entry.strip()
        if not entry:
            continue
        currency, sep, amount = entry.partition(":")
        if not sep:
            raise ValueError(f"Invalid starting cash entry: {entry}")
        try:
            starting_cash[currency.strip().upper()] = Decimal(amount.strip())
        except InvalidOperation:
            raise ValueError(f"Invalid starting cash amount for {currency}: {amount}") from None
    return starting_cash


@dataclass
class AccountConfig:
    """Account configuration."""

    account_currency: str = ACCOUNT_CURRENCY
    starting_cash: dict[str, Decimal] = field(default_factory=dict)

    @classmethod
    def from_env(cls) -> "AccountConfig":
        """Create configuration from environment variables."""
        return cls(
            account_currency=os.getenv("ACCOUNT_CURRENCY", ACCOUNT_CURRENCY).upper(),
            starting_cash=parse_starting_cash(os.getenv("ACCOUNT_STARTING_CASH", "")),
        )


@dataclass
class FeedConfig:
    """Market data feed configuration."""

    default_resolution: Resolution = Resolution.MINUTE
    extra_forex_pairs: list[str] = field(default_factory=list)

    @classmethod
    def from_env(cls) -> "FeedConfig":
        """Create configuration from environment variables."""
        pairs = os.getenv("FEED_EXTRA_FOREX_PAIRS", "")
        return cls(
            default_resolution=Resolution.parse(os.getenv("FEED_DEFAULT_RESOLUTION", "minute")),
            extra_forex_pairs=[p.strip().upper() for p in pairs.split(",") if p.strip()],
        )


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format_type: str = "text"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: str | None = None
    max_bytes: int = 10485760  # 10MB
    backup_count: int = 5

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        """Create configuration from environment variables."""
        file_path = os.getenv("LOG_FILE")
        return cls(
            level=os.getenv("LOG_LEVEL", "INFO"),
            format_type=os.getenv("LOG_FORMAT_TYPE", "text"),
            format=os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
            file=file_path if file_path else None,
            max_bytes=int(os.getenv("LOG_MAX_BYTES", "10485760")),
            backup_count=int(os.getenv("LOG_BACKUP_COUNT", "5")),
        )


@dataclass
class ApplicationConfig:
    """Main application configuration."""

    environment: Environment = Environment.DEVELOPMENT
    account: AccountConfig = field(default_factory=AccountConfig)
    feed: FeedConfig = field(default_factory=FeedConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "environment": self.environment.value,
            "account": {
                "account_currency": self.account.account_currency,
                "starting_cash": {
                    currency: str(amount)
                    for currency, amount in self.account.starting_cash.items()
                },
            },
            "feed": {
                "default_resolution": self.feed.default_resolution.name.lower(),
                "extra_forex_pairs": list(self.feed.extra_forex_pairs),
            },
            "logging": {
                "level": self.logging.level,
                "format_type": self.logging.format_type,
                "format": self.logging.format,
                "file": self.logging.file,
                "max_bytes": self.logging.max_bytes,
                "backup_count": self.logging.backup_count,
            },
        }

    def validate(self) -> bool:
        """
        Validate the configuration.

        Returns:
            True if valid, raises exception otherwise
        """
        # Validate account config
        currency = self.account.account_currency
        if len(currency) != CURRENCY_CODE_LENGTH or not currency.isalpha():
            raise ValueError(f"Invalid account currency: {currency}")

        for code in self.account.starting_cash:
            if not code or not code.isalpha():
                raise ValueError(f"Invalid starting cash currency: {code}")

        # Validate feed config
        for pair in self.feed.extra_forex_pairs:
            if len(pair) != 2 * CURRENCY_CODE_LENGTH:
                raise ValueError(f"Invalid forex pair: {pair}")

        # Validate logging config
        if self.logging.level.upper() not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {self.logging.level}")
        if self.logging.format_type not in {"json", "text"}:
            raise ValueError(f"Invalid log format type: {self.logging.format_type}")

        return True
