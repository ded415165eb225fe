"""
Configuration Loader - Reads and writes ApplicationConfig.

Sources are environment variables and YAML files with optional
``account``, ``feed`` and ``logging`` sections. Missing sections and keys
fall back to the dataclass defaults.
"""

import os
from decimal import Decimal

import yaml

from fxcash.application.config import (
    AccountConfig,
    ApplicationConfig,
    Environment,
    FeedConfig,
    LoggingConfig,
)
from fxcash.domain.value_objects import Resolution


class ConfigLoader:
    """Builds ApplicationConfig from the environment or YAML, and saves it back."""

    @classmethod
    def from_env(cls) -> ApplicationConfig:
        """
        Create configuration from environment variables.

        Returns:
            ApplicationConfig: Configuration loaded from environment
        """
        env_str = os.getenv("ENVIRONMENT", "development")
        try:
            environment = Environment(env_str)
        except ValueError:
            raise ValueError(f"Invalid environment: {env_str}")

        return ApplicationConfig(
            environment=environment,
            account=AccountConfig.from_env(),
            feed=FeedConfig.from_env(),
            logging=LoggingConfig.from_env(),
        )

    @classmethod
    def from_yaml(cls, path: str) -> ApplicationConfig:
        """
        Load configuration from YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            ApplicationConfig: Configuration loaded from YAML file
        """
        with open(path) as f:
            data = yaml.safe_load(f)

        config = ApplicationConfig()

        # Empty file
        if not data:
            return config

        if "environment" in data:
            config.environment = Environment(data["environment"])

        if "account" in data:
            account_data = data["account"] or {}
            starting_cash = account_data.get("starting_cash") or {}
            config.account = AccountConfig(
                account_currency=str(
                    account_data.get("account_currency", config.account.account_currency)
                ).upper(),
                starting_cash={
                    str(currency).upper(): Decimal(str(amount))
                    for currency, amount in starting_cash.items()
                },
            )

        if "feed" in data:
            feed_data = data["feed"] or {}
            config.feed = FeedConfig(
                default_resolution=Resolution.parse(
                    feed_data.get("default_resolution", config.feed.default_resolution)
                ),
                extra_forex_pairs=[
                    str(pair).upper() for pair in feed_data.get("extra_forex_pairs") or []
                ],
            )

        if "logging" in data:
            log_data = data["logging"] or {}
            config.logging = LoggingConfig(
                level=log_data.get("level", config.logging.level),
                format_type=log_data.get("format_type", config.logging.format_type),
                format=log_data.get("format", config.logging.format),
                file=log_data.get("file", config.logging.file),
                max_bytes=log_data.get("max_bytes", config.logging.max_bytes),
                backup_count=log_data.get("backup_count", config.logging.backup_count),
            )

        return config

    @classmethod
    def to_yaml(cls, config: ApplicationConfig, path: str) -> None:
        """
        Save configuration to YAML file.

        Args:
            config: Configuration to save
            path: Path to save YAML configuration file
        """
        with open(path, "w") as f:
            yaml.safe_dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)
