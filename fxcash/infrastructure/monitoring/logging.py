"""
Structured Logging for the cash tracking system

JSON structured logs with currency-specific fields lifted out of ``extra``
(currency, pair, subscription index), Decimal-safe serialization, and console
plus optional rotating file handlers configured from LoggingConfig.
"""

import json
import logging
import sys
from datetime import UTC, datetime
from decimal import Decimal
from logging.handlers import RotatingFileHandler
from typing import Any

from fxcash.application.config import LoggingConfig

# Attributes present on every LogRecord; anything else came in through ``extra``
_STANDARD_FIELDS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "message",
    }
)

_CURRENCY_FIELDS = ("currency", "pair", "subscription_index")


class CurrencyJSONFormatter(logging.Formatter):
    """JSON formatter for structured cash and conversion logs."""

    def __init__(self, include_extra: bool = True, sort_keys: bool = True) -> None:
        super().__init__()
        self.include_extra = include_extra
        self.sort_keys = sort_keys

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        currency_fields = {
            name: getattr(record, name)
            for name in _CURRENCY_FIELDS
            if getattr(record, name, None) is not None
        }
        if currency_fields:
            log_entry["currency"] = currency_fields

        if record.exc_info:
            log_entry["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": self.formatException(record.exc_info),
            }

        if self.include_extra:
            extra = {
                key: value
                for key, value in record.__dict__.items()
                if key not in _STANDARD_FIELDS
                and key not in _CURRENCY_FIELDS
                and not key.startswith("_")
            }
            if extra:
                log_entry["extra"] = extra

        return json.dumps(log_entry, sort_keys=self.sort_keys, default=self._serialize_value)

    def _serialize_value(self, value: Any) -> Any:
        """Serialize complex values for JSON output."""
        if isinstance(value, Decimal):
            return str(value)
        elif isinstance(value, (set, frozenset)):
            return sorted(value)
        return str(value)


def setup_structured_logging(config: LoggingConfig | None = None) -> None:
    """
    Setup logging for the cash tracking system.

    Replaces any handlers on the root logger with a stdout handler and, if
    ``config.file`` is set, a size-rotated file handler.

    Args:
        config: Logging configuration (defaults to LoggingConfig())
    """
    config = config or LoggingConfig()

    # Clear any existing handlers
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter: logging.Formatter
    if config.format_type == "json":
        formatter = CurrencyJSONFormatter()
    else:
        formatter = logging.Formatter(config.format)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if config.file:
        file_handler = RotatingFileHandler(
            config.file, maxBytes=config.max_bytes, backupCount=config.backup_count
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    root_logger.setLevel(getattr(logging, config.level.upper()))

    logging.getLogger(__name__).debug("Structured logging configured")
