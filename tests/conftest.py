"""Global pytest configuration and fixtures."""

# Standard library imports
import sys
from datetime import UTC, datetime
from decimal import Decimal
from pathlib import Path

# Load test environment variables
from dotenv import load_dotenv

test_env_path = Path(__file__).parent.parent / ".env.test"
if test_env_path.exists():
    load_dotenv(test_env_path, override=True)

# Third-party imports
import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

# Local imports
from fxcash.domain.entities import CashBook
from fxcash.domain.value_objects import QuoteBar, Resolution, SecurityType, Tick, TradeBar
from fxcash.infrastructure.market_data import SecurityManager, SubscriptionManager


@pytest.fixture
def now() -> datetime:
    return datetime(2025, 8, 16, 14, 30, tzinfo=UTC)


@pytest.fixture
def subscriptions() -> SubscriptionManager:
    """Empty subscription registry."""
    return SubscriptionManager()


@pytest.fixture
def securities() -> SecurityManager:
    """Security registry backed by the default forex pair universe."""
    return SecurityManager()


@pytest.fixture
def equity_subscriptions(subscriptions: SubscriptionManager) -> SubscriptionManager:
    """Registry with one minute equity feed, as a strategy would configure."""
    subscriptions.add(SecurityType.EQUITY, "SPY", Resolution.MINUTE)
    return subscriptions


@pytest.fixture
def cash_book() -> CashBook:
    """USD account holding yen and sterling at placeholder rates."""
    book = CashBook("USD")
    book.add("USD", Decimal("10000"))
    book.add("JPY", Decimal("100000"), Decimal("0.01"))
    book.add("GBP", Decimal("500"), Decimal("1.2"))
    return book


@pytest.fixture
def make_tick(now: datetime):
    """Factory for ticks on a pair."""

    def _make(symbol: str, last: str | Decimal | None = None, bid=None, ask=None) -> Tick:
        return Tick(symbol, now, last_price=last, bid_price=bid, ask_price=ask)

    return _make


@pytest.fixture
def make_trade_bar(now: datetime):
    """Factory for trade bars closing at a price."""

    def _make(symbol: str, close: str | Decimal) -> TradeBar:
        close = Decimal(str(close))
        return TradeBar(symbol, now, open=close, high=close, low=close, close=close)

    return _make


@pytest.fixture
def make_quote_bar(now: datetime):
    """Factory for quote bars."""

    def _make(symbol: str, bid_close, ask_close) -> QuoteBar:
        return QuoteBar(symbol, now, bid_close=bid_close, ask_close=ask_close)

    return _make
