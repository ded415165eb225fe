"""Domain entities with business logic."""

from .cash import Cash
from .cash_book import CashBook
from .security import Security
from .subscription import SubscriptionDataConfig

__all__ = ["Cash", "CashBook", "Security", "SubscriptionDataConfig"]
