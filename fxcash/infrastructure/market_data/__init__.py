"""In-memory registries for subscriptions and securities."""

from .security_manager import SecurityManager
from .subscription_manager import SubscriptionManager

__all__ = ["SecurityManager", "SubscriptionManager"]
