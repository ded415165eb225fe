"""Domain interfaces implemented by infrastructure or the host engine."""

from .registries import ISecurityRegistry, ISubscriptionRegistry

__all__ = ["ISecurityRegistry", "ISubscriptionRegistry"]
