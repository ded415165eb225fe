"""
Root of the domain exception hierarchy.

Currency and feed resolution errors derive from DomainException in
exceptions_currency.
"""

from typing import Any


class DomainException(Exception):
    """Base exception for all domain-level errors.

    ``details`` carries structured context for logging and error responses.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.details = details or {}


class EntityValidationException(DomainException):
    """Raised when an entity is given a value it cannot hold."""

    def __init__(
        self,
        entity_type: str,
        entity_id: str | None,
        field: str,
        value: Any,
        constraint: str,
    ) -> None:
        subject = f"{entity_type} {entity_id}" if entity_id else entity_type
        super().__init__(
            f"{subject} validation failed for field '{field}': {constraint}",
            details={
                "entity_type": entity_type,
                "entity_id": entity_id,
                "field": field,
                "value": value,
                "constraint": constraint,
            },
        )
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.field = field
        self.value = value
        self.constraint = constraint
