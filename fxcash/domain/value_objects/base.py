"""Base class for value objects."""

# Standard library imports
from abc import ABC, abstractmethod
from typing import Any


class ValueObject(ABC):
    """Immutable, hashable value compared by content.

    Attributes may be assigned once, in ``__init__``; any later assignment
    raises AttributeError. Subclasses declare their own ``__slots__``.
    """

    __slots__ = ()

    @abstractmethod
    def __eq__(self, other: object) -> bool: ...

    @abstractmethod
    def __hash__(self) -> int: ...

    @abstractmethod
    def __repr__(self) -> str: ...

    def __setattr__(self, name: str, value: Any) -> None:
        if hasattr(self, name):
            raise AttributeError(
                f"Cannot modify immutable value object attribute '{name}' "
                f"of {type(self).__name__}"
            )
        super().__setattr__(name, value)
