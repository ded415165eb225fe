"""CurrencySymbol value object for identifying currencies."""

from ..exceptions_currency import InvalidCurrencySymbolException
from .base import ValueObject


class CurrencySymbol(ValueObject):
    """Immutable value object representing a currency code such as USD or JPY.

    Codes are normalized to uppercase on construction, so two symbols built
    from "jpy" and "JPY" are equal. Comparison against a plain string is
    case-insensitive for the same reason.
    """

    __slots__ = ("_code",)

    def __init__(self, code: "str | CurrencySymbol") -> None:
        """Initialize CurrencySymbol with validation.

        Args:
            code: The currency code

        Raises:
            InvalidCurrencySymbolException: If the code is empty
        """
        if isinstance(code, CurrencySymbol):
            code = code.code

        normalized = (code or "").strip().upper()
        if not normalized:
            raise InvalidCurrencySymbolException(code)

        self._code = normalized

    @property
    def code(self) -> str:
        """Get the normalized currency code."""
        return self._code

    def pair_with(self, quote: "str | CurrencySymbol") -> str:
        """Build the pair symbol quoting this currency in ``quote``.

        Args:
            quote: Quote currency

        Returns:
            Pair symbol, e.g. ``CurrencySymbol("GBP").pair_with("USD") == "GBPUSD"``
        """
        return self._code + CurrencySymbol(quote).code

    def __eq__(self, other: object) -> bool:
        """Check equality with another CurrencySymbol or a currency code string."""
        if isinstance(other, CurrencySymbol):
            return self._code == other._code
        if isinstance(other, str):
            return self._code == other.strip().upper()
        return False

    def __hash__(self) -> int:
        """Get hash for use in sets/dicts."""
        return hash(self._code)

    def __repr__(self) -> str:
        """Get string representation for debugging."""
        return f"CurrencySymbol('{self._code}')"

    def __str__(self) -> str:
        """Get string representation."""
        return self._code
