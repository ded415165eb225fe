"""Quoting orientation of a currency pair relative to the account currency."""

from decimal import Decimal
from enum import Enum


class PairOrientation(Enum):
    """How a pair's price relates to a cash conversion rate.

    DIRECT pairs are quoted FOREIGN+BASE (GBPUSD for GBP in a USD account), so
    the price is already base units per foreign unit. INVERTED pairs are quoted
    BASE+FOREIGN (USDJPY for JPY in a USD account) and the rate is the
    reciprocal of the price.
    """

    DIRECT = "direct"
    INVERTED = "inverted"

    def to_conversion_rate(self, price: Decimal) -> Decimal:
        """Convert a pair price into a conversion rate.

        Raises:
            ArithmeticError: If the pair is inverted and the price is zero
        """
        if self is PairOrientation.INVERTED:
            # decimal.DivisionByZero is an ArithmeticError
            return Decimal(1) / price
        return price
