"""Market data resolution and security type enumerations."""

from enum import Enum, IntEnum


class Resolution(IntEnum):
    """Data granularity, ordered from finest to coarsest.

    ``min()`` over a collection of resolutions yields the finest one.
    """

    TICK = 0
    SECOND = 1
    MINUTE = 2
    HOUR = 3
    DAILY = 4

    @classmethod
    def parse(cls, value: "str | Resolution") -> "Resolution":
        """Parse a resolution from its name, case-insensitively."""
        if isinstance(value, Resolution):
            return value
        try:
            return cls[value.strip().upper()]
        except KeyError:
            raise ValueError(f"Invalid resolution: {value}") from None


class SecurityType(Enum):
    """Security type enumeration"""

    BASE = "base"
    EQUITY = "equity"
    FOREX = "forex"
    CFD = "cfd"
    CRYPTO = "crypto"
    FUTURE = "future"
    OPTION = "option"
