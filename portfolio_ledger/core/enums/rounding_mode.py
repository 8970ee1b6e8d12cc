# portfolio_ledger/core/enums/rounding_mode.py

from decimal import ROUND_HALF_EVEN, ROUND_HALF_UP
from enum import Enum

class RoundingMode(str, Enum):
    """
    Rounding modes supported for the average cost quantization.
    HALF_EVEN is banker's rounding; HALF_UP rounds ties away from zero.
    """
    HALF_EVEN = "HALF_EVEN"
    HALF_UP = "HALF_UP"

    @property
    def decimal_rounding(self) -> str:
        """Returns the matching constant from the decimal module."""
        if self is RoundingMode.HALF_UP:
            return ROUND_HALF_UP
        return ROUND_HALF_EVEN
