# portfolio_ledger/core/enums/operation.py

from enum import Enum

class Operation(str, Enum):
    """
    Direction of an executed trade.
    Inheriting from 'str' lets raw values such as "BUY" coerce and compare directly.
    """
    BUY = "BUY"
    SELL = "SELL"
