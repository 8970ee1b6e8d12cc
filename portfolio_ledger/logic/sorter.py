# portfolio_ledger/logic/sorter.py

from typing import List
from portfolio_ledger.core.enums.operation import Operation
from portfolio_ledger.core.models.trade import TradeRecord

class TradeSorter:
    """
    Responsible for ordering a batch of trades chronologically.
    """

    def sort_trades(self, trades: List[TradeRecord]) -> List[TradeRecord]:
        """
        Returns a new list of the trades sorted.

        Sorting Rules:
        1. Primary sort: timestamp ascending.
        2. Secondary sort: BUY before SELL at the same timestamp.

        The sort is stable, so trades equal on both keys keep their input order.
        """
        return sorted(trades, key=lambda trade: (trade.timestamp, trade.operation != Operation.BUY))
