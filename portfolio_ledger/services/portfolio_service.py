# portfolio_ledger/services/portfolio_service.py

import logging
from decimal import Decimal
from typing import Any, Optional, Tuple

from portfolio_ledger.core.models.response import ErroredTrade, PortfolioReport, PositionSummary
from portfolio_ledger.core.models.stock import Stock
from portfolio_ledger.core.models.trade import TradeRecord
from portfolio_ledger.logic.error_reporter import ErrorReporter
from portfolio_ledger.logic.ledger import Ledger
from portfolio_ledger.logic.parser import TradeParser
from portfolio_ledger.logic.sorter import TradeSorter

logger = logging.getLogger(__name__)

class PortfolioService:
    """
    Drives a Ledger from raw trade data: parsing, chronological ordering,
    error collection and position reporting.
    """
    def __init__(
        self,
        ledger: Optional[Ledger] = None,
        parser: Optional[TradeParser] = None,
        sorter: Optional[TradeSorter] = None,
        error_reporter: Optional[ErrorReporter] = None
    ):
        self._error_reporter = error_reporter or ErrorReporter()
        self._ledger = ledger if ledger is not None else Ledger()
        self._parser = parser or TradeParser(error_reporter=self._error_reporter)
        self._sorter = sorter or TradeSorter()

    @property
    def ledger(self) -> Ledger:
        return self._ledger

    def record_trades(
        self,
        raw_trades: list[dict[str, Any]]
    ) -> Tuple[list[TradeRecord], list[ErroredTrade]]:
        """
        Parses a batch of raw trades, orders the accepted ones chronologically and
        appends them to the ledger. Returns the accepted trades and the errors
        reported for this batch.
        """
        logger.info(f"Recording trade batch of {len(raw_trades)} rows. Ledger currently holds {len(self._ledger)} trades.")

        parsed_trades = self._parser.parse_trades(raw_trades)
        sorted_trades = self._sorter.sort_trades(parsed_trades)

        for trade in sorted_trades:
            self._ledger.append(trade)

        errored_trades = self._error_reporter.get_errors()
        if self._error_reporter.has_errors():
            logger.warning(f"Rejected trades in batch: {[e.trade_id for e in errored_trades]}")
        logger.info(f"Finished recording. Accepted {len(sorted_trades)} trades, rejected {len(errored_trades)}.")

        # Errors are per batch
        self._error_reporter.clear()
        return sorted_trades, errored_trades

    def record_trade(self, trade: TradeRecord) -> Ledger:
        return self._ledger.append(trade)

    def position(self, stock: Stock) -> PositionSummary:
        return self._ledger.position(stock)

    def report(self) -> PortfolioReport:
        """One position summary per distinct stock, in first-traded order."""
        positions = [self._ledger.position(stock) for stock in self._ledger.stocks()]
        logger.debug(f"Built report with {len(positions)} positions over {len(self._ledger)} trades.")
        return PortfolioReport(positions=positions, trade_count=len(self._ledger))

    def quote_profit(self, stock: Stock, amount: Decimal, unit_sell_price: Decimal) -> Decimal:
        """
        Hypothetical profit of a sale. Selling more than is available is allowed
        and only logged; the ledger is not modified.
        """
        available = self._ledger.available(stock)
        if amount > available:
            logger.warning(f"Profit quote for {stock.ticker} uses amount {amount} above available quantity {available}.")
        return self._ledger.profit(stock, amount, unit_sell_price)
