# portfolio_ledger/logic/ledger.py
import logging
from decimal import Decimal, localcontext
from typing import Iterator, List, Optional, Tuple

from portfolio_ledger.core.config.settings import settings
from portfolio_ledger.core.enums.operation import Operation
from portfolio_ledger.core.enums.rounding_mode import RoundingMode
from portfolio_ledger.core.models.response import PositionSummary
from portfolio_ledger.core.models.stock import Stock
from portfolio_ledger.core.models.trade import TradeRecord

logger = logging.getLogger(__name__)


class Ledger:
    """
    Append-only, ordered collection of trade records for one portfolio.

    Every metric is a plain aggregation over the matching trades, so the
    results do not depend on the order trades were appended in. The ledger
    performs no validation and no locking; callers sharing one across threads
    must serialize access themselves.
    """
    def __init__(
        self,
        trades: Optional[List[TradeRecord]] = None,
        average_cost_places: Optional[int] = None,
        rounding: Optional[RoundingMode] = None,
    ):
        self._trades: List[TradeRecord] = list(trades) if trades else []
        places = settings.AVERAGE_COST_PLACES if average_cost_places is None else average_cost_places
        self._places = places
        self._quantum = Decimal(1).scaleb(-places)
        self._rounding = rounding or settings.AVERAGE_COST_ROUNDING
        logger.debug(f"Ledger initialized with {len(self._trades)} trades, quantum={self._quantum}, rounding={self._rounding.value}.")

    def append(self, trade: TradeRecord) -> "Ledger":
        """
        Appends a trade to the end of the ledger and returns the ledger for chaining.
        """
        self._trades.append(trade)
        logger.debug(f"Ledger: Appended {trade.operation.value} {trade.amount} {trade.stock.ticker} @ {trade.price}. Total trades: {len(self._trades)}.")
        return self

    @property
    def trades(self) -> Tuple[TradeRecord, ...]:
        return tuple(self._trades)

    def __len__(self) -> int:
        return len(self._trades)

    def __iter__(self) -> Iterator[TradeRecord]:
        return iter(tuple(self._trades))

    def trades_for(self, stock: Stock) -> List[TradeRecord]:
        """Trades matching the stock's ticker, in insertion order."""
        return [trade for trade in self._trades if trade.stock.matches(stock)]

    def stocks(self) -> List[Stock]:
        """Distinct stocks in first-seen order, one per ticker."""
        seen: dict[str, Stock] = {}
        for trade in self._trades:
            seen.setdefault(trade.stock.ticker, trade.stock)
        return list(seen.values())

    def _sum_amounts(self, stock: Stock, operation: Operation) -> Decimal:
        return sum(
            (trade.amount for trade in self._trades
             if trade.stock.matches(stock) and trade.operation == operation),
            Decimal(0),
        )

    def average_cost(self, stock: Stock) -> Decimal:
        """
        Weighted average price of the BUY trades for a stock, rounded to the
        configured number of places. SELL trades are ignored. Returns 0 when
        the matching BUY amounts sum to zero.
        """
        total_price = Decimal(0)
        total_amount = Decimal(0)
        for trade in self._trades:
            if trade.stock.matches(stock) and trade.operation == Operation.BUY:
                total_price += trade.total_value
                total_amount += trade.amount

        if total_amount == Decimal(0):
            logger.debug(f"Ledger: No BUY amount for {stock.ticker}; average cost is 0.")
            return Decimal(0)

        quotient = total_price / total_amount
        with localcontext() as ctx:
            # quantize needs every integer digit plus the fractional places
            ctx.prec = max(ctx.prec, quotient.adjusted() + self._places + 1)
            average = quotient.quantize(self._quantum, rounding=self._rounding.decimal_rounding)
        logger.debug(f"Ledger: Average cost for {stock.ticker}: total_price={total_price}, total_amount={total_amount}, average={average}.")
        return average

    def available(self, stock: Stock) -> Decimal:
        """
        BUY amounts minus SELL amounts for a stock. Not rounded, may be negative.
        """
        bought = self._sum_amounts(stock, Operation.BUY)
        sold = self._sum_amounts(stock, Operation.SELL)
        logger.debug(f"Ledger: Available for {stock.ticker}: bought={bought}, sold={sold}.")
        return bought - sold

    def profit(self, stock: Stock, amount: Decimal, unit_sell_price: Decimal) -> Decimal:
        """
        Hypothetical profit of selling `amount` units at `unit_sell_price`
        against the current average cost. The amount is not checked against
        the available quantity and the ledger is left unchanged.
        """
        average_unit_buy_price = self.average_cost(stock)
        buy_price = amount * average_unit_buy_price
        sell_price = amount * unit_sell_price
        profit = sell_price - buy_price
        logger.debug(f"Ledger: Profit for {stock.ticker}: sell {amount} @ {unit_sell_price} vs avg {average_unit_buy_price} = {profit}.")
        return profit

    def position(self, stock: Stock) -> PositionSummary:
        """
        Summary of the net holding in a stock.
        """
        matching = self.trades_for(stock)
        bought = self._sum_amounts(stock, Operation.BUY)
        sold = self._sum_amounts(stock, Operation.SELL)
        return PositionSummary(
            ticker=stock.ticker,
            name=stock.name,
            available=bought - sold,
            average_cost=self.average_cost(stock),
            bought=bought,
            sold=sold,
            trade_count=len(matching),
        )
