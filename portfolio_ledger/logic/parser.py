# portfolio_ledger/logic/parser.py

import logging
from decimal import Decimal
from typing import Any, Optional
from pydantic import ValidationError, TypeAdapter

from portfolio_ledger.core.config.settings import settings
from portfolio_ledger.core.models.trade import TradeRecord
from portfolio_ledger.logic.error_reporter import ErrorReporter

logger = logging.getLogger(__name__)

class TradeParser:
    """
    Parses raw trade dictionaries into validated TradeRecord objects.
    Type and shape checks come from Pydantic; with strict validation enabled the
    parser also rejects non-positive amounts and negative prices, which the
    ledger itself accepts. All rejections are reported to the shared ErrorReporter.
    """
    def __init__(self, error_reporter: ErrorReporter, strict: Optional[bool] = None):
        self._single_trade_adapter = TypeAdapter(TradeRecord)
        self._error_reporter = error_reporter
        self._strict = settings.STRICT_TRADE_VALIDATION if strict is None else strict

    def parse_trades(self, raw_trades_data: list[dict[str, Any]]) -> list[TradeRecord]:
        """
        Parses a list of raw trade dictionaries. Rejected rows are left out of the
        result and reported under their trade_id (or `row_<index>` when missing).

        A row may carry the stock either nested (`"stock": {"ticker": ..., "name": ...}`)
        or flat (`"ticker"` / `"name"` keys).
        """
        logger.info(f"TradeParser: Parsing {len(raw_trades_data)} raw trades (strict={self._strict}).")
        parsed_trades: list[TradeRecord] = []

        for index, raw_trade_data in enumerate(raw_trades_data):
            trade_id = str(raw_trade_data.get("trade_id") or f"row_{index}")
            payload = self._normalize(raw_trade_data, trade_id)

            try:
                trade = self._single_trade_adapter.validate_python(payload)
            except ValidationError as e:
                error_messages = "; ".join(
                    [f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()]
                )
                error_reason = f"Validation error: {error_messages}"
                logger.warning(f"TradeParser: Rejected trade {trade_id}: {error_reason}")
                self._error_reporter.add_error(trade_id, error_reason)
                continue

            if self._strict:
                rejection = self._check_signs(trade)
                if rejection:
                    logger.warning(f"TradeParser: Rejected trade {trade_id}: {rejection}")
                    self._error_reporter.add_error(trade_id, rejection)
                    continue

            parsed_trades.append(trade)

        logger.debug(f"TradeParser: Accepted {len(parsed_trades)} of {len(raw_trades_data)} trades.")
        return parsed_trades

    @staticmethod
    def _normalize(raw_trade_data: dict[str, Any], trade_id: str) -> dict[str, Any]:
        payload = dict(raw_trade_data)
        payload["trade_id"] = trade_id
        if "stock" not in payload and "ticker" in payload:
            payload["stock"] = {"ticker": payload.pop("ticker"), "name": payload.pop("name", "")}
        return payload

    @staticmethod
    def _check_signs(trade: TradeRecord) -> Optional[str]:
        if trade.amount <= Decimal(0):
            return f"Amount must be positive, got {trade.amount}"
        if trade.price < Decimal(0):
            return f"Price must not be negative, got {trade.price}"
        return None
