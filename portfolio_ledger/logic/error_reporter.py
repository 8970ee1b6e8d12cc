# portfolio_ledger/logic/error_reporter.py

from portfolio_ledger.core.models.response import ErroredTrade

class ErrorReporter:
    """
    Collects rejection reasons for trades, keyed by trade ID.
    Each trade keeps its distinct reasons in the order they were reported.
    """
    def __init__(self):
        self._reasons: dict[str, list[str]] = {}

    def add_error(self, trade_id: str, error_reason: str):
        reasons = self._reasons.setdefault(trade_id, [])
        if error_reason not in reasons:
            reasons.append(error_reason)

    def get_errors(self) -> list[ErroredTrade]:
        """One ErroredTrade per trade ID, reasons joined with '; '."""
        return [
            ErroredTrade(trade_id=trade_id, error_reason="; ".join(reasons))
            for trade_id, reasons in self._reasons.items()
        ]

    def has_errors(self) -> bool:
        return bool(self._reasons)

    def clear(self):
        self._reasons = {}
