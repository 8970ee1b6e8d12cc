# portfolio_ledger/core/models/trade.py

from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator

from portfolio_ledger.core.enums.operation import Operation
from portfolio_ledger.core.models.stock import Stock


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TradeRecord(BaseModel):
    """
    One executed trade.
    Price and amount are deliberately unconstrained: the ledger aggregates
    whatever it is given and leaves sign checks to the calling layer.
    """
    stock: Stock = Field(..., description="Instrument traded")
    price: Decimal = Field(..., description="Unit price of the trade")
    amount: Decimal = Field(..., description="Quantity traded")
    operation: Operation = Field(..., description="BUY or SELL")
    timestamp: datetime = Field(default_factory=_utc_now, description="Point in time the trade occurred")
    trade_id: Optional[str] = Field(None, description="Caller supplied identifier, used for error reporting")

    model_config = ConfigDict(frozen=True)

    @field_validator("timestamp")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        # Naive timestamps are taken as UTC so mixed inputs stay comparable
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @property
    def total_value(self) -> Decimal:
        """amount * price for this trade."""
        return self.amount * self.price
