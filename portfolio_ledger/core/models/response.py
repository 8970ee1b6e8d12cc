# portfolio_ledger/core/models/response.py

from decimal import Decimal
from typing import List
from pydantic import BaseModel, Field

class ErroredTrade(BaseModel):
    """
    Represents a raw trade that was rejected, along with the reason for rejection.
    """
    trade_id: str = Field(..., description="The ID of the trade that was rejected.")
    error_reason: str = Field(..., description="The reason why the trade was rejected.")

class PositionSummary(BaseModel):
    """
    Net holding in a single stock as derived from the ledger.
    """
    ticker: str
    name: str = ""
    available: Decimal = Field(..., description="BUY amounts minus SELL amounts; negative for a short position")
    average_cost: Decimal = Field(..., description="Weighted average BUY price, rounded")
    bought: Decimal = Field(default=Decimal(0), description="Sum of BUY amounts")
    sold: Decimal = Field(default=Decimal(0), description="Sum of SELL amounts")
    trade_count: int = 0

class PortfolioReport(BaseModel):
    """
    One position summary per distinct stock in the ledger.
    """
    positions: List[PositionSummary] = Field(default_factory=list)
    trade_count: int = 0
