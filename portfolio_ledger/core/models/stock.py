# portfolio_ledger/core/models/stock.py

from pydantic import BaseModel, Field, ConfigDict

class Stock(BaseModel):
    """
    Identity of a tradable instrument.
    Two stocks are the same position when their tickers are equal; the display
    name plays no part in equality, hashing or matching.
    """
    ticker: str = Field(..., description="Short unique identifier of the instrument (e.g., AAPL)")
    name: str = Field(default="", description="Display name of the instrument")

    model_config = ConfigDict(frozen=True)

    def matches(self, other: "Stock") -> bool:
        """Case-sensitive ticker comparison."""
        return self.ticker == other.ticker

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stock):
            return NotImplemented
        return self.matches(other)

    def __hash__(self) -> int:
        return hash(self.ticker)
