# portfolio_ledger/main.py

import logging
from decimal import Decimal, getcontext

from portfolio_ledger.core.config.settings import settings
from portfolio_ledger.core.models.stock import Stock
from portfolio_ledger.services.portfolio_service import PortfolioService

logger = logging.getLogger(settings.APP_NAME)

SAMPLE_TRADES = [
    {"trade_id": "t1", "ticker": "TTT", "name": "Test", "operation": "BUY",
     "amount": "10", "price": "4.99", "timestamp": "2024-01-02T10:00:00Z"},
    {"trade_id": "t2", "ticker": "TTT", "name": "Test", "operation": "SELL",
     "amount": "8", "price": "5.20", "timestamp": "2024-01-03T10:00:00Z"},
    {"trade_id": "t3", "ticker": "TTT", "name": "Test", "operation": "BUY",
     "amount": "15", "price": "4.90", "timestamp": "2024-01-04T10:00:00Z"},
]


def bootstrap():
    """Configure logging and the global Decimal context from settings."""
    logging.basicConfig(level=settings.LOG_LEVEL, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    getcontext().prec = settings.DECIMAL_PRECISION


def run() -> PortfolioService:
    bootstrap()
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION} in {'DEBUG' if settings.DEBUG_MODE else 'PRODUCTION'} mode...")

    service = PortfolioService()
    service.record_trades(SAMPLE_TRADES)
    for position in service.report().positions:
        logger.info(
            f"{position.ticker}: available={position.available}, "
            f"average_cost={position.average_cost}, "
            f"profit(1 @ 6.00)={service.quote_profit(Stock(ticker=position.ticker), Decimal('1'), Decimal('6.00'))}"
        )
    return service


if __name__ == "__main__":
    run()
