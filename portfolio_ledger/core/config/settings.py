# portfolio_ledger/core/config/settings.py

from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path
from portfolio_ledger.core.enums.rounding_mode import RoundingMode

class Settings(BaseSettings):
    """
    Application settings loaded from environment variables or .env file.
    Includes general app settings and decimal/rounding configuration for the ledger.
    """
    # General App Settings
    APP_NAME: str = "Portfolio Ledger"
    APP_VERSION: str = "0.1.0"
    DEBUG_MODE: bool = False

    # Logging Settings
    LOG_LEVEL: str = "INFO" # e.g., DEBUG, INFO, WARNING, ERROR, CRITICAL

    # Decimal Settings
    DECIMAL_PRECISION: int = 28
    AVERAGE_COST_PLACES: int = 2
    AVERAGE_COST_ROUNDING: RoundingMode = RoundingMode.HALF_EVEN

    # Parser Settings
    STRICT_TRADE_VALIDATION: bool = False # Reject non-positive amounts and negative prices at parse time

    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).parent.parent.parent.parent / ".env"),
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'
    )

settings = Settings()
