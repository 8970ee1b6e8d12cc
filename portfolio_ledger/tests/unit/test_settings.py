# portfolio_ledger/tests/unit/test_settings.py

from decimal import ROUND_HALF_EVEN, ROUND_HALF_UP

from portfolio_ledger.core.config.settings import Settings
from portfolio_ledger.core.enums.rounding_mode import RoundingMode
from portfolio_ledger.core.enums.operation import Operation

def test_rounding_mode_maps_to_decimal_constants():
    assert RoundingMode.HALF_EVEN.decimal_rounding == ROUND_HALF_EVEN
    assert RoundingMode.HALF_UP.decimal_rounding == ROUND_HALF_UP

def test_settings_defaults(monkeypatch):
    for name in ("LOG_LEVEL", "DECIMAL_PRECISION", "AVERAGE_COST_PLACES", "AVERAGE_COST_ROUNDING", "STRICT_TRADE_VALIDATION"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.LOG_LEVEL == "INFO"
    assert settings.DECIMAL_PRECISION == 28
    assert settings.AVERAGE_COST_PLACES == 2
    assert settings.AVERAGE_COST_ROUNDING is RoundingMode.HALF_EVEN
    assert settings.STRICT_TRADE_VALIDATION is False

def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("average_cost_rounding", "HALF_UP")
    monkeypatch.setenv("STRICT_TRADE_VALIDATION", "true")
    settings = Settings(_env_file=None)
    assert settings.AVERAGE_COST_ROUNDING is RoundingMode.HALF_UP
    assert settings.STRICT_TRADE_VALIDATION is True

def test_operation_coerces_from_string():
    assert Operation("SELL") is Operation.SELL
    assert Operation.BUY == "BUY"
