# portfolio_ledger/tests/unit/test_error_reporter.py

import pytest
from portfolio_ledger.logic.error_reporter import ErrorReporter

@pytest.fixture
def error_reporter():
    """Provides a fresh ErrorReporter instance for each test."""
    return ErrorReporter()

def test_add_error_single(error_reporter):
    error_reporter.add_error("t1", "Invalid amount")

    errors = error_reporter.get_errors()
    assert len(errors) == 1
    assert errors[0].trade_id == "t1"
    assert errors[0].error_reason == "Invalid amount"
    assert error_reporter.has_errors() is True

def test_add_error_multiple_trades_keep_report_order(error_reporter):
    error_reporter.add_error("t2", "Missing ticker")
    error_reporter.add_error("t1", "Invalid amount")
    assert [e.trade_id for e in error_reporter.get_errors()] == ["t2", "t1"]

def test_add_error_duplicate_id_appends_reason(error_reporter):
    error_reporter.add_error("t1", "Invalid amount")
    error_reporter.add_error("t1", "Unknown operation")

    errors = error_reporter.get_errors()
    assert len(errors) == 1
    assert errors[0].error_reason == "Invalid amount; Unknown operation"

def test_add_error_duplicate_id_does_not_append_same_reason(error_reporter):
    error_reporter.add_error("t1", "Invalid amount")
    error_reporter.add_error("t1", "Invalid amount")
    assert error_reporter.get_errors()[0].error_reason == "Invalid amount"

def test_add_error_keeps_reason_contained_in_earlier_one(error_reporter):
    """A distinct reason is kept even when it is a substring of an earlier reason."""
    error_reporter.add_error("t1", "Invalid amount")
    error_reporter.add_error("t1", "amount")
    assert error_reporter.get_errors()[0].error_reason == "Invalid amount; amount"

def test_get_errors_empty(error_reporter):
    assert error_reporter.get_errors() == []
    assert error_reporter.has_errors() is False

def test_clear_errors(error_reporter):
    error_reporter.add_error("t1", "Test error")
    error_reporter.clear()
    assert error_reporter.get_errors() == []
    assert error_reporter.has_errors() is False
