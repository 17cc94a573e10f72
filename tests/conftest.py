"""
Pytest fixtures for the money kernel test suite.

Provides:
- Structured logging configured once per session
- Per-test LogContext isolation
- Captured JSON log records
- Common currencies
"""

import json
import logging
from io import StringIO

import pytest

from money_kernel.domain.values import Currency
from money_kernel.logging_config import (
    LogContext,
    StructuredFormatter,
    configure_logging,
    reset_logging,
)


# =============================================================================
# Logging fixtures
# =============================================================================


@pytest.fixture(autouse=True, scope="session")
def _configure_test_logging():
    """Configure structured logging for the test suite."""
    reset_logging()
    configure_logging(level=logging.DEBUG)
    yield
    reset_logging()


@pytest.fixture(autouse=True)
def _clear_log_context():
    """Clear LogContext between tests to prevent cross-test contamination."""
    LogContext.clear()
    yield
    LogContext.clear()


@pytest.fixture
def captured_logs():
    """
    Capture money_kernel logs as parsed JSON dicts.

    Usage::

        def test_something(captured_logs):
            Money.forge_with_currency(1, Currency("XXX", 2))
            logs = captured_logs()
            assert any(r["message"] == "money_currency_fallback" for r in logs)
    """
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    root = logging.getLogger("money_kernel")
    previous_level = root.level
    root.setLevel(logging.DEBUG)
    root.addHandler(handler)

    def _get_records() -> list[dict]:
        lines = stream.getvalue().strip().split("\n")
        return [json.loads(line) for line in lines if line]

    yield _get_records

    root.removeHandler(handler)
    root.setLevel(previous_level)


# =============================================================================
# Currency fixtures
# =============================================================================


@pytest.fixture
def eur() -> Currency:
    return Currency.by_iso_code("EUR")


@pytest.fixture
def usd() -> Currency:
    return Currency.by_iso_code("USD")


@pytest.fixture
def jpy() -> Currency:
    return Currency.by_iso_code("JPY")


@pytest.fixture
def invalid_currency() -> Currency:
    """A Currency built directly with a code the registry does not know."""
    return Currency(code="XYZ", minor_unit=2)
