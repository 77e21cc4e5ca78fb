"""
Test suite for logging configuration and correlation IDs.

System role: Verification of observability helpers
"""

import logging

import pytest

from knowledge_assistant.observability import (
    clear_correlation_id,
    configure_logging,
    get_correlation_id,
    set_correlation_id,
)
from knowledge_assistant.observability.logger import CorrelationIdFilter


@pytest.fixture(autouse=True)
def reset_correlation_id():
    yield
    clear_correlation_id()


class TestCorrelationId:
    def test_explicit_id_should_be_kept(self) -> None:
        assert set_correlation_id("abc") == "abc"
        assert get_correlation_id() == "abc"

    def test_missing_id_should_be_generated(self) -> None:
        value = set_correlation_id(None)

        assert value
        assert get_correlation_id() == value

    def test_clear_should_reset_to_empty(self) -> None:
        set_correlation_id("abc")

        clear_correlation_id()

        assert get_correlation_id() == ""


class TestLoggingConfiguration:
    def test_filter_should_attach_correlation_id(self) -> None:
        # Arrange
        set_correlation_id("req-1")
        record = logging.LogRecord("test", logging.INFO, __file__, 1, "msg", None, None)

        # Act
        CorrelationIdFilter().filter(record)

        # Assert
        assert record.correlation_id == "req-1"

    def test_filter_should_use_dash_outside_requests(self) -> None:
        record = logging.LogRecord("test", logging.INFO, __file__, 1, "msg", None, None)

        CorrelationIdFilter().filter(record)

        assert record.correlation_id == "-"

    def test_configure_logging_should_install_single_handler(self) -> None:
        # Act
        configure_logging("DEBUG")
        configure_logging("WARNING")

        # Assert
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.level == logging.WARNING
        assert logging.getLogger("httpx").level == logging.WARNING
