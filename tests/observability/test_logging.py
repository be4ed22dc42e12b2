"""
Test suite for logging helpers and correlation IDs.

System role: Verification of observability utilities
"""

import logging

import pytest

from newsrag.observability import configure_logging, get_correlation_id, set_correlation_id
from newsrag.observability.correlation import clear_correlation_id
from newsrag.observability.log_utils import log_exception_with_context, safe_log_value
from newsrag.observability.logger import CorrelationIdFilter


@pytest.fixture(autouse=True)
def reset_correlation():
    yield
    clear_correlation_id()


class TestCorrelationId:
    """Test suite for correlation ID context."""

    def test_set_should_generate_id_when_none_given(self) -> None:
        value = set_correlation_id()

        assert len(value) == 32
        assert get_correlation_id() == value

    def test_set_should_keep_given_id(self) -> None:
        set_correlation_id("trace-1")

        assert get_correlation_id() == "trace-1"

    def test_filter_should_attach_id_to_records(self) -> None:
        set_correlation_id("trace-2")
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)

        CorrelationIdFilter().filter(record)

        assert record.correlation_id == "trace-2"

    def test_filter_should_use_dash_outside_requests(self) -> None:
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)

        CorrelationIdFilter().filter(record)

        assert record.correlation_id == "-"


class TestLogUtils:
    """Test suite for log_utils."""

    def test_safe_log_value_should_truncate_long_strings(self) -> None:
        value = safe_log_value("x" * 500, max_length=10)

        assert value.startswith("xxxxxxxxxx...")
        assert "500 chars" in value

    def test_safe_log_value_should_summarise_collections(self) -> None:
        assert safe_log_value([1, 2, 3]) == "list(3 items)"
        assert safe_log_value({"a": 1}) == "dict(1 keys)"
        assert safe_log_value(None) == "None"

    def test_log_exception_should_include_error_type(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = logging.getLogger("newsrag.tests")

        with caplog.at_level(logging.ERROR, logger="newsrag.tests"):
            log_exception_with_context(logger, "boom", ValueError("bad"), session_id="abc")

        assert caplog.records[0].error_type == "ValueError"
        assert caplog.records[0].session_id == "abc"


class TestConfigureLogging:
    """Test suite for configure_logging."""

    def test_configure_should_install_single_handler_at_level(self) -> None:
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            configure_logging("debug")
            configure_logging("warning")

            assert root.level == logging.WARNING
            assert len(root.handlers) == 1
            assert logging.getLogger("httpx").level == logging.WARNING
        finally:
            root.handlers = saved_handlers
            root.setLevel(saved_level)
