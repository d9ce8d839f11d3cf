"""
Tests for the use-case error decorator and the logging helpers.
"""

import logging

import pytest

from dtos.internal import UseCaseResult
from dtos.request import PickUpOrderRequest
from exceptions import DatabaseError, OrderNotFoundError
from utils.error_handlers import handle_use_case_errors
from utils.logging_utils import (
    ContextFormatter,
    StructuredLogger,
    clear_logging_context,
    get_logging_context,
    logging_context,
    set_logging_context,
)


class FakeUseCase:
    def __init__(self, outcome):
        self.outcome = outcome
        self.seen_context = None

    @handle_use_case_errors("Fake operation")
    async def execute(self, request):
        self.seen_context = get_logging_context()
        if isinstance(self.outcome, Exception):
            raise self.outcome
        return self.outcome


REQUEST = PickUpOrderRequest(deliveryman_id="d-1", order_id="o-1")


@pytest.mark.asyncio
class TestHandleUseCaseErrors:
    async def test_wraps_value_in_success(self):
        result = await FakeUseCase("value").execute(REQUEST)

        assert result == UseCaseResult.success("value")
        assert result.unwrap() == "value"

    async def test_binds_operation_and_ids(self):
        use_case = FakeUseCase(None)

        await use_case.execute(REQUEST)

        assert use_case.seen_context == {
            "operation": "Fake operation",
            "deliveryman_id": "d-1",
            "order_id": "o-1",
        }
        assert get_logging_context() == {}

    async def test_rule_violation_becomes_failure(self, caplog):
        error = OrderNotFoundError("o-1")

        with caplog.at_level(logging.WARNING):
            result = await FakeUseCase(error).execute(REQUEST)

        assert result.is_failure()
        assert result.error is error
        assert any("OrderNotFoundError: Order not found" in r.getMessage() for r in caplog.records)
        assert all(r.levelno == logging.WARNING for r in caplog.records)

    async def test_database_error_logged_as_error(self, caplog):
        with caplog.at_level(logging.WARNING):
            result = await FakeUseCase(DatabaseError("save order", "disk full")).execute(REQUEST)

        assert isinstance(result.error, DatabaseError)
        assert caplog.records[-1].levelno == logging.ERROR

    async def test_unexpected_error_propagates(self, caplog):
        with caplog.at_level(logging.ERROR):
            with pytest.raises(RuntimeError, match="boom"):
                await FakeUseCase(RuntimeError("boom")).execute(REQUEST)

        assert "Unexpected error: boom" in caplog.text


def test_unwrap_without_error_returns_none():
    assert UseCaseResult.success().unwrap() is None


class TestLoggingContext:
    def setup_method(self):
        clear_logging_context()

    def test_context_manager_restores_previous(self):
        set_logging_context(request="r-1")

        with logging_context(order_id="o-1"):
            assert get_logging_context() == {"request": "r-1", "order_id": "o-1"}

        assert get_logging_context() == {"request": "r-1"}
        clear_logging_context()

    def test_structured_logger_attaches_context(self, caplog):
        logger = StructuredLogger("tests.structured")

        with logging_context(operation="Pick up order"):
            with caplog.at_level(logging.INFO, logger="tests.structured"):
                logger.info("Order moved", extra={"order_id": "o-1"})

        record = caplog.records[-1]
        assert record.operation == "Pick up order"
        assert record.order_id == "o-1"
        assert record.context == {"operation": "Pick up order", "order_id": "o-1"}

    def test_formatter_appends_context(self):
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "hello", None, None)
        record.context = {"order_id": "o-1"}

        line = ContextFormatter("%(message)s").format(record)

        assert line == "hello [order_id=o-1]"
