"""
Unit tests for utility decorators.
"""

from datetime import date
from unittest.mock import patch

import pytest

from smartsip.core.enums import TransactionType
from smartsip.core.utils.decorators import log_operation


class TestLogOperationDecorator:
    """Test suite for @log_operation decorator."""

    def test_should_return_result_and_log_success(self) -> None:
        """Test logging around a successful call."""

        @log_operation
        def add(symbol: str, type: TransactionType, date: date) -> str:
            return symbol

        with patch("smartsip.core.utils.decorators.logger") as mock_logger:
            result = add("AAPL", TransactionType.BUY, date(2024, 1, 10))

        assert result == "AAPL"
        mock_logger.debug.assert_called_once()
        mock_logger.success.assert_called_once()
        context = mock_logger.success.call_args.kwargs["extra"]
        assert context["symbol"] == "AAPL"
        assert context["type"] == "BUY"
        assert context["date"] == "2024-01-10"
        assert "execution_time_ms" in context
        assert len(context["correlation_id"]) == 8

    def test_should_log_and_reraise_failures(self) -> None:
        """Test logging of a failing call."""

        @log_operation
        def delete(transaction_id: str) -> None:
            raise KeyError(transaction_id)

        with patch("smartsip.core.utils.decorators.logger") as mock_logger:
            with pytest.raises(KeyError):
                delete("abc")

        mock_logger.success.assert_not_called()
        context = mock_logger.error.call_args.kwargs["extra"]
        assert context["transaction_id"] == "abc"
        assert context["error_type"] == "KeyError"

    def test_should_skip_unlisted_parameters(self) -> None:
        """Test that only known parameters are logged."""

        @log_operation
        def reset(options: object, quantity: float = 1.0) -> None:
            return None

        with patch("smartsip.core.utils.decorators.logger") as mock_logger:
            reset(object())

        context = mock_logger.success.call_args.kwargs["extra"]
        assert "options" not in context
        assert context["quantity"] == 1.0

    def test_should_preserve_function_metadata(self) -> None:
        """Test functools.wraps."""

        @log_operation
        def undo() -> bool:
            """Undo docstring."""
            return True

        assert undo.__name__ == "undo"
        assert undo.__doc__ == "Undo docstring."
