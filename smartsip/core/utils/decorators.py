"""
Utility decorators for logging portfolio operations.
"""

import functools
import inspect
import time
import uuid
from collections.abc import Callable
from typing import Any

from loguru import logger

LOGGED_PARAMETERS = ("symbol", "type", "price", "quantity", "date", "transaction_id")


def _serialize_parameter_value(value: Any) -> Any:
    """Serialize parameter value for logging."""
    if hasattr(value, "value") and hasattr(value, "name"):
        return str(value.value)  # Handle enum values
    if hasattr(value, "isoformat"):
        return value.isoformat()  # Handle dates
    return value


def _extract_operation_context(
    func: Callable[..., Any], args: tuple[Any, ...], kwargs: dict[str, Any]
) -> dict[str, Any]:
    """Extract the loggable arguments of a call."""
    bound_args = inspect.signature(func).bind(*args, **kwargs)
    bound_args.apply_defaults()
    return {
        name: _serialize_parameter_value(value)
        for name, value in bound_args.arguments.items()
        if name in LOGGED_PARAMETERS
    }


def log_operation[F: Callable[..., Any]](func: F) -> F:
    """Decorator to log portfolio mutations with correlation IDs and timing."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        func_name = func.__name__
        context = {
            "correlation_id": str(uuid.uuid4())[:8],
            **_extract_operation_context(func, args, kwargs),
        }
        logger.debug(f"Portfolio operation started: {func_name}", extra=context)
        start_time = time.perf_counter()

        try:
            result = func(*args, **kwargs)
        except Exception as e:
            execution_time_ms = round((time.perf_counter() - start_time) * 1000, 2)
            logger.error(
                f"Portfolio operation failed: {func_name}",
                extra={
                    **context,
                    "execution_time_ms": execution_time_ms,
                    "error_type": type(e).__name__,
                    "error_message": str(e),
                },
            )
            raise

        execution_time_ms = round((time.perf_counter() - start_time) * 1000, 2)
        logger.success(
            f"Portfolio operation completed: {func_name}",
            extra={**context, "execution_time_ms": execution_time_ms},
        )
        return result

    return wrapper  # type: ignore
