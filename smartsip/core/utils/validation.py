"""
Validation utilities for transaction input.

Provides consistent validation for the input-collection layer. The
valuation engine does not call these; it tolerates whatever reaches it.
"""

import math
from datetime import date, datetime
from typing import Any

from smartsip.core.enums import TransactionType
from smartsip.core.exceptions.portfolio import ValidationError


def validate_symbol(symbol: Any, param_name: str = "symbol") -> str:
    """Validate and normalize an instrument symbol.

    Args:
        symbol: Value to validate
        param_name: Parameter name for error messages

    Returns:
        The stripped, uppercased symbol

    Raises:
        TypeError: If symbol is not a string
        ValidationError: If symbol is empty
    """
    if not isinstance(symbol, str):
        raise TypeError(f"{param_name} must be str, got {type(symbol).__name__}")
    normalized = symbol.strip().upper()
    if not normalized:
        raise ValidationError(f"{param_name} must not be empty")
    return normalized


def validate_positive(value: float, param_name: str) -> float:
    """Validate that a numeric value is positive and finite.

    Raises:
        ValidationError: If value is not positive or not finite
    """
    if not math.isfinite(value):
        raise ValidationError(f"{param_name} must be finite, got {value}")
    if value <= 0:
        raise ValidationError(f"{param_name} must be positive, got {value}")
    return value


def validate_non_negative(value: float, param_name: str) -> float:
    """Validate that a numeric value is zero or positive.

    Raises:
        ValidationError: If value is negative or not finite
    """
    if not math.isfinite(value) or value < 0:
        raise ValidationError(f"{param_name} must be non-negative, got {value}")
    return value


def validate_transaction_type(value: Any) -> TransactionType:
    """Coerce a value into a TransactionType.

    Raises:
        ValidationError: If the value names no known transaction type
    """
    if isinstance(value, TransactionType):
        return value
    try:
        return TransactionType.from_string(str(value))
    except ValueError as e:
        raise ValidationError(str(e)) from e


def validate_date(value: Any, param_name: str = "date") -> date:
    """Coerce a date, datetime or ISO string into a calendar date.

    Raises:
        ValidationError: If the value cannot be read as a date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(text).date()
        except ValueError as e:
            raise ValidationError(f"{param_name} must be YYYY-MM-DD, got {value!r}") from e
    raise ValidationError(f"{param_name} must be a date, got {type(value).__name__}")
