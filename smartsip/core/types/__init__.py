"""
Core type definitions and utilities.
"""

# Re-export financial utilities for easy access
from .financial import (
    HUNDRED,
    ZERO,
    calculate_notional_value,
    calculate_return_rate,
    calculate_weighted_average,
)

__all__ = [
    # Utility functions
    "calculate_notional_value",
    "calculate_return_rate",
    "calculate_weighted_average",
    # Constants
    "ZERO",
    "HUNDRED",
]
