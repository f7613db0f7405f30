"""
Core enumerations for the portfolio tracker.

This module provides centralized enumerations for domain concepts
like transaction types, chart time ranges, and analysis risk levels.
"""

from .risk_levels import RiskLevel
from .time_ranges import TimeRange
from .transaction_types import TransactionType

__all__ = ["TransactionType", "TimeRange", "RiskLevel"]
