"""
Risk level enumerations.

This module defines the risk levels a portfolio analysis can report.
"""

from enum import StrEnum


class RiskLevel(StrEnum):
    """Allowed analysis risk levels."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @classmethod
    def from_string(cls, value: str) -> "RiskLevel":
        """
        Convert string to RiskLevel enum, with case-insensitive matching.

        Raises:
            ValueError: If risk level is not supported
        """
        value_lower = value.strip().lower()
        for level in cls:
            if level.value.lower() == value_lower:
                return level

        raise ValueError(
            f"Unsupported risk level: {value}. "
            f"Supported levels: {', '.join([level.value for level in cls])}"
        )
