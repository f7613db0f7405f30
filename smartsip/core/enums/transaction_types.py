"""
Transaction type enumerations.

This module defines the allowed transaction types.
"""

from enum import StrEnum


class TransactionType(StrEnum):
    """
    Allowed transaction types.

    A BUY spends cash (or fresh principal), a SELL realizes proceeds into cash.
    """

    BUY = "BUY"
    SELL = "SELL"

    @property
    def is_buy(self) -> bool:
        """Check if transaction type is a buy."""
        return self == self.BUY

    @property
    def is_sell(self) -> bool:
        """Check if transaction type is a sell."""
        return self == self.SELL

    @classmethod
    def from_string(cls, value: str) -> "TransactionType":
        """
        Convert string to TransactionType enum, with case-insensitive matching.

        Args:
            value: String representation of the transaction type

        Returns:
            Corresponding TransactionType enum value

        Raises:
            ValueError: If transaction type is not supported
        """
        value_upper = value.strip().upper()
        for transaction_type in cls:
            if transaction_type.value == value_upper:
                return transaction_type

        raise ValueError(
            f"Unsupported transaction type: {value}. "
            f"Supported types: {', '.join([t.value for t in cls])}"
        )
