"""
Transaction domain model.

Transactions are immutable records; the log hands them to the valuation
engine as-is, in whatever order they were entered.
"""

import uuid
from dataclasses import dataclass
from datetime import date

from smartsip.core.enums import TransactionType
from smartsip.core.types.financial import ZERO, calculate_notional_value


@dataclass(frozen=True)
class Transaction:
    """Represents a single buy or sell of an instrument."""

    id: str
    symbol: str
    type: TransactionType
    date: date
    price: float
    quantity: float
    fees: float = ZERO

    @property
    def is_buy(self) -> bool:
        """Check if this transaction is a purchase."""
        return self.type.is_buy

    @property
    def is_sell(self) -> bool:
        """Check if this transaction is a sale."""
        return self.type.is_sell

    def notional_value(self) -> float:
        """Calculate the cash value of the transaction (cost for BUY, revenue for SELL)."""
        return calculate_notional_value(self.quantity, self.price)

    def to_dict(self) -> dict:
        """Convert transaction to dictionary."""
        return {
            "id": self.id,
            "symbol": self.symbol,
            "type": self.type.value,
            "date": self.date.isoformat(),
            "price": self.price,
            "quantity": self.quantity,
            "fees": self.fees,
        }

    @classmethod
    def create(
        cls,
        symbol: str,
        type: TransactionType,
        date: date,
        price: float,
        quantity: float,
        fees: float = ZERO,
        transaction_id: str | None = None,
    ) -> "Transaction":
        """Factory method creating a transaction with a normalized symbol.

        Args:
            symbol: Instrument identifier, any case
            type: BUY or SELL
            date: Calendar date of execution
            price: Price per unit
            quantity: Units transacted
            fees: Carried for completeness, unused by valuation
            transaction_id: Explicit id, generated when omitted

        Returns:
            New Transaction instance
        """
        return cls(
            id=transaction_id or uuid.uuid4().hex,
            symbol=symbol.strip().upper(),
            type=type,
            date=date,
            price=price,
            quantity=quantity,
            fees=fees,
        )
