"""Validation helpers for transaction input."""

from collections.abc import Sequence
from datetime import date

from smartsip.core.enums import TransactionType
from smartsip.core.exceptions.portfolio import InsufficientHoldingsError
from smartsip.core.models.transaction import Transaction
from smartsip.core.types.financial import ZERO
from smartsip.core.utils.validation import (
    validate_date,
    validate_non_negative,
    validate_positive,
    validate_symbol,
    validate_transaction_type,
)

from .portfolio_state import calculate_portfolio_state


class TransactionValidator:
    """Centralized validation for transactions entering the log.

    The valuation engine tolerates over-sells and bad numbers by clamping;
    this is where they are rejected instead, before they reach it.
    """

    @staticmethod
    def validate_fields(
        symbol: str,
        type: TransactionType | str,
        price: float,
        quantity: float,
        day: date | str,
        fees: float = ZERO,
    ) -> tuple[str, TransactionType, float, float, date, float]:
        """Validate and normalize raw transaction fields.

        Returns:
            Normalized (symbol, type, price, quantity, date, fees)

        Raises:
            ValidationError: If any field is invalid
        """
        return (
            validate_symbol(symbol),
            validate_transaction_type(type),
            validate_positive(price, "price"),
            validate_positive(quantity, "quantity"),
            validate_date(day),
            validate_non_negative(fees, "fees"),
        )

    @staticmethod
    def validate_sell_quantity(
        symbol: str, quantity: float, existing: Sequence[Transaction]
    ) -> None:
        """Validate that a SELL does not exceed the currently held quantity.

        Holdings are measured over the whole existing log, regardless of the
        new transaction's date, the same way the entry form checks them.

        Raises:
            InsufficientHoldingsError: If the quantity exceeds what is held
        """
        state = calculate_portfolio_state(existing, {})
        available = state.held_quantity(symbol)
        if quantity > available:
            raise InsufficientHoldingsError(symbol=symbol, requested=quantity, available=available)
