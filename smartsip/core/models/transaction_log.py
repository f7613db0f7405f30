"""
Transaction log with bounded undo.

The log is the only mutable state of the application: every add, delete
or clear first pushes an immutable snapshot of the previous contents onto
a bounded undo stack.
"""

import threading
import uuid
from collections import deque
from collections.abc import Iterable
from datetime import date

from loguru import logger

from smartsip.core.constants import MAX_UNDO_STEPS
from smartsip.core.enums import TransactionType
from smartsip.core.exceptions.portfolio import TransactionNotFoundError
from smartsip.core.models.transaction import Transaction
from smartsip.core.types.financial import ZERO

from .portfolio_helpers import TransactionValidator


class TransactionLog:
    """Ordered, undoable list of transactions.

    Thread Safety:
        All mutations hold an internal RLock so a snapshot and the change it
        guards are applied atomically.
    """

    def __init__(
        self,
        transactions: Iterable[Transaction] | None = None,
        max_undo_steps: int = MAX_UNDO_STEPS,
    ) -> None:
        if max_undo_steps <= 0:
            raise ValueError("Undo depth must be positive")
        self._transactions: list[Transaction] = list(transactions or [])
        self._undo_stack: deque[tuple[Transaction, ...]] = deque(maxlen=max_undo_steps)
        self._lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._transactions)

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        """Get an immutable snapshot of the log in entry order."""
        with self._lock:
            return tuple(self._transactions)

    @property
    def can_undo(self) -> bool:
        """Check if there is a snapshot to restore."""
        return len(self._undo_stack) > 0

    @property
    def undo_depth(self) -> int:
        """Get the number of snapshots available for undo."""
        return len(self._undo_stack)

    def symbols(self) -> list[str]:
        """Get distinct symbols in first-seen order."""
        with self._lock:
            return list(dict.fromkeys(t.symbol for t in self._transactions))

    def for_symbol(self, symbol: str) -> list[Transaction]:
        """Get a symbol's transactions, newest first."""
        symbol = symbol.strip().upper()
        with self._lock:
            matching = [t for t in self._transactions if t.symbol == symbol]
        return sorted(matching, key=lambda t: t.date, reverse=True)

    def get(self, transaction_id: str) -> Transaction:
        """Get a transaction by id.

        Raises:
            TransactionNotFoundError: If no transaction has the id
        """
        with self._lock:
            for transaction in self._transactions:
                if transaction.id == transaction_id:
                    return transaction
        raise TransactionNotFoundError(transaction_id)

    def add(
        self,
        symbol: str,
        type: TransactionType | str,
        price: float,
        quantity: float,
        date: date | str,
        fees: float = ZERO,
    ) -> Transaction:
        """Validate and append a new transaction.

        Returns:
            The stored transaction

        Raises:
            ValidationError: If a field is invalid
            InsufficientHoldingsError: If a SELL exceeds the held quantity
        """
        symbol, type, price, quantity, day, fees = TransactionValidator.validate_fields(
            symbol, type, price, quantity, date, fees
        )

        with self._lock:
            if type == TransactionType.SELL:
                TransactionValidator.validate_sell_quantity(symbol, quantity, self._transactions)

            transaction = Transaction.create(
                symbol=symbol,
                type=type,
                date=day,
                price=price,
                quantity=quantity,
                fees=fees,
                transaction_id=uuid.uuid4().hex,
            )
            self._save_snapshot()
            self._transactions.append(transaction)

        logger.info(
            f"Added {transaction.type} {transaction.symbol} "
            f"{transaction.quantity}@{transaction.price} on {transaction.date}"
        )
        return transaction

    def delete(self, transaction_id: str) -> Transaction:
        """Remove a transaction by id.

        Returns:
            The removed transaction

        Raises:
            TransactionNotFoundError: If no transaction has the id
        """
        with self._lock:
            transaction = self.get(transaction_id)
            self._save_snapshot()
            self._transactions = [t for t in self._transactions if t.id != transaction_id]

        logger.info(f"Deleted transaction {transaction_id} ({transaction.symbol})")
        return transaction

    def undo(self) -> bool:
        """Restore the most recent snapshot.

        Returns:
            False when there was nothing to undo
        """
        with self._lock:
            if not self._undo_stack:
                return False
            self._transactions = list(self._undo_stack.pop())

        logger.info(f"Undo restored {len(self._transactions)} transactions")
        return True

    def clear(self, keep_undo: bool = True) -> None:
        """Remove every transaction.

        Args:
            keep_undo: Snapshot the current contents first so the clear can be
                undone; pass False when the undo history is being wiped too
        """
        with self._lock:
            if keep_undo:
                self._save_snapshot()
            self._transactions = []
        logger.info("Cleared transaction log")

    def clear_undo_history(self) -> None:
        """Drop every undo snapshot."""
        with self._lock:
            self._undo_stack.clear()

    def _save_snapshot(self) -> None:
        """Push the current contents onto the undo stack, evicting the oldest."""
        self._undo_stack.append(tuple(self._transactions))
