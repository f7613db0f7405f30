"""
Shared fold step for portfolio valuation.

Both the current-state calculation and the day-by-day history replay fold
transactions through the same cash-recycling rule, kept here so the two
can never drift apart.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from smartsip.core.models.transaction import Transaction
from smartsip.core.types.financial import ZERO


def sort_transactions(transactions: Iterable[Transaction]) -> list[Transaction]:
    """Return transactions in ascending date order.

    The sort is stable: transactions sharing a date keep their input order.
    """
    return sorted(transactions, key=lambda t: t.date)


def reduce_quantity(held: float, sold: float) -> float:
    """Remove sold units from a position, clamping over-sells to zero."""
    remaining = held - sold
    if remaining < ZERO:
        return ZERO
    return remaining


@dataclass
class CashLedger:
    """Running principal and cash totals.

    Sale proceeds go to the cash pile. Purchases draw on that pile first and
    only the shortfall counts as newly injected principal, so cash never
    goes negative.
    """

    net_invested: float = ZERO
    cash_balance: float = ZERO

    def fund_purchase(self, cost: float) -> None:
        """Pay for a purchase from cash, topping up with new principal."""
        if self.cash_balance >= cost:
            self.cash_balance -= cost
        else:
            self.net_invested += cost - self.cash_balance
            self.cash_balance = ZERO

    def realize_sale(self, revenue: float) -> None:
        """Add sale proceeds to the cash pile."""
        self.cash_balance += revenue

    def apply(self, transaction: Transaction) -> None:
        """Apply the cash side of a transaction."""
        if transaction.is_sell:
            self.realize_sale(transaction.notional_value())
        else:
            self.fund_purchase(transaction.notional_value())
