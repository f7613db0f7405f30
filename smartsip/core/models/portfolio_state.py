"""
Current portfolio state calculation.

Folds the whole transaction log once, in date order, into per-symbol
holdings and portfolio-level totals. Pure: inputs are never mutated and
nothing is cached between calls.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from loguru import logger

from smartsip.core.constants import CASH_ALLOCATION_LABEL, CASH_ALLOCATION_THRESHOLD
from smartsip.core.models.holding import Holding
from smartsip.core.models.summary import PortfolioSummary
from smartsip.core.models.transaction import Transaction
from smartsip.core.types.financial import ZERO, calculate_weighted_average

from .portfolio_ledger import CashLedger, reduce_quantity, sort_transactions


@dataclass(frozen=True)
class PortfolioState:
    """Active holdings plus the summary derived alongside them."""

    holdings: list[Holding] = field(default_factory=list)
    summary: PortfolioSummary = field(default_factory=PortfolioSummary.empty)

    def holding(self, symbol: str) -> Holding | None:
        """Get the active holding for a symbol, if any."""
        symbol = symbol.strip().upper()
        for holding in self.holdings:
            if holding.symbol == symbol:
                return holding
        return None

    def held_quantity(self, symbol: str) -> float:
        """Get the active quantity for a symbol (0 when not held)."""
        holding = self.holding(symbol)
        return holding.quantity if holding else ZERO

    def allocation(self) -> list[tuple[str, float]]:
        """Split total value into per-holding slices plus realized cash.

        Cash is only listed when it exceeds the allocation threshold.
        """
        slices = [(holding.symbol, holding.market_value()) for holding in self.holdings]
        if self.summary.cash_balance > CASH_ALLOCATION_THRESHOLD:
            slices.append((CASH_ALLOCATION_LABEL, self.summary.cash_balance))
        return slices


class StateCalculator:
    """Derives holdings and summary from a transaction log and a price map."""

    @staticmethod
    def calculate(
        transactions: Sequence[Transaction], prices: Mapping[str, float]
    ) -> PortfolioState:
        """Fold transactions into holdings and a cash-flow-aware summary.

        Args:
            transactions: Transaction log in any order
            prices: Latest known price per symbol

        Returns:
            Active holdings (first-seen symbol order) and portfolio summary
        """
        if not transactions:
            return PortfolioState()

        ledger = CashLedger()
        holdings: dict[str, Holding] = {}

        for transaction in sort_transactions(transactions):
            holding = holdings.get(transaction.symbol)
            if holding is None:
                holding = Holding(
                    symbol=transaction.symbol,
                    quantity=ZERO,
                    average_cost=ZERO,
                    current_price=prices.get(transaction.symbol) or transaction.price,
                )
                holdings[transaction.symbol] = holding

            ledger.apply(transaction)

            if transaction.is_buy:
                holding.average_cost = calculate_weighted_average(
                    holding.quantity,
                    holding.average_cost,
                    transaction.quantity,
                    transaction.notional_value(),
                )
                holding.quantity += transaction.quantity
            else:
                holding.quantity = reduce_quantity(holding.quantity, transaction.quantity)

        active = [holding for holding in holdings.values() if holding.is_active]
        stock_value = sum((holding.market_value() for holding in active), ZERO)
        summary = PortfolioSummary.from_totals(
            total_invested=ledger.net_invested,
            cash_balance=ledger.cash_balance,
            stock_value=stock_value,
        )

        logger.debug(
            f"Calculated portfolio state: {len(transactions)} transactions, "
            f"{len(active)} active holdings, value={summary.current_value:.2f}"
        )
        return PortfolioState(holdings=active, summary=summary)


def calculate_portfolio_state(
    transactions: Sequence[Transaction], prices: Mapping[str, float]
) -> PortfolioState:
    """Calculate current holdings and summary (see StateCalculator.calculate)."""
    return StateCalculator.calculate(transactions, prices)
