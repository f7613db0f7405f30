"""
Portfolio summary and history point models.
"""

from dataclasses import asdict, dataclass
from datetime import date

from smartsip.core.types.financial import ZERO, calculate_return_rate


@dataclass(frozen=True)
class PortfolioSummary:
    """Cash-flow-aware totals for the whole portfolio."""

    total_invested: float
    cash_balance: float
    stock_value: float
    current_value: float
    total_profit: float
    return_rate: float

    @classmethod
    def empty(cls) -> "PortfolioSummary":
        """Summary of a portfolio without any transactions."""
        return cls(
            total_invested=ZERO,
            cash_balance=ZERO,
            stock_value=ZERO,
            current_value=ZERO,
            total_profit=ZERO,
            return_rate=ZERO,
        )

    @classmethod
    def from_totals(
        cls, total_invested: float, cash_balance: float, stock_value: float
    ) -> "PortfolioSummary":
        """Derive value, profit and return from the three running totals.

        Args:
            total_invested: Net principal injected
            cash_balance: Uninvested sale proceeds
            stock_value: Market value of active holdings

        Returns:
            Fully populated summary
        """
        current_value = stock_value + cash_balance
        total_profit = current_value - total_invested
        return cls(
            total_invested=total_invested,
            cash_balance=cash_balance,
            stock_value=stock_value,
            current_value=current_value,
            total_profit=total_profit,
            return_rate=calculate_return_rate(total_profit, total_invested),
        )

    def to_dict(self) -> dict:
        """Convert summary to dictionary."""
        return asdict(self)


@dataclass(frozen=True)
class HistoryDataPoint:
    """Reconstructed portfolio totals at the end of one calendar day."""

    date: date
    value: float
    invested: float
    return_rate: float

    def to_dict(self) -> dict:
        """Convert data point to dictionary."""
        return {
            "date": self.date.isoformat(),
            "value": self.value,
            "invested": self.invested,
            "return_rate": self.return_rate,
        }
