"""
Holding domain model.

A holding is derived state: it is rebuilt from the transaction log on
every valuation and never stored.
"""

from dataclasses import dataclass

from smartsip.core.constants import HOLDING_EPSILON
from smartsip.core.types.financial import ZERO, calculate_return_rate


@dataclass
class Holding:
    """Current position in one instrument."""

    symbol: str
    quantity: float
    average_cost: float
    current_price: float
    name: str = ""

    def __post_init__(self) -> None:
        """Default the display name to the symbol."""
        if not self.name:
            self.name = self.symbol

    @property
    def is_active(self) -> bool:
        """Check if the quantity is a real position rather than float dust."""
        return self.quantity > HOLDING_EPSILON

    def market_value(self) -> float:
        """Calculate the value of the position at the current price."""
        return self.quantity * self.current_price

    def cost_basis(self) -> float:
        """Calculate what the held units cost at the average cost."""
        return self.quantity * self.average_cost

    def unrealized_profit(self) -> float:
        """Calculate the paper gain of the held units."""
        return self.market_value() - self.cost_basis()

    def unrealized_return_rate(self) -> float:
        """Calculate the paper gain as a percentage of cost basis."""
        cost_basis = self.cost_basis()
        if cost_basis <= ZERO:
            return ZERO
        return calculate_return_rate(self.unrealized_profit(), cost_basis)

    def to_dict(self) -> dict:
        """Convert holding to dictionary."""
        return {
            "symbol": self.symbol,
            "name": self.name,
            "quantity": self.quantity,
            "average_cost": self.average_cost,
            "current_price": self.current_price,
            "market_value": self.market_value(),
            "unrealized_profit": self.unrealized_profit(),
            "unrealized_return_rate": self.unrealized_return_rate(),
        }
