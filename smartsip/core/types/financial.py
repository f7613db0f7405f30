"""
Financial helpers for portfolio valuation.

Valuation runs on plain floats: portfolio logs are small, and the figures
are presentation values rather than ledger balances.
"""

ZERO = 0.0
HUNDRED = 100.0


def calculate_notional_value(quantity: float, price: float) -> float:
    """Calculate the cash value of a transaction.

    Args:
        quantity: Units transacted
        price: Price per unit

    Returns:
        Unrounded notional value
    """
    return quantity * price


def calculate_return_rate(profit: float, invested: float) -> float:
    """Calculate a money-weighted return percentage.

    Args:
        profit: Value gained (or lost) on the invested amount
        invested: Net principal the profit is measured against

    Returns:
        Profit as a percentage of invested, or 0 when nothing is invested
    """
    if invested > ZERO:
        return profit / invested * HUNDRED
    return ZERO


def calculate_weighted_average(
    quantity: float, average: float, added_quantity: float, added_cost: float
) -> float:
    """Fold a new purchase into a weighted-average unit cost.

    Args:
        quantity: Units held before the purchase
        average: Average unit cost before the purchase
        added_quantity: Units bought
        added_cost: Total cost of the units bought

    Returns:
        New average unit cost, 0 when the resulting quantity is 0
    """
    total_quantity = quantity + added_quantity
    if total_quantity > ZERO:
        return (quantity * average + added_cost) / total_quantity
    return ZERO
