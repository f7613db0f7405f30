"""
DataFrame views of valuation results.
"""

from collections.abc import Sequence

import pandas as pd

from smartsip.core.models.holding import Holding
from smartsip.core.models.summary import HistoryDataPoint

HISTORY_COLUMNS = ["value", "invested", "return_rate"]
HOLDING_COLUMNS = [
    "quantity",
    "average_cost",
    "current_price",
    "market_value",
    "unrealized_profit",
    "unrealized_return_rate",
]


def history_to_frame(points: Sequence[HistoryDataPoint]) -> pd.DataFrame:
    """Convert history points to a DataFrame indexed by date.

    Returns:
        DataFrame with value, invested and return_rate columns; empty (with
        the same columns) for an empty history
    """
    if not points:
        return pd.DataFrame(columns=HISTORY_COLUMNS, index=pd.DatetimeIndex([], name="date"))

    frame = pd.DataFrame(
        {
            "value": [p.value for p in points],
            "invested": [p.invested for p in points],
            "return_rate": [p.return_rate for p in points],
        },
        index=pd.DatetimeIndex([pd.Timestamp(p.date) for p in points], name="date"),
    )
    return frame


def holdings_to_frame(holdings: Sequence[Holding]) -> pd.DataFrame:
    """Convert holdings to a DataFrame indexed by symbol."""
    records = [holding.to_dict() for holding in holdings]
    if not records:
        return pd.DataFrame(columns=HOLDING_COLUMNS, index=pd.Index([], name="symbol"))
    return pd.DataFrame.from_records(records, index="symbol")[HOLDING_COLUMNS]
