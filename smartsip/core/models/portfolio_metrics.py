"""
Presentation metrics over valuation results.
"""

from collections.abc import Sequence
from datetime import date

from smartsip.core.enums import TimeRange
from smartsip.core.models.summary import HistoryDataPoint


def filter_history(
    points: Sequence[HistoryDataPoint], time_range: TimeRange, today: date | None = None
) -> list[HistoryDataPoint]:
    """Keep the history points that fall inside a chart range.

    Args:
        points: Chronological history
        time_range: Range to keep, measured backward from today
        today: Reference date, defaults to the current date

    Returns:
        Points dated on or after the range start (all points for ALL)
    """
    start = time_range.start_date(today or date.today())
    if start is None:
        return list(points)
    return [point for point in points if point.date >= start]
