"""
Chart time range enumerations.

This module defines the windows the performance history can be viewed in.
"""

import calendar
from datetime import date
from enum import StrEnum


class TimeRange(StrEnum):
    """
    Allowed performance chart ranges.

    Ranges are measured backward from today in calendar months/years.
    """

    ONE_MONTH = "1M"
    ONE_YEAR = "1Y"
    ALL = "ALL"

    @classmethod
    def from_string(cls, value: str) -> "TimeRange":
        """
        Convert string to TimeRange enum.

        Args:
            value: String representation of the range

        Returns:
            Corresponding TimeRange enum value

        Raises:
            ValueError: If range is not supported
        """
        value_upper = value.strip().upper()
        for time_range in cls:
            if time_range.value == value_upper:
                return time_range

        raise ValueError(
            f"Unsupported time range: {value}. "
            f"Supported ranges: {', '.join([r.value for r in cls])}"
        )

    def start_date(self, today: date) -> date | None:
        """
        Get the first date included by this range.

        Args:
            today: Reference date

        Returns:
            First included date, or None when the range is unbounded
        """
        if self == self.ALL:
            return None
        if self == self.ONE_YEAR:
            return _shift_months(today, -12)
        return _shift_months(today, -1)


def _shift_months(day: date, months: int) -> date:
    """Shift a date by whole months, clamping the day to the target month's length."""
    month_index = day.year * 12 + (day.month - 1) + months
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))
