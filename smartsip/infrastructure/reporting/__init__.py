"""
Reporting helpers that turn valuation results into tabular data.
"""

from .history_frame import history_to_frame, holdings_to_frame

__all__ = ["history_to_frame", "holdings_to_frame"]
