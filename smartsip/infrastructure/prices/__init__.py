"""
Price infrastructure.

This module provides price persistence, quote services and historical
price sources for the valuation engine.
"""

from .fetchers import StaticPriceFetcher
from .history import FlatPriceHistory, SyntheticPriceHistory, create_price_history
from .price_cache import JsonPriceCache

__all__ = [
    "FlatPriceHistory",
    "JsonPriceCache",
    "StaticPriceFetcher",
    "SyntheticPriceHistory",
    "create_price_history",
]
