"""
Historical price sources.

No real price-history feed is wired in. The synthetic source fabricates a
plausible daily series by walking backward from today's known price with
small random multiplicative steps; the flat source simply repeats today's
price. Both map today to exactly the known current price.
"""

from collections.abc import Mapping
from datetime import date, timedelta
from threading import RLock

import numpy as np
from cachetools import LRUCache
from loguru import logger

from smartsip.core.constants import (
    DEFAULT_FALLBACK_PRICE,
    SYNTHETIC_CACHE_SIZE,
    SYNTHETIC_HISTORY_DAYS,
    SYNTHETIC_MAX_DAILY_CHANGE,
    SYNTHETIC_MIN_DAILY_CHANGE,
)
from smartsip.core.interfaces.services import IPriceHistory


class SyntheticPriceHistory(IPriceHistory):
    """Random-walk price history anchored on the current price.

    Series are memoized per (symbol, anchor price, today, window) so a
    repeated valuation within the same day draws the same curve.
    """

    def __init__(
        self,
        window_days: int = SYNTHETIC_HISTORY_DAYS,
        min_change: float = SYNTHETIC_MIN_DAILY_CHANGE,
        max_change: float = SYNTHETIC_MAX_DAILY_CHANGE,
        seed: int | None = None,
        cache_size: int = SYNTHETIC_CACHE_SIZE,
    ) -> None:
        """Initialize the generator.

        Args:
            window_days: Number of days (today included) covered by each series
            min_change: Lower bound of the uniform daily change
            max_change: Upper bound of the uniform daily change
            seed: Seed for reproducible series
            cache_size: Maximum number of memoized series
        """
        if window_days <= 0:
            raise ValueError("Window must be positive")
        if not -1.0 < min_change <= max_change:
            raise ValueError(f"Invalid daily change range: [{min_change}, {max_change}]")

        self.window_days = window_days
        self.min_change = min_change
        self.max_change = max_change
        self._rng = np.random.default_rng(seed)
        self._cache: LRUCache[tuple, dict[date, float]] = LRUCache(maxsize=cache_size)
        self._cache_lock = RLock()

    def series(
        self, symbol: str, current_price: float | None, today: date
    ) -> Mapping[date, float]:
        """Get the synthetic daily series for a symbol, newest day first."""
        anchor = current_price or DEFAULT_FALLBACK_PRICE
        key = (symbol, anchor, today, self.window_days)

        with self._cache_lock:
            cached = self._cache.get(key)
            if cached is not None:
                return cached

            series = self._generate(anchor, today)
            self._cache[key] = series

        logger.debug(f"Generated {len(series)} synthetic prices for {symbol} anchored at {anchor}")
        return series

    def _generate(self, anchor: float, today: date) -> dict[date, float]:
        """Walk backward from the anchor price, one day per step."""
        changes = self._rng.uniform(self.min_change, self.max_change, size=self.window_days - 1)
        divisors = np.concatenate(([1.0], np.cumprod(1.0 + changes)))
        values = anchor / divisors
        return {
            today - timedelta(days=offset): float(value) for offset, value in enumerate(values)
        }

    def clear_cache(self) -> None:
        """Forget memoized series."""
        with self._cache_lock:
            self._cache.clear()


class FlatPriceHistory(IPriceHistory):
    """Deterministic history that repeats today's price for every past day."""

    def __init__(self, window_days: int = SYNTHETIC_HISTORY_DAYS) -> None:
        if window_days <= 0:
            raise ValueError("Window must be positive")
        self.window_days = window_days

    def series(
        self, symbol: str, current_price: float | None, today: date
    ) -> Mapping[date, float]:
        """Get a constant series at the current price."""
        price = current_price or DEFAULT_FALLBACK_PRICE
        return {today - timedelta(days=offset): price for offset in range(self.window_days)}


def create_price_history(source: str, seed: int | None = None) -> IPriceHistory:
    """Build a price history source by name ("synthetic" or "flat").

    Raises:
        ValueError: If the source name is unknown
    """
    source_lower = source.strip().lower()
    if source_lower == "synthetic":
        return SyntheticPriceHistory(seed=seed)
    if source_lower == "flat":
        return FlatPriceHistory()
    raise ValueError(f"Unsupported price history source: {source}. Supported: synthetic, flat")
