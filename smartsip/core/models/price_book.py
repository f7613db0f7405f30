"""
Current price bookkeeping.

Holds the latest known price per symbol together with the day those prices
were last refreshed. The valuation engine only ever sees a read-only copy.
"""

import threading
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date

from loguru import logger


@dataclass(frozen=True)
class CachedPrices:
    """Prices as persisted by a price cache, stamped with their refresh day."""

    as_of: date
    prices: dict[str, float]

    def is_fresh(self, today: date) -> bool:
        """Check if the prices were refreshed today."""
        return self.as_of == today


@dataclass
class PriceBook:
    """Latest known price per symbol."""

    prices: dict[str, float] = field(default_factory=dict)
    last_updated: date | None = None
    _lock: threading.RLock = field(default_factory=threading.RLock, init=False, repr=False)

    def snapshot(self) -> dict[str, float]:
        """Get a copy of the current prices."""
        with self._lock:
            return dict(self.prices)

    def get(self, symbol: str) -> float | None:
        """Get the price for a symbol, if known."""
        return self.prices.get(symbol.strip().upper())

    def merge(self, new_prices: Mapping[str, float], as_of: date | None = None) -> None:
        """Overlay freshly fetched prices on the known ones.

        Args:
            new_prices: Symbol to price map; symbols are normalized to uppercase
            as_of: Refresh day to record, left unchanged when omitted
        """
        with self._lock:
            for symbol, price in new_prices.items():
                self.prices[symbol.strip().upper()] = float(price)
            if as_of is not None:
                self.last_updated = as_of
        logger.info(f"Merged {len(new_prices)} prices (as of {as_of})")

    def ensure(self, symbol: str, price: float) -> float:
        """Seed a symbol's price from a transaction unless one is already known.

        Returns:
            The price now on record for the symbol
        """
        symbol = symbol.strip().upper()
        with self._lock:
            known = self.prices.get(symbol)
            if not known:
                self.prices[symbol] = price
                return price
            return known

    def reset(self, defaults: Mapping[str, float]) -> None:
        """Replace all prices with defaults and forget the refresh day."""
        with self._lock:
            self.prices = dict(defaults)
            self.last_updated = None

    def load(self, cached: CachedPrices) -> None:
        """Replace all prices with cached ones and adopt their refresh day."""
        with self._lock:
            self.prices = dict(cached.prices)
            self.last_updated = cached.as_of
