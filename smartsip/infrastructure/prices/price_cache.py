"""
JSON file cache for the last known prices.

Stores a single document `{"date": "YYYY-MM-DD", "prices": {...}}`; the
date stamp decides whether the cached prices are still fresh.
"""

import datetime
from collections.abc import Mapping
from datetime import date
from pathlib import Path
from threading import RLock

from loguru import logger
from pydantic import BaseModel, ValidationError

from smartsip.core.exceptions.portfolio import PriceDataError
from smartsip.core.interfaces.services import IPriceCache
from smartsip.core.models.price_book import CachedPrices


class PriceCacheDocument(BaseModel):
    """On-disk layout of the price cache."""

    date: datetime.date
    prices: dict[str, float]


class JsonPriceCache(IPriceCache):
    """Persists prices with their refresh day in a JSON file."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self._lock = RLock()

    def load(self) -> CachedPrices | None:
        """Load cached prices.

        Returns:
            Cached prices, or None when the file is missing or unreadable
        """
        with self._lock:
            if not self.path.exists():
                logger.debug(f"No price cache at {self.path}")
                return None
            try:
                document = self._read()
            except PriceDataError as e:
                logger.error(f"Failed to parse price cache: {e}")
                return None

        logger.info(f"Loaded {len(document.prices)} cached prices from {document.date}")
        return CachedPrices(as_of=document.date, prices=dict(document.prices))

    def save(self, prices: Mapping[str, float], as_of: date) -> None:
        """Write prices stamped with their refresh day."""
        document = PriceCacheDocument(date=as_of, prices=dict(prices))
        with self._lock:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(document.model_dump_json(), encoding="utf-8")
        logger.debug(f"Saved {len(document.prices)} prices to {self.path}")

    def clear(self) -> None:
        """Delete the cache file if present."""
        with self._lock:
            self.path.unlink(missing_ok=True)
        logger.info(f"Cleared price cache at {self.path}")

    def _read(self) -> PriceCacheDocument:
        """Read and validate the cache document.

        Raises:
            PriceDataError: If the file cannot be read or is malformed
        """
        try:
            return PriceCacheDocument.model_validate_json(self.path.read_bytes())
        except OSError as e:
            raise PriceDataError(f"File system error reading {self.path.name}") from e
        except ValidationError as e:
            raise PriceDataError(f"Malformed price cache {self.path.name}: {e}") from e
