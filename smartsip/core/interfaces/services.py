"""
Collaborator interfaces.

The valuation engine consumes prices and produces records; fetching
quotes, persisting them, supplying historical prices and analysing the
holdings all happen behind these interfaces.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from datetime import date

from smartsip.core.models.analysis import AnalysisResult
from smartsip.core.models.holding import Holding
from smartsip.core.models.price_book import CachedPrices


class IPriceHistory(ABC):
    """Abstract source of per-day prices for one symbol."""

    @abstractmethod
    def series(
        self, symbol: str, current_price: float | None, today: date
    ) -> Mapping[date, float]:
        """Get known daily prices for a symbol.

        Implementations must return only positive prices and, when
        current_price is given, map today to exactly that price.
        """
        pass


class IPriceFetcher(ABC):
    """Abstract live quote service."""

    @abstractmethod
    def fetch(self, symbols: Sequence[str]) -> dict[str, float] | None:
        """Fetch latest prices; None means no update happened."""
        pass


class IPriceCache(ABC):
    """Abstract persistence of the last known prices."""

    @abstractmethod
    def load(self) -> CachedPrices | None:
        """Load cached prices, None when nothing usable is stored."""
        pass

    @abstractmethod
    def save(self, prices: Mapping[str, float], as_of: date) -> None:
        """Persist prices stamped with their refresh day."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Forget any cached prices."""
        pass


class IPortfolioAnalyzer(ABC):
    """Abstract portfolio analysis service."""

    @abstractmethod
    def analyze(self, holdings: Sequence[Holding]) -> AnalysisResult | None:
        """Analyse holdings; None means no result."""
        pass
