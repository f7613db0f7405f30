"""
Quote services.

`StaticPriceFetcher` serves a fixed quote table and stands in for a live
quote provider.
"""

from collections.abc import Mapping, Sequence

from loguru import logger

from smartsip.core.interfaces.services import IPriceFetcher


class StaticPriceFetcher(IPriceFetcher):
    """Serves quotes from a fixed table."""

    def __init__(self, quotes: Mapping[str, float]) -> None:
        self.quotes = {symbol.upper(): float(price) for symbol, price in quotes.items()}

    def fetch(self, symbols: Sequence[str]) -> dict[str, float] | None:
        """Get quotes for the requested symbols that the table knows.

        Returns:
            Known quotes, or None when none of the symbols is known
        """
        found = {
            symbol.upper(): self.quotes[symbol.upper()]
            for symbol in symbols
            if symbol.upper() in self.quotes
        }
        if not found:
            logger.warning(f"No quotes available for {', '.join(symbols)}")
            return None
        return found
