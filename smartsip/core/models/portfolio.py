"""
Main Portfolio class - orchestrates all portfolio components.

This module provides the application-facing Portfolio by composing the
transaction log, the price book and the two valuation passes. Every read
recomputes from scratch; nothing derived is cached between calls.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import date

from loguru import logger

from smartsip.core.constants import INITIAL_TRANSACTIONS, MAX_UNDO_STEPS, MOCK_PRICES
from smartsip.core.enums import TimeRange, TransactionType
from smartsip.core.interfaces.services import (
    IPortfolioAnalyzer,
    IPriceCache,
    IPriceFetcher,
    IPriceHistory,
)
from smartsip.core.models.analysis import AnalysisResult
from smartsip.core.models.holding import Holding
from smartsip.core.models.price_book import PriceBook
from smartsip.core.models.summary import HistoryDataPoint, PortfolioSummary
from smartsip.core.models.transaction import Transaction
from smartsip.core.types.financial import ZERO
from smartsip.core.utils.decorators import log_operation

from .portfolio_history import HistoryReconstructor
from .portfolio_metrics import filter_history
from .portfolio_state import PortfolioState, calculate_portfolio_state
from .transaction_log import TransactionLog


@dataclass(frozen=True)
class ResetOptions:
    """Which parts of the application state a reset wipes."""

    transactions: bool = False
    prices: bool = False
    analysis: bool = False
    undo_history: bool = False


class Portfolio:
    """Single-user portfolio.

    Composes:
    - TransactionLog: the undoable transaction list
    - PriceBook: latest known prices
    - StateCalculator / HistoryReconstructor: valuation, rerun on every read

    Price cache, quote service and analyzer are optional collaborators; when
    one is missing the matching operation reports "no update".
    """

    def __init__(
        self,
        transactions: Iterable[Transaction] | None = None,
        prices: Mapping[str, float] | None = None,
        price_history: IPriceHistory | None = None,
        price_cache: IPriceCache | None = None,
        price_fetcher: IPriceFetcher | None = None,
        analyzer: IPortfolioAnalyzer | None = None,
        default_prices: Mapping[str, float] = MOCK_PRICES,
        max_undo_steps: int = MAX_UNDO_STEPS,
    ) -> None:
        """Initialize Portfolio with composition pattern."""
        self.default_prices = dict(default_prices)
        self._log = TransactionLog(transactions, max_undo_steps=max_undo_steps)
        self._prices = PriceBook(dict(self.default_prices if prices is None else prices))
        self._history = HistoryReconstructor(price_history)
        self._cache = price_cache
        self._fetcher = price_fetcher
        self._analyzer = analyzer
        self._analysis: AnalysisResult | None = None

    @classmethod
    def with_sample_data(cls, **kwargs) -> "Portfolio":
        """Create a portfolio seeded with the sample transactions."""
        transactions = [
            Transaction(
                id=transaction_id,
                symbol=symbol,
                type=TransactionType(type_),
                date=day,
                price=price,
                quantity=quantity,
            )
            for transaction_id, symbol, type_, day, price, quantity in INITIAL_TRANSACTIONS
        ]
        return cls(transactions=transactions, **kwargs)

    # Read-only state
    @property
    def transactions(self) -> tuple[Transaction, ...]:
        """Get the transaction log in entry order."""
        return self._log.transactions

    @property
    def prices(self) -> dict[str, float]:
        """Get a copy of the latest known prices."""
        return self._prices.snapshot()

    @property
    def last_updated(self) -> date | None:
        """Get the day prices were last refreshed."""
        return self._prices.last_updated

    @property
    def can_undo(self) -> bool:
        """Check if an undo is available."""
        return self._log.can_undo

    @property
    def analysis(self) -> AnalysisResult | None:
        """Get the most recent analysis result."""
        return self._analysis

    def transactions_for(self, symbol: str) -> list[Transaction]:
        """Get a symbol's transactions, newest first."""
        return self._log.for_symbol(symbol)

    # Valuation
    def state(self) -> PortfolioState:
        """Recalculate holdings and summary."""
        return calculate_portfolio_state(self._log.transactions, self._prices.snapshot())

    def holdings(self) -> list[Holding]:
        """Get active holdings."""
        return self.state().holdings

    def summary(self) -> PortfolioSummary:
        """Get the portfolio summary."""
        return self.state().summary

    def allocation(self) -> list[tuple[str, float]]:
        """Get value slices per holding, plus realized cash when significant."""
        return self.state().allocation()

    def history(
        self, time_range: TimeRange = TimeRange.ALL, today: date | None = None
    ) -> list[HistoryDataPoint]:
        """Reconstruct daily history, limited to a chart range."""
        today = today or date.today()
        points = self._history.reconstruct(self._log.transactions, self._prices.snapshot(), today)
        return filter_history(points, time_range, today)

    # Mutations
    @log_operation
    def add_transaction(
        self,
        symbol: str,
        type: TransactionType | str,
        price: float,
        quantity: float,
        date: date | str,
        fees: float = ZERO,
    ) -> Transaction:
        """Record a transaction and make sure its symbol has a price."""
        transaction = self._log.add(symbol, type, price, quantity, date, fees)
        self._prices.ensure(transaction.symbol, transaction.price)
        return transaction

    @log_operation
    def delete_transaction(self, transaction_id: str) -> Transaction:
        """Remove a transaction by id."""
        return self._log.delete(transaction_id)

    @log_operation
    def undo(self) -> bool:
        """Restore the transaction log to its previous snapshot."""
        return self._log.undo()

    @log_operation
    def reset(self, options: ResetOptions) -> None:
        """Wipe the selected parts of the application state."""
        if options.transactions:
            # Clearing without also wiping undo history keeps the clear undoable
            self._log.clear(keep_undo=not options.undo_history)

        if options.prices:
            if self._cache is not None:
                self._cache.clear()
            self._prices.reset(self.default_prices)

        if options.analysis:
            self._analysis = None

        if options.undo_history:
            self._log.clear_undo_history()

    # Prices
    def load_cached_prices(self, today: date | None = None) -> bool:
        """Adopt cached prices if any.

        Returns:
            True when prices should be refreshed (no cache, or cache not from today)
        """
        if self._cache is None:
            return True
        cached = self._cache.load()
        if cached is None:
            return True

        self._prices.load(cached)
        stale = not cached.is_fresh(today or date.today())
        if stale:
            logger.info(f"Price cache from {cached.as_of} expired, refresh needed")
        return stale

    def set_prices(self, prices: Mapping[str, float], today: date | None = None) -> None:
        """Merge manually supplied prices and persist them."""
        today = today or date.today()
        self._prices.merge(prices, as_of=today)
        if self._cache is not None:
            self._cache.save(self._prices.snapshot(), today)

    def refresh_prices(self, today: date | None = None) -> bool:
        """Fetch quotes for every traded symbol.

        Returns:
            True when new prices were merged, False when no update happened
        """
        symbols = self._log.symbols()
        if not symbols or self._fetcher is None:
            return False

        try:
            new_prices = self._fetcher.fetch(symbols)
        except Exception as e:
            logger.warning(f"Price fetch failed: {e}")
            return False

        if not new_prices:
            logger.warning("Price fetch returned no update")
            return False

        self.set_prices(new_prices, today)
        return True

    # Analysis
    def analyze(self) -> AnalysisResult | None:
        """Run the analyzer on the active holdings.

        Returns:
            The analysis, or None when there is nothing to analyse or the
            analyzer produced no result
        """
        holdings = self.holdings()
        if not holdings or self._analyzer is None:
            return None

        try:
            result = self._analyzer.analyze(holdings)
        except Exception as e:
            logger.warning(f"Portfolio analysis failed: {e}")
            return None

        if result is not None:
            self._analysis = result
        return result
