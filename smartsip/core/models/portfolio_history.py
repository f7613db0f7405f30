"""
Day-by-day portfolio history reconstruction.

Replays the transaction log one calendar day at a time, from the first
transaction through today, valuing the running position with a per-day
price source. Uses the same cash-recycling fold as the current-state
calculation; average cost is not needed here, only quantities and cash.
"""

from collections.abc import Mapping, Sequence
from datetime import date, timedelta

from loguru import logger

from smartsip.core.constants import DEFAULT_FALLBACK_PRICE
from smartsip.core.interfaces.services import IPriceHistory
from smartsip.core.models.summary import HistoryDataPoint
from smartsip.core.models.transaction import Transaction
from smartsip.core.types.financial import ZERO, calculate_return_rate

from .portfolio_ledger import CashLedger, reduce_quantity, sort_transactions

ONE_DAY = timedelta(days=1)


class HistoryReconstructor:
    """Rebuilds a daily value/invested/return series from a transaction log."""

    def __init__(self, price_history: IPriceHistory | None = None) -> None:
        """Initialize with a historical price source.

        Args:
            price_history: Per-day price source; a synthetic random walk
                anchored on today's prices when omitted
        """
        if price_history is None:
            from smartsip.infrastructure.prices.history import SyntheticPriceHistory

            price_history = SyntheticPriceHistory()
        self.price_history = price_history

    def reconstruct(
        self,
        transactions: Sequence[Transaction],
        prices: Mapping[str, float],
        today: date | None = None,
    ) -> list[HistoryDataPoint]:
        """Walk every day from the first transaction to today.

        Args:
            transactions: Transaction log in any order
            prices: Latest known price per symbol
            today: Last day to emit (inclusive), defaults to the current date

        Returns:
            One point per day, starting from the first day with positive
            net invested capital
        """
        if not transactions:
            return []

        if today is None:
            today = date.today()

        ordered = sort_transactions(transactions)
        symbols = list(dict.fromkeys(t.symbol for t in ordered))
        daily_prices = {
            symbol: self.price_history.series(symbol, prices.get(symbol), today)
            for symbol in symbols
        }

        ledger = CashLedger()
        quantities: dict[str, float] = {}
        history: list[HistoryDataPoint] = []
        cursor = 0
        current_day = ordered[0].date

        while current_day <= today:
            while cursor < len(ordered) and ordered[cursor].date <= current_day:
                transaction = ordered[cursor]
                ledger.apply(transaction)
                held = quantities.get(transaction.symbol, ZERO)
                if transaction.is_buy:
                    quantities[transaction.symbol] = held + transaction.quantity
                else:
                    quantities[transaction.symbol] = reduce_quantity(held, transaction.quantity)
                cursor += 1

            stock_value = ZERO
            for symbol, quantity in quantities.items():
                if quantity > ZERO:
                    price = (
                        daily_prices[symbol].get(current_day)
                        or prices.get(symbol)
                        or DEFAULT_FALLBACK_PRICE
                    )
                    stock_value += quantity * price

            total_value = stock_value + ledger.cash_balance
            if ledger.net_invested > ZERO:
                history.append(
                    HistoryDataPoint(
                        date=current_day,
                        value=total_value,
                        invested=ledger.net_invested,
                        return_rate=calculate_return_rate(
                            total_value - ledger.net_invested, ledger.net_invested
                        ),
                    )
                )

            current_day += ONE_DAY

        logger.debug(
            f"Reconstructed {len(history)} history points for {len(symbols)} symbols "
            f"from {ordered[0].date} to {today}"
        )
        return history


def reconstruct_history(
    transactions: Sequence[Transaction],
    prices: Mapping[str, float],
    price_history: IPriceHistory | None = None,
    today: date | None = None,
) -> list[HistoryDataPoint]:
    """Reconstruct daily portfolio history (see HistoryReconstructor.reconstruct)."""
    return HistoryReconstructor(price_history).reconstruct(transactions, prices, today)
