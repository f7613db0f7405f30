"""
Unit tests for the current portfolio state calculation.
Covers the cash-recycling fold, weighted-average cost and clamping rules.
"""

from datetime import date

import pytest

from smartsip.core.enums import TransactionType
from smartsip.core.models.portfolio_state import (
    PortfolioState,
    StateCalculator,
    calculate_portfolio_state,
)
from smartsip.core.models.summary import PortfolioSummary
from smartsip.core.models.transaction import Transaction


def _tx(
    transaction_id: str,
    symbol: str,
    type: TransactionType,
    day: date,
    price: float,
    quantity: float,
) -> Transaction:
    return Transaction(
        id=transaction_id, symbol=symbol, type=type, date=day, price=price, quantity=quantity
    )


BUY = TransactionType.BUY
SELL = TransactionType.SELL


class TestEmptyPortfolio:
    """Valuation of an empty transaction log."""

    def test_should_return_empty_holdings_and_zero_summary(self) -> None:
        """Test that no transactions is not an error."""
        state = calculate_portfolio_state([], {"AAPL": 175.5})

        assert state.holdings == []
        assert state.summary == PortfolioSummary.empty()
        assert state.summary.return_rate == 0.0

    def test_should_default_to_empty_state(self) -> None:
        """Test the default PortfolioState."""
        state = PortfolioState()
        assert state.holdings == []
        assert state.summary.current_value == 0.0


class TestEndToEndScenario:
    """The sample AAPL/MSFT portfolio."""

    @pytest.fixture
    def transactions(self) -> list[Transaction]:
        return [
            _tx("1", "AAPL", BUY, date(2023, 1, 15), 150.0, 10.0),
            _tx("2", "MSFT", BUY, date(2023, 2, 20), 250.0, 5.0),
            _tx("3", "AAPL", BUY, date(2023, 3, 15), 155.0, 10.0),
        ]

    def test_should_compute_holdings_with_weighted_average_cost(self, transactions) -> None:
        """Test holdings quantities and average cost."""
        state = calculate_portfolio_state(transactions, {"AAPL": 175.50, "MSFT": 310.20})

        assert [h.symbol for h in state.holdings] == ["AAPL", "MSFT"]
        aapl = state.holding("AAPL")
        msft = state.holding("MSFT")
        assert aapl is not None and msft is not None
        assert aapl.quantity == 20.0
        assert aapl.average_cost == pytest.approx(152.50)
        assert aapl.current_price == 175.50
        assert msft.quantity == 5.0
        assert msft.average_cost == pytest.approx(250.0)

    def test_should_compute_cash_flow_aware_summary(self, transactions) -> None:
        """Test invested, value, profit and return."""
        summary = calculate_portfolio_state(
            transactions, {"AAPL": 175.50, "MSFT": 310.20}
        ).summary

        assert summary.total_invested == pytest.approx(4300.0)
        assert summary.stock_value == pytest.approx(5061.0)
        assert summary.cash_balance == 0.0
        assert summary.current_value == pytest.approx(5061.0)
        assert summary.total_profit == pytest.approx(761.0)
        assert summary.return_rate == pytest.approx(17.6977, abs=1e-3)


class TestCashRecycling:
    """Sale proceeds fund later purchases before new principal is counted."""

    def test_should_fund_rebuy_from_realized_cash(self) -> None:
        """Test BUY 1000, SELL 1000, BUY 1000 leaves invested at 1000."""
        transactions = [
            _tx("1", "AAPL", BUY, date(2024, 1, 1), 100.0, 10.0),
            _tx("2", "AAPL", SELL, date(2024, 1, 2), 100.0, 10.0),
            _tx("3", "MSFT", BUY, date(2024, 1, 3), 100.0, 10.0),
        ]

        summary = calculate_portfolio_state(transactions, {"MSFT": 100.0}).summary

        assert summary.total_invested == 1000.0
        assert summary.cash_balance == 0.0
        assert summary.current_value == 1000.0

    def test_should_count_only_shortfall_as_new_principal(self) -> None:
        """Test BUY 1000, SELL 1000, BUY 1500 gives invested 1500 and no cash."""
        transactions = [
            _tx("1", "AAPL", BUY, date(2024, 1, 1), 100.0, 10.0),
            _tx("2", "AAPL", SELL, date(2024, 1, 2), 100.0, 10.0),
            _tx("3", "AAPL", BUY, date(2024, 1, 3), 150.0, 10.0),
        ]

        summary = calculate_portfolio_state(transactions, {"AAPL": 150.0}).summary

        assert summary.total_invested == 1500.0
        assert summary.cash_balance == 0.0

    def test_should_keep_unspent_proceeds_as_cash(self) -> None:
        """Test that proceeds not reinvested stay in the cash balance."""
        transactions = [
            _tx("1", "AAPL", BUY, date(2024, 1, 1), 100.0, 10.0),
            _tx("2", "AAPL", SELL, date(2024, 1, 2), 120.0, 5.0),
        ]

        state = calculate_portfolio_state(transactions, {"AAPL": 120.0})

        assert state.summary.total_invested == 1000.0
        assert state.summary.cash_balance == 600.0
        assert state.summary.stock_value == 600.0
        assert state.summary.total_profit == 200.0
        assert state.summary.return_rate == pytest.approx(20.0)


class TestInvariants:
    """Clamping and averaging invariants."""

    def test_should_clamp_oversell_to_zero_quantity(self) -> None:
        """Test that selling more than held never goes negative."""
        transactions = [
            _tx("1", "AAPL", BUY, date(2024, 1, 1), 100.0, 5.0),
            _tx("2", "AAPL", SELL, date(2024, 1, 2), 100.0, 8.0),
            _tx("3", "AAPL", BUY, date(2024, 1, 3), 100.0, 2.0),
        ]

        state = calculate_portfolio_state(transactions, {"AAPL": 100.0})

        assert state.held_quantity("AAPL") == 2.0
        assert all(h.quantity >= 0 for h in state.holdings)
        assert state.summary.cash_balance == 600.0  # 800 proceeds, 200 reinvested

    def test_should_keep_average_cost_unchanged_by_sells(self) -> None:
        """Test that SELL does not touch average cost."""
        transactions = [
            _tx("1", "AAPL", BUY, date(2024, 1, 1), 100.0, 10.0),
            _tx("2", "AAPL", SELL, date(2024, 1, 2), 300.0, 5.0),
        ]

        holding = calculate_portfolio_state(transactions, {}).holding("AAPL")

        assert holding is not None
        assert holding.average_cost == 100.0
        assert holding.quantity == 5.0

    def test_should_report_zero_return_when_nothing_invested(self) -> None:
        """Test that a sell-only log has 0% return, not a division error."""
        transactions = [_tx("1", "AAPL", SELL, date(2024, 1, 1), 100.0, 10.0)]

        state = calculate_portfolio_state(transactions, {"AAPL": 100.0})

        assert state.summary.total_invested == 0.0
        assert state.summary.cash_balance == 1000.0
        assert state.summary.total_profit == 1000.0
        assert state.summary.return_rate == 0.0
        assert state.holdings == []

    def test_should_drop_float_dust_from_active_holdings(self) -> None:
        """Test that quantities at or below the epsilon are not active."""
        transactions = [
            _tx("1", "AAPL", BUY, date(2024, 1, 1), 10.0, 1.0),
            _tx("2", "AAPL", SELL, date(2024, 1, 2), 10.0, 0.99995),
        ]

        state = calculate_portfolio_state(transactions, {"AAPL": 10.0})

        assert state.holdings == []
        assert state.summary.stock_value == 0.0

    def test_should_restart_average_cost_after_full_exit(self) -> None:
        """Test that a rebuy after selling out averages from zero quantity."""
        transactions = [
            _tx("1", "AAPL", BUY, date(2024, 1, 1), 100.0, 10.0),
            _tx("2", "AAPL", SELL, date(2024, 1, 2), 100.0, 10.0),
            _tx("3", "AAPL", BUY, date(2024, 1, 3), 200.0, 4.0),
        ]

        holding = calculate_portfolio_state(transactions, {}).holding("AAPL")

        assert holding is not None
        assert holding.average_cost == 200.0


class TestPriceResolution:
    """Current price lookup for holdings."""

    def test_should_fall_back_to_transaction_price_for_unknown_symbol(self) -> None:
        """Test that a symbol missing from the price map uses its first transaction price."""
        transactions = [
            _tx("1", "ZZZ", BUY, date(2024, 1, 1), 42.0, 2.0),
            _tx("2", "ZZZ", BUY, date(2024, 1, 2), 50.0, 2.0),
        ]

        state = calculate_portfolio_state(transactions, {})

        holding = state.holding("ZZZ")
        assert holding is not None
        assert holding.current_price == 42.0
        assert state.summary.stock_value == 168.0

    def test_should_prefer_price_map_over_transaction_price(self) -> None:
        """Test that known prices win."""
        transactions = [_tx("1", "AAPL", BUY, date(2024, 1, 1), 42.0, 1.0)]

        state = calculate_portfolio_state(transactions, {"AAPL": 60.0})

        assert state.summary.stock_value == 60.0


class TestOrdering:
    """Input order handling."""

    def test_should_sort_transactions_by_date(self) -> None:
        """Test that input order across dates does not matter."""
        ordered = [
            _tx("1", "AAPL", BUY, date(2024, 1, 1), 100.0, 10.0),
            _tx("2", "AAPL", SELL, date(2024, 1, 2), 100.0, 10.0),
            _tx("3", "AAPL", BUY, date(2024, 1, 3), 100.0, 10.0),
        ]
        shuffled = [ordered[2], ordered[0], ordered[1]]

        assert calculate_portfolio_state(ordered, {}) == calculate_portfolio_state(shuffled, {})

    def test_should_keep_input_order_for_same_day_transactions(self) -> None:
        """Test that same-day ties are resolved by input order, changing the result."""
        opening = _tx("1", "AAPL", BUY, date(2024, 1, 1), 100.0, 10.0)
        sell = _tx("2", "AAPL", SELL, date(2024, 1, 2), 100.0, 10.0)
        buy = _tx("3", "MSFT", BUY, date(2024, 1, 2), 100.0, 10.0)

        sell_first = calculate_portfolio_state([opening, sell, buy], {}).summary
        buy_first = calculate_portfolio_state([opening, buy, sell], {}).summary

        # Sell first: the buy is funded from proceeds
        assert sell_first.total_invested == 1000.0
        assert sell_first.cash_balance == 0.0
        # Buy first: the buy needs new principal and the proceeds stay in cash
        assert buy_first.total_invested == 2000.0
        assert buy_first.cash_balance == 1000.0

    def test_should_be_idempotent(self) -> None:
        """Test that repeated calls give identical output and leave inputs alone."""
        transactions = [
            _tx("2", "MSFT", BUY, date(2024, 2, 1), 250.0, 5.0),
            _tx("1", "AAPL", BUY, date(2024, 1, 1), 150.0, 10.0),
        ]
        prices = {"AAPL": 175.5, "MSFT": 310.2}
        snapshot = list(transactions)

        first = StateCalculator.calculate(transactions, prices)
        second = StateCalculator.calculate(transactions, prices)

        assert first == second
        assert transactions == snapshot
        assert prices == {"AAPL": 175.5, "MSFT": 310.2}


class TestAllocation:
    """Allocation slices."""

    def test_should_include_cash_slice_above_threshold(self) -> None:
        """Test that significant cash is listed as its own slice."""
        transactions = [
            _tx("1", "AAPL", BUY, date(2024, 1, 1), 100.0, 10.0),
            _tx("2", "AAPL", SELL, date(2024, 1, 2), 100.0, 4.0),
        ]

        slices = calculate_portfolio_state(transactions, {"AAPL": 100.0}).allocation()

        assert slices == [("AAPL", 600.0), ("Cash (Realized)", 400.0)]

    def test_should_omit_negligible_cash(self) -> None:
        """Test that cash at or below the threshold is left out."""
        transactions = [
            _tx("1", "AAPL", BUY, date(2024, 1, 1), 1.0, 10.0),
            _tx("2", "AAPL", SELL, date(2024, 1, 2), 1.0, 1.0),
        ]

        slices = calculate_portfolio_state(transactions, {"AAPL": 1.0}).allocation()

        assert slices == [("AAPL", 9.0)]
