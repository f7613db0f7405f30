"""
Unit tests for portfolio analysis helpers.
"""

import pytest

from smartsip.core.enums import RiskLevel
from smartsip.core.models.holding import Holding
from smartsip.infrastructure.analysis import RuleBasedAnalyzer


def _holding(symbol: str, quantity: float, average_cost: float, current_price: float) -> Holding:
    return Holding(
        symbol=symbol, quantity=quantity, average_cost=average_cost, current_price=current_price
    )


class TestRuleBasedAnalyzer:
    """Test suite for RuleBasedAnalyzer."""

    @pytest.fixture
    def analyzer(self) -> RuleBasedAnalyzer:
        return RuleBasedAnalyzer()

    def test_should_return_none_for_no_holdings(self, analyzer) -> None:
        """Test that an empty portfolio is not analysed."""
        assert analyzer.analyze([]) is None

    def test_should_flag_high_concentration(self, analyzer) -> None:
        """Test a single dominant position."""
        result = analyzer.analyze([_holding("AAPL", 10, 100, 100), _holding("MSFT", 1, 100, 100)])

        assert result.risk_level == RiskLevel.HIGH
        assert result.summary == "2 positions; largest is AAPL at 90.9% of stock value."
        assert result.suggestions[0].startswith("Trim AAPL")

    def test_should_flag_medium_concentration(self, analyzer) -> None:
        """Test a largest weight between a quarter and a half."""
        holdings = [_holding(s, 1, 100, 100) for s in ("A", "B", "C")]

        assert analyzer.analyze(holdings).risk_level == RiskLevel.MEDIUM

    def test_should_report_low_risk_when_spread(self, analyzer) -> None:
        """Test an even spread over many names."""
        holdings = [_holding(s, 1, 100, 100) for s in ("A", "B", "C", "D", "E")]

        result = analyzer.analyze(holdings)

        assert result.risk_level == RiskLevel.LOW
        assert result.suggestions == ["Allocation is balanced; keep contributing on schedule."]

    def test_should_mention_losers_and_winners(self, analyzer) -> None:
        """Test gain/loss based suggestions."""
        holdings = [_holding(s, 1, 100, 100) for s in ("A", "B", "C")]
        holdings += [_holding("LOSS", 1, 100, 80), _holding("WIN", 1, 100, 160)]

        suggestions = analyzer.analyze(holdings).suggestions

        assert "Review the thesis for positions below cost: LOSS." in suggestions
        assert "Consider taking partial profits on WIN." in suggestions

    def test_should_cap_suggestions(self, analyzer) -> None:
        """Test the suggestion limit."""
        holdings = [_holding("LOSS", 10, 100, 80), _holding("WIN", 1, 10, 20)]
        assert len(analyzer.analyze(holdings).suggestions) == 3


