"""
Offline rule-based portfolio analyzer.

Judges risk purely by concentration: the weight of the largest holding in
the stock value decides the level.
"""

from collections.abc import Sequence

from loguru import logger

from smartsip.core.constants import (
    HIGH_CONCENTRATION_WEIGHT,
    MAX_SUGGESTIONS,
    MEDIUM_CONCENTRATION_WEIGHT,
)
from smartsip.core.enums import RiskLevel
from smartsip.core.interfaces.services import IPortfolioAnalyzer
from smartsip.core.models.analysis import AnalysisResult
from smartsip.core.models.holding import Holding
from smartsip.core.types.financial import ZERO


class RuleBasedAnalyzer(IPortfolioAnalyzer):
    """Concentration-based analysis that needs no external service."""

    def analyze(self, holdings: Sequence[Holding]) -> AnalysisResult | None:
        """Analyse holdings by position weight.

        Returns:
            Analysis result, or None when there is nothing to analyse
        """
        total_value = sum((h.market_value() for h in holdings), ZERO)
        if not holdings or total_value <= ZERO:
            logger.debug("Skipping analysis of an empty portfolio")
            return None

        weights = sorted(
            ((h.symbol, h.market_value() / total_value) for h in holdings),
            key=lambda item: item[1],
            reverse=True,
        )
        top_symbol, top_weight = weights[0]
        risk_level = self._risk_level(top_weight)

        summary = (
            f"{len(holdings)} position{'s' if len(holdings) != 1 else ''}; "
            f"largest is {top_symbol} at {top_weight * 100:.1f}% of stock value."
        )
        return AnalysisResult(
            summary=summary,
            risk_level=risk_level,
            suggestions=self._suggestions(holdings, weights, risk_level),
        )

    @staticmethod
    def _risk_level(top_weight: float) -> RiskLevel:
        if top_weight > HIGH_CONCENTRATION_WEIGHT:
            return RiskLevel.HIGH
        if top_weight > MEDIUM_CONCENTRATION_WEIGHT:
            return RiskLevel.MEDIUM
        return RiskLevel.LOW

    @staticmethod
    def _suggestions(
        holdings: Sequence[Holding],
        weights: list[tuple[str, float]],
        risk_level: RiskLevel,
    ) -> list[str]:
        suggestions = []
        top_symbol, top_weight = weights[0]
        if risk_level != RiskLevel.LOW:
            suggestions.append(
                f"Trim {top_symbol} ({top_weight * 100:.1f}%) to reduce single-name exposure."
            )
        if len(holdings) < 5:
            suggestions.append("Add positions in other sectors to broaden diversification.")

        losers = [h.symbol for h in holdings if h.unrealized_profit() < ZERO]
        if losers:
            suggestions.append(f"Review the thesis for positions below cost: {', '.join(losers)}.")

        winners = [h.symbol for h in holdings if h.unrealized_return_rate() > 50.0]
        if winners:
            suggestions.append(f"Consider taking partial profits on {', '.join(winners)}.")

        if not suggestions:
            suggestions.append("Allocation is balanced; keep contributing on schedule.")
        return suggestions[:MAX_SUGGESTIONS]
