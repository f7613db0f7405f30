"""
Portfolio analysis result model.
"""

from dataclasses import dataclass, field

from smartsip.core.enums import RiskLevel


@dataclass(frozen=True)
class AnalysisResult:
    """Free-text assessment of the current holdings."""

    summary: str
    risk_level: RiskLevel
    suggestions: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert analysis result to dictionary."""
        return {
            "summary": self.summary,
            "risk_level": self.risk_level.value,
            "suggestions": list(self.suggestions),
        }
