"""
Pydantic schemas for API request/response models.
"""

import datetime
from datetime import date

from pydantic import BaseModel, Field, field_validator

from smartsip.core.enums import RiskLevel, TransactionType
from smartsip.core.models.analysis import AnalysisResult
from smartsip.core.models.holding import Holding
from smartsip.core.models.summary import HistoryDataPoint, PortfolioSummary
from smartsip.core.models.transaction import Transaction


class TransactionRequest(BaseModel):
    """Request model for recording a transaction."""

    symbol: str = Field(..., min_length=1, description="Instrument symbol, any case")
    type: TransactionType = Field(default=TransactionType.BUY, description="BUY or SELL")
    price: float = Field(..., gt=0, description="Price per unit")
    quantity: float = Field(..., gt=0, description="Units transacted")
    date: datetime.date = Field(default_factory=date.today, description="Execution date")

    @field_validator("symbol")
    @classmethod
    def normalize_symbol(cls, v: str) -> str:
        """Normalize the symbol to uppercase."""
        normalized = v.strip().upper()
        if not normalized:
            raise ValueError("symbol must not be blank")
        return normalized

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, v: object) -> object:
        """Accept transaction types in any case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v


class TransactionModel(BaseModel):
    """Response model for a stored transaction."""

    id: str
    symbol: str
    type: TransactionType
    date: datetime.date
    price: float
    quantity: float
    fees: float

    @classmethod
    def from_domain(cls, transaction: Transaction) -> "TransactionModel":
        return cls(**transaction.to_dict())


class HoldingModel(BaseModel):
    """Response model for an active holding."""

    symbol: str
    name: str
    quantity: float
    average_cost: float
    current_price: float
    market_value: float
    unrealized_profit: float
    unrealized_return_rate: float

    @classmethod
    def from_domain(cls, holding: Holding) -> "HoldingModel":
        return cls(**holding.to_dict())


class SummaryModel(BaseModel):
    """Response model for the portfolio summary."""

    total_invested: float
    cash_balance: float
    stock_value: float
    current_value: float
    total_profit: float
    return_rate: float

    @classmethod
    def from_domain(cls, summary: PortfolioSummary) -> "SummaryModel":
        return cls(**summary.to_dict())


class HistoryPointModel(BaseModel):
    """Response model for one day of reconstructed history."""

    date: datetime.date
    value: float
    invested: float
    return_rate: float

    @classmethod
    def from_domain(cls, point: HistoryDataPoint) -> "HistoryPointModel":
        return cls(**point.to_dict())


class AllocationSlice(BaseModel):
    """Response model for one slice of the allocation chart."""

    name: str
    value: float


class PricesResponse(BaseModel):
    """Response model for the current price book."""

    prices: dict[str, float]
    last_updated: date | None = None


class PriceUpdateRequest(BaseModel):
    """Request model for a manual price update."""

    prices: dict[str, float] = Field(..., min_length=1)

    @field_validator("prices")
    @classmethod
    def validate_prices(cls, v: dict[str, float]) -> dict[str, float]:
        """Require positive prices keyed by non-blank symbols."""
        normalized = {}
        for symbol, price in v.items():
            if not symbol.strip():
                raise ValueError("symbol must not be blank")
            if price <= 0:
                raise ValueError(f"price for {symbol} must be positive, got {price}")
            normalized[symbol.strip().upper()] = price
        return normalized


class RefreshResponse(BaseModel):
    """Response model for a price refresh."""

    updated: bool
    last_updated: date | None = None


class UndoResponse(BaseModel):
    """Response model for an undo request."""

    undone: bool
    can_undo: bool


class ResetRequest(BaseModel):
    """Request model for a reset."""

    transactions: bool = False
    prices: bool = False
    analysis: bool = False
    undo_history: bool = False


class AnalysisModel(BaseModel):
    """Response model for a portfolio analysis."""

    summary: str
    risk_level: RiskLevel
    suggestions: list[str]

    @classmethod
    def from_domain(cls, result: AnalysisResult) -> "AnalysisModel":
        return cls(**result.to_dict())


class ErrorResponse(BaseModel):
    """Response model for errors."""

    error: str
    message: str
    details: dict | None = None
