"""
Portfolio valuation endpoints.
"""

from fastapi import APIRouter, Depends, Query, Response

from smartsip.core.enums import TimeRange
from smartsip.core.models.portfolio import Portfolio, ResetOptions
from smartsip.infrastructure.reporting import history_to_frame, holdings_to_frame

from ..dependencies import get_portfolio
from ..schemas.api_models import (
    AllocationSlice,
    AnalysisModel,
    HistoryPointModel,
    HoldingModel,
    ResetRequest,
    SummaryModel,
)

router = APIRouter()


@router.get("/summary", response_model=SummaryModel)
def get_summary(portfolio: Portfolio = Depends(get_portfolio)) -> SummaryModel:
    """Get cash-flow-aware portfolio totals."""
    return SummaryModel.from_domain(portfolio.summary())


@router.get("/holdings", response_model=list[HoldingModel])
def get_holdings(portfolio: Portfolio = Depends(get_portfolio)) -> list[HoldingModel]:
    """Get active holdings with weighted-average cost."""
    return [HoldingModel.from_domain(holding) for holding in portfolio.holdings()]


@router.get("/allocation", response_model=list[AllocationSlice])
def get_allocation(portfolio: Portfolio = Depends(get_portfolio)) -> list[AllocationSlice]:
    """Get value per holding, plus realized cash when significant."""
    return [AllocationSlice(name=name, value=value) for name, value in portfolio.allocation()]


@router.get("/history", response_model=list[HistoryPointModel])
def get_history(
    time_range: TimeRange = Query(
        default=TimeRange.ONE_YEAR, alias="range", description="Chart range (1M, 1Y, ALL)"
    ),
    portfolio: Portfolio = Depends(get_portfolio),
) -> list[HistoryPointModel]:
    """Get the reconstructed daily value/invested/return series."""
    return [HistoryPointModel.from_domain(point) for point in portfolio.history(time_range)]


@router.get("/history/export")
def export_history(
    time_range: TimeRange = Query(
        default=TimeRange.ALL, alias="range", description="Chart range (1M, 1Y, ALL)"
    ),
    portfolio: Portfolio = Depends(get_portfolio),
) -> Response:
    """Download the reconstructed history as CSV."""
    frame = history_to_frame(portfolio.history(time_range))
    return Response(content=frame.to_csv(), media_type="text/csv")


@router.get("/holdings/export")
def export_holdings(portfolio: Portfolio = Depends(get_portfolio)) -> Response:
    """Download the active holdings as CSV."""
    frame = holdings_to_frame(portfolio.holdings())
    return Response(content=frame.to_csv(), media_type="text/csv")


@router.post("/reset", response_model=SummaryModel)
def reset_portfolio(
    request: ResetRequest, portfolio: Portfolio = Depends(get_portfolio)
) -> SummaryModel:
    """Wipe the selected parts of the application state."""
    portfolio.reset(ResetOptions(**request.model_dump()))
    return SummaryModel.from_domain(portfolio.summary())


@router.post("/analysis", response_model=AnalysisModel | None)
def analyze_portfolio(portfolio: Portfolio = Depends(get_portfolio)) -> AnalysisModel | None:
    """Analyse the active holdings; null when there is no result."""
    result = portfolio.analyze()
    return AnalysisModel.from_domain(result) if result else None
