"""
Price book endpoints.
"""

from fastapi import APIRouter, Depends

from smartsip.core.models.portfolio import Portfolio

from ..dependencies import get_portfolio
from ..schemas.api_models import PricesResponse, PriceUpdateRequest, RefreshResponse

router = APIRouter()


@router.get("", response_model=PricesResponse)
def get_prices(portfolio: Portfolio = Depends(get_portfolio)) -> PricesResponse:
    """Get the latest known prices."""
    return PricesResponse(prices=portfolio.prices, last_updated=portfolio.last_updated)


@router.put("", response_model=PricesResponse)
def update_prices(
    request: PriceUpdateRequest, portfolio: Portfolio = Depends(get_portfolio)
) -> PricesResponse:
    """Merge manually supplied prices."""
    portfolio.set_prices(request.prices)
    return PricesResponse(prices=portfolio.prices, last_updated=portfolio.last_updated)


@router.post("/refresh", response_model=RefreshResponse)
def refresh_prices(portfolio: Portfolio = Depends(get_portfolio)) -> RefreshResponse:
    """Fetch fresh quotes for every traded symbol."""
    updated = portfolio.refresh_prices()
    return RefreshResponse(updated=updated, last_updated=portfolio.last_updated)
