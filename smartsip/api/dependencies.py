"""Shared FastAPI dependencies."""

from functools import lru_cache

from loguru import logger
from pydantic import ValidationError as PydanticValidationError

from smartsip.core.constants import MOCK_PRICES
from smartsip.core.exceptions.portfolio import ConfigurationError
from smartsip.core.models.portfolio import Portfolio
from smartsip.infrastructure.analysis import RuleBasedAnalyzer
from smartsip.infrastructure.prices import (
    JsonPriceCache,
    StaticPriceFetcher,
    create_price_history,
)

from .settings import Settings, get_settings


def build_portfolio(settings: Settings) -> Portfolio:
    """Wire a Portfolio and its collaborators from settings."""
    options = dict(
        price_history=create_price_history(settings.history_source, seed=settings.history_seed),
        price_cache=JsonPriceCache(settings.price_cache_path),
        price_fetcher=StaticPriceFetcher(MOCK_PRICES),
        analyzer=RuleBasedAnalyzer(),
        max_undo_steps=settings.undo_depth,
    )
    if settings.seed_sample_data:
        portfolio = Portfolio.with_sample_data(**options)
    else:
        portfolio = Portfolio(**options)

    if portfolio.load_cached_prices():
        logger.info("Cached prices missing or stale, refreshing")
        portfolio.refresh_prices()
    return portfolio


@lru_cache(maxsize=1)
def get_portfolio() -> Portfolio:
    """Return the process-wide portfolio."""
    try:
        settings = get_settings()
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid settings: {e}") from e
    logger.info("Starting portfolio", extra=settings.dict_for_logging())
    return build_portfolio(settings)
