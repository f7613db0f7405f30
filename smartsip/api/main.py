"""
FastAPI main application for the SmartSIP portfolio tracker.
"""

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from smartsip.core.exceptions.portfolio import (
    InsufficientHoldingsError,
    SmartSipException,
    TransactionNotFoundError,
    ValidationError,
)

from .routers import portfolio, prices, transactions
from .schemas.api_models import ErrorResponse
from .settings import get_settings

API_VERSION = "1.0.0"


def _error_response(status_code: int, exc: SmartSipException, details: dict | None = None):
    body = ErrorResponse(error=type(exc).__name__, message=str(exc), details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def handle_not_found(request: Request, exc: TransactionNotFoundError) -> JSONResponse:
    """Map unknown transaction ids to 404."""
    return _error_response(
        status.HTTP_404_NOT_FOUND, exc, {"transaction_id": exc.transaction_id}
    )


async def handle_insufficient_holdings(
    request: Request, exc: InsufficientHoldingsError
) -> JSONResponse:
    """Map over-sells to 400 with the held quantity."""
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        exc,
        {"symbol": exc.symbol, "requested": exc.requested, "available": exc.available},
    )


async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    """Map rejected input to 400."""
    return _error_response(status.HTTP_400_BAD_REQUEST, exc)


async def handle_domain_error(request: Request, exc: SmartSipException) -> JSONResponse:
    """Map any other domain failure to 500."""
    logger.error(f"Unhandled domain error on {request.url.path}: {exc}")
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, exc)


def create_app() -> FastAPI:
    """Build the API application."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=API_VERSION,
        description="API for single-user portfolio valuation and performance history",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", "Accept", "Origin"],
    )

    app.add_exception_handler(TransactionNotFoundError, handle_not_found)
    app.add_exception_handler(InsufficientHoldingsError, handle_insufficient_holdings)
    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(SmartSipException, handle_domain_error)

    app.include_router(portfolio.router, prefix="/api/portfolio", tags=["portfolio"])
    app.include_router(transactions.router, prefix="/api/transactions", tags=["transactions"])
    app.include_router(prices.router, prefix="/api/prices", tags=["prices"])

    @app.get("/")
    async def root() -> dict[str, str]:
        """Root endpoint returning API information."""
        return {"message": settings.app_name, "version": API_VERSION, "status": "running"}

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()
