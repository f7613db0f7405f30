"""
Transaction log endpoints.
"""

from fastapi import APIRouter, Depends, Query, status

from smartsip.core.models.portfolio import Portfolio

from ..dependencies import get_portfolio
from ..schemas.api_models import TransactionModel, TransactionRequest, UndoResponse

router = APIRouter()


@router.get("", response_model=list[TransactionModel])
def list_transactions(
    symbol: str | None = Query(default=None, description="Only this symbol, newest first"),
    portfolio: Portfolio = Depends(get_portfolio),
) -> list[TransactionModel]:
    """List transactions in entry order, or one symbol's newest first."""
    transactions = portfolio.transactions_for(symbol) if symbol else portfolio.transactions
    return [TransactionModel.from_domain(t) for t in transactions]


@router.post("", response_model=TransactionModel, status_code=status.HTTP_201_CREATED)
def add_transaction(
    request: TransactionRequest, portfolio: Portfolio = Depends(get_portfolio)
) -> TransactionModel:
    """Record a transaction."""
    transaction = portfolio.add_transaction(
        symbol=request.symbol,
        type=request.type,
        price=request.price,
        quantity=request.quantity,
        date=request.date,
    )
    return TransactionModel.from_domain(transaction)


@router.post("/undo", response_model=UndoResponse)
def undo(portfolio: Portfolio = Depends(get_portfolio)) -> UndoResponse:
    """Restore the previous transaction list."""
    undone = portfolio.undo()
    return UndoResponse(undone=undone, can_undo=portfolio.can_undo)


@router.delete("/{transaction_id}", response_model=TransactionModel)
def delete_transaction(
    transaction_id: str, portfolio: Portfolio = Depends(get_portfolio)
) -> TransactionModel:
    """Delete a transaction by id."""
    return TransactionModel.from_domain(portfolio.delete_transaction(transaction_id))
