"""
Custom exception hierarchy for the portfolio tracker.

The valuation engine itself never raises; these exceptions belong to the
input-collection, persistence and collaborator layers around it.
"""


class SmartSipException(Exception):
    """Base exception for all portfolio tracker errors."""

    pass


class ValidationError(SmartSipException):
    """Raised when input validation fails."""

    pass


class ConfigurationError(SmartSipException):
    """Raised when configuration is invalid."""

    pass


class PriceDataError(SmartSipException):
    """Raised when a price payload or price cache cannot be read."""

    pass


class InsufficientHoldingsError(ValidationError):
    """Raised when a SELL asks for more units than are currently held."""

    def __init__(self, symbol: str, requested: float, available: float):
        self.symbol = symbol
        self.requested = requested
        self.available = available
        super().__init__(
            f"Insufficient holdings for {symbol}: requested={requested}, available={available}"
        )


class TransactionNotFoundError(SmartSipException):
    """Raised when trying to operate on a non-existent transaction."""

    def __init__(self, transaction_id: str):
        self.transaction_id = transaction_id
        super().__init__(f"Transaction not found: {transaction_id}")
