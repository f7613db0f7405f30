"""
Core constants and limits.

Defines the valuation engine's tolerances, the synthetic price history
window, and the sample data the application starts with.
"""

from datetime import date

# Holdings
HOLDING_EPSILON = 0.0001  # Quantities at or below this are float dust, not positions

# Synthetic price history
SYNTHETIC_HISTORY_DAYS = 3000  # Days walked backward from today per symbol
SYNTHETIC_MIN_DAILY_CHANGE = -0.02  # Lower bound of the daily perturbation
SYNTHETIC_MAX_DAILY_CHANGE = 0.021  # Upper bound of the daily perturbation
DEFAULT_FALLBACK_PRICE = 100.0  # Used when a symbol has no known price at all
SYNTHETIC_CACHE_SIZE = 256  # Memoized per-symbol series

# Undo
MAX_UNDO_STEPS = 20

# Presentation
CASH_ALLOCATION_THRESHOLD = 1.0  # Cash below this is left out of the allocation
CASH_ALLOCATION_LABEL = "Cash (Realized)"

# Analysis thresholds (largest position weight)
HIGH_CONCENTRATION_WEIGHT = 0.5
MEDIUM_CONCENTRATION_WEIGHT = 0.25
MAX_SUGGESTIONS = 3

# Default quotes used before any refresh has happened
MOCK_PRICES: dict[str, float] = {
    "AAPL": 175.50,
    "MSFT": 310.20,
    "GOOGL": 135.00,
    "TSLA": 240.50,
    "NVDA": 460.00,
}

# Sample transactions (id, symbol, type, date, price, quantity)
INITIAL_TRANSACTIONS: tuple[tuple[str, str, str, date, float, float], ...] = (
    ("1", "AAPL", "BUY", date(2023, 1, 15), 150.0, 10.0),
    ("2", "MSFT", "BUY", date(2023, 2, 20), 250.0, 5.0),
    ("3", "AAPL", "BUY", date(2023, 3, 15), 155.0, 10.0),
)
