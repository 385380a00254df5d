"""Domain errors package.

Usage:
    from src.domain.errors import InvalidPortfolioName, InvalidPortfolioValue
"""

from src.domain.errors.portfolio_error import (
    InvalidPortfolioName,
    InvalidPortfolioValue,
    PortfolioError,
)

__all__ = [
    "InvalidPortfolioName",
    "InvalidPortfolioValue",
    "PortfolioError",
]
