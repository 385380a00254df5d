"""Command handlers for portfolio write operations."""

from src.application.commands.handlers.mark_portfolio_dirty_handler import (
    MarkPortfolioDirtyHandler,
)
from src.application.commands.handlers.recalculate_portfolio_nav_handler import (
    RecalculatePortfolioNavHandler,
)
from src.application.commands.handlers.rename_portfolio_handler import (
    RenamePortfolioHandler,
)

__all__ = [
    "MarkPortfolioDirtyHandler",
    "RecalculatePortfolioNavHandler",
    "RenamePortfolioHandler",
]
