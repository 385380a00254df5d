"""Commands - Write operations that change state.

Commands represent user intent to perform an action. They are immutable
dataclasses with imperative names (RenamePortfolio, MarkPortfolioDirty).

Each command has a corresponding handler in ``handlers/``.
"""

from src.application.commands.portfolio_commands import (
    MarkPortfolioDirty,
    RecalculatePortfolioNav,
    RenamePortfolio,
)

__all__ = [
    "MarkPortfolioDirty",
    "RecalculatePortfolioNav",
    "RenamePortfolio",
]
