"""Portfolio commands (CQRS write operations).

Commands represent user intent to change portfolio state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic
- Commands don't return values (handlers return Result types)
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class RenamePortfolio:
    """Rename a portfolio.

    Attributes:
        portfolio_id: Portfolio to rename.
        owner_id: User requesting the rename (must own the portfolio).
        new_name: Candidate name; validated by the aggregate.

    Example:
        >>> command = RenamePortfolio(
        ...     portfolio_id=portfolio_id,
        ...     owner_id="user-123",
        ...     new_name="Retirement 2040",
        ... )
        >>> result = await handler.handle(command)
    """

    portfolio_id: UUID
    owner_id: str
    new_name: str | None


@dataclass(frozen=True, kw_only=True)
class MarkPortfolioDirty:
    """Flag a portfolio's valuation as stale (e.g., after a trade settles).

    Attributes:
        portfolio_id: Portfolio whose valuation is stale.
        owner_id: User on whose behalf the change is recorded.
    """

    portfolio_id: UUID
    owner_id: str


@dataclass(frozen=True, kw_only=True)
class RecalculatePortfolioNav:
    """Record that a portfolio's NAV has just been recalculated.

    The valuation service has already produced the number; this command
    only refreshes the portfolio's freshness bookkeeping.

    Attributes:
        portfolio_id: Portfolio that was revalued.
        owner_id: User on whose behalf the recalculation runs.
    """

    portfolio_id: UUID
    owner_id: str
