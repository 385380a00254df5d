"""PortfolioRepository protocol for portfolio persistence.

Port (interface) for hexagonal architecture. The persistence mechanism
(and any optimistic-concurrency or per-aggregate locking) belongs to the
implementation; none ships with this package.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.portfolio import Portfolio


class PortfolioRepository(Protocol):
    """Portfolio repository protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Methods:
        find_by_id: Retrieve portfolio by ID
        save: Create or update portfolio

    Example Implementation:
        >>> class PostgresPortfolioRepository:
        ...     async def find_by_id(self, portfolio_id: UUID) -> Portfolio | None:
        ...         # Database logic here
        ...         pass
    """

    async def find_by_id(self, portfolio_id: UUID) -> Portfolio | None:
        """Find portfolio by ID.

        Args:
            portfolio_id: Portfolio's unique identifier.

        Returns:
            Portfolio if found, None otherwise. Loaded portfolios start with
            an empty event buffer.
        """
        ...

    async def save(self, portfolio: Portfolio) -> None:
        """Persist the portfolio's current state.

        Does NOT dispatch or clear buffered domain events.

        Args:
            portfolio: Portfolio to create or update.
        """
        ...
