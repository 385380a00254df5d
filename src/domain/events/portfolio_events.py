"""Portfolio domain events.

Events:
1. PortfolioUpdated - Portfolio was marked dirty or a rename was applied
   (including a rename to the current name)

Handlers (registered by the surrounding system, not in this package):
- Compliance handlers: react to every portfolio change notification
- Projection rebuilders: refresh read models for the portfolio

Snapshot semantics:
    PortfolioUpdated copies the aggregate's fields at the moment of
    emission instead of holding a reference to the live aggregate. A
    handler that runs after further mutations still sees the state that
    triggered the event; it must reload the aggregate to see the current
    state.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING
from uuid import UUID

from src.domain.events.base_event import DomainEvent

if TYPE_CHECKING:
    from src.domain.entities.portfolio import Portfolio


@dataclass(frozen=True, kw_only=True, slots=True)
class PortfolioUpdated(DomainEvent):
    """Emitted by Portfolio.mark_as_dirty() and Portfolio.update_name().

    Attributes:
        portfolio_id: Portfolio that changed.
        owner_id: Owner of the portfolio.
        name: Portfolio name at emission time.
        total_value: Total value at emission time.
        is_dirty: Dirty flag at emission time.
        last_calculated_at: Last NAV recalculation at emission time.
    """

    portfolio_id: UUID
    owner_id: str
    name: str
    total_value: Decimal
    is_dirty: bool
    last_calculated_at: datetime | None = None

    @classmethod
    def snapshot_of(cls, portfolio: "Portfolio") -> "PortfolioUpdated":
        """Build an event from the portfolio's current field values.

        Args:
            portfolio: Aggregate emitting the event.

        Returns:
            PortfolioUpdated holding copies of the relevant fields.
        """
        return cls(
            portfolio_id=portfolio.id,
            owner_id=portfolio.owner_id,
            name=portfolio.name,
            total_value=portfolio.total_value,
            is_dirty=portfolio.is_dirty,
            last_calculated_at=portfolio.last_calculated_at,
        )
