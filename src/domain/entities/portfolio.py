"""Portfolio domain entity (aggregate root).

Represents an investment portfolio owned by a single user. The portfolio
is a consistency boundary: every mutation goes through one of its methods,
which enforce the invariants and record a domain event describing the
change. Events stay buffered on the aggregate until a dispatcher has
published them and calls clear_domain_events().

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Validation failures raise InvalidPortfolioName / InvalidPortfolioValue
    - Mutated in place for its whole lifetime (never re-created on update)
    - NOT thread-safe: one writer per instance

Dirty/clean lifecycle:
    clean -> dirty: mark_as_dirty(), or update_name() with a different name
    dirty -> clean: calculate_nav() only

Usage:
    from datetime import UTC, datetime
    from decimal import Decimal
    from uuid_extensions import uuid7
    from src.domain.entities import Portfolio

    portfolio = Portfolio(
        id=uuid7(),
        owner_id="user-123",
        name="Retirement",
        creation_date=datetime.now(UTC),
        total_value=Decimal("25000.00"),
    )
    portfolio.update_name("Retirement 2040")
    portfolio.calculate_nav()
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from decimal import Decimal
from typing import Any
from uuid import UUID

from uuid_extensions import uuid7

from src.domain.errors.portfolio_error import (
    InvalidPortfolioName,
    InvalidPortfolioValue,
    PortfolioError,
)
from src.domain.events.base_event import DomainEvent
from src.domain.events.portfolio_events import PortfolioUpdated
from src.domain.validators import (
    is_valid_portfolio_name_characters,
    is_valid_portfolio_name_length,
)

_IDENTITY_FIELDS = frozenset({"id", "owner_id", "creation_date"})


@dataclass
class Portfolio:
    """Investment portfolio aggregate.

    Construction assigns every field verbatim and then checks only that
    the name is non-empty and the total value is non-negative. Name length
    and forbidden characters are enforced by update_name() and the
    PortfolioName type, not by the constructor, so portfolios loaded from
    storage with legacy names still construct.

    Attributes:
        id: Unique portfolio identifier. Immutable.
        owner_id: Identifier of the owning user. Immutable, not validated.
        name: Display name. Change it with update_name().
        creation_date: When the portfolio was created. Immutable.
        total_value: Net asset value supplied by the valuation service.
        last_calculated_at: Last NAV recalculation (UTC), None if never.
        is_dirty: True when the valuation is stale relative to the last
            recorded change.

    Raises:
        InvalidPortfolioName: If name is None or empty.
        InvalidPortfolioValue: If total_value is negative.

    Example:
        >>> portfolio.mark_as_dirty()
        >>> portfolio.is_dirty
        True
        >>> len(portfolio.domain_events)
        1
    """

    # Required fields
    id: UUID
    owner_id: str
    name: str
    creation_date: datetime
    total_value: Decimal

    # Optional fields
    last_calculated_at: datetime | None = None
    is_dirty: bool = False

    _domain_events: list[DomainEvent] = field(
        default_factory=list, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        """Validate portfolio after initialization.

        Raises:
            InvalidPortfolioName: If name is None or empty.
            InvalidPortfolioValue: If total_value is negative.
        """
        if not self.name:
            raise InvalidPortfolioName(PortfolioError.NAME_REQUIRED, field="name")

        if self.total_value < 0:
            raise InvalidPortfolioValue(
                PortfolioError.NEGATIVE_TOTAL_VALUE, field="total_value"
            )

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _IDENTITY_FIELDS and name in self.__dict__:
            raise AttributeError(f"Portfolio.{name} cannot be changed")
        super().__setattr__(name, value)

    @classmethod
    def create(
        cls,
        *,
        owner_id: str,
        name: str,
        total_value: Decimal = Decimal("0"),
    ) -> "Portfolio":
        """Open a new portfolio with a time-ordered id (uuid7), created now.

        New portfolios start clean and have never been valued.

        Raises:
            InvalidPortfolioName: If name is None or empty.
            InvalidPortfolioValue: If total_value is negative.
        """
        return cls(
            id=uuid7(),
            owner_id=owner_id,
            name=name,
            creation_date=datetime.now(UTC),
            total_value=total_value,
        )

    # -------------------------------------------------------------------------
    # Domain Events
    # -------------------------------------------------------------------------

    @property
    def domain_events(self) -> tuple[DomainEvent, ...]:
        """Buffered events in the order they were recorded (read-only view)."""
        return tuple(self._domain_events)

    def clear_domain_events(self) -> None:
        """Remove all buffered events.

        Called by the dispatcher once the events have been published.
        The portfolio never clears its own buffer.
        """
        self._domain_events.clear()

    def _record_updated(self) -> None:
        self._domain_events.append(PortfolioUpdated.snapshot_of(self))

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def calculate_nav(self) -> None:
        """Mark the valuation as fresh as of now.

        The numeric NAV is computed by the valuation service before this is
        called; this method only does the freshness bookkeeping.

        Side Effects:
            - Sets is_dirty to False
            - Sets last_calculated_at to the current UTC time, even when
              the portfolio was already clean
            - Records NO domain event
        """
        if self.is_dirty:
            self.is_dirty = False
        self.last_calculated_at = datetime.now(UTC)

    def mark_as_dirty(self) -> None:
        """Flag the valuation as stale and notify interested handlers.

        Side Effects:
            - Sets is_dirty to True (even if already True)
            - Records one PortfolioUpdated event, every call
        """
        self.is_dirty = True
        self._record_updated()

    def update_name(self, new_name: str | None) -> None:
        """Rename the portfolio.

        Checks run in order and the first failure wins: empty, length
        outside 1..32, forbidden characters. A rejected rename changes
        nothing and records nothing.

        Args:
            new_name: Candidate name.

        Raises:
            InvalidPortfolioName: If new_name is None, empty, too long, or
                contains a forbidden character.

        Side Effects (on success):
            - If new_name differs from the current name (exact match), sets
              name and is_dirty
            - Records one PortfolioUpdated event, also when the name is
              unchanged, so consumers see rename attempts too
        """
        if not new_name:
            raise InvalidPortfolioName(PortfolioError.NAME_REQUIRED, field="new_name")
        if not is_valid_portfolio_name_length(new_name):
            raise InvalidPortfolioName(
                PortfolioError.NAME_LENGTH_OUT_OF_RANGE, field="new_name"
            )
        if not self.is_valid_characters(new_name):
            raise InvalidPortfolioName(
                PortfolioError.NAME_FORBIDDEN_CHARACTERS, field="new_name"
            )

        if self.name != new_name:
            self.name = new_name
            self.is_dirty = True
        self._record_updated()

    # -------------------------------------------------------------------------
    # Query Methods (Read-Only)
    # -------------------------------------------------------------------------

    @staticmethod
    def is_valid_characters(candidate: str) -> bool:
        """Check a candidate name for forbidden characters.

        Length is not considered. Exposed so input forms can pre-validate
        before attempting update_name().

        Args:
            candidate: Name to check.

        Returns:
            True if candidate contains none of @ / ! # $ % ^ & * ( ) , + = : < > ' { }.

        Example:
            >>> Portfolio.is_valid_characters("Growth & Income")
            False
        """
        return is_valid_portfolio_name_characters(candidate)

    def has_pending_events(self) -> bool:
        """Check whether any events are waiting for dispatch."""
        return bool(self._domain_events)
