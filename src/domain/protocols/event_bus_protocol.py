"""Event bus protocol (port) for domain events.

The domain defines the port; the surrounding system supplies the adapter
(in-memory, message broker, ...). No adapter ships with this package.

Architecture:
    - Protocol (structural typing, NOT ABC inheritance)
    - Consumed by PortfolioEventDispatcher, which publishes the events a
      Portfolio has buffered

Usage:
    >>> async def notify_compliance(event: PortfolioUpdated) -> None:
    ...     await compliance.review(event.portfolio_id)
    >>>
    >>> event_bus.subscribe(PortfolioUpdated, notify_compliance)
    >>> await event_bus.publish(PortfolioUpdated.snapshot_of(portfolio))
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from src.domain.events.base_event import DomainEvent

# Type alias for event handler functions
EventHandler = Callable[[DomainEvent], Awaitable[None]]
"""Async handler: takes one DomainEvent, returns None (side-effects only)."""


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations.

    Key Requirements:
        1. **Fail-open behavior**: One handler failure must NOT prevent other
           handlers from executing.
        2. **Async support**: Handlers are async to allow I/O.
        3. **Type routing**: Handlers registered for a type only receive
           events of that exact type.

    Methods:
        subscribe: Register event handler for specific event type
        publish: Publish event to all registered handlers
    """

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register event handler for specific event type.

        Args:
            event_type: Class of event to handle (e.g., PortfolioUpdated).
            handler: Async function called with each published event.
        """
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers.

        Args:
            event: Domain event to publish.

        Notes:
            - Publish AFTER the aggregate has been saved (facts, not intents)
            - No handlers = no-op (not an error)
            - Transport failures may raise; handler failures must not
        """
        ...
