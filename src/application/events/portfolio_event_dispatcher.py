"""Portfolio event dispatcher.

Drains the events a Portfolio has buffered onto the event bus.

Architecture:
    - Application layer (coordination only, no business rules)
    - Called by command handlers AFTER the portfolio has been saved
    - The only caller of Portfolio.clear_domain_events()

Pattern:
    1. Publish buffered events one at a time, in buffer order
    2. Clear the buffer once every publish has returned
    3. If a publish raises, the exception propagates and the buffer is
       left intact so the caller can retry the whole batch
"""

from src.domain.entities.portfolio import Portfolio
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol


class PortfolioEventDispatcher:
    """Publishes and clears a portfolio's buffered domain events.

    Attributes:
        _event_bus: Bus the events are published to.
        _logger: For structured logging.

    Example:
        >>> dispatcher = PortfolioEventDispatcher(event_bus=bus, logger=get_logger())
        >>> await repo.save(portfolio)
        >>> await dispatcher.dispatch(portfolio)
        2
    """

    def __init__(self, event_bus: EventBusProtocol, logger: LoggerProtocol) -> None:
        self._event_bus = event_bus
        self._logger = logger

    async def dispatch(self, portfolio: Portfolio) -> int:
        """Publish every buffered event, then clear the buffer.

        Events are awaited sequentially so handlers observe them in the
        order the portfolio recorded them.

        Args:
            portfolio: Portfolio whose events should be published.

        Returns:
            Number of events published.

        Raises:
            Exception: Whatever the event bus raises; the buffer is NOT
                cleared in that case.
        """
        if not portfolio.has_pending_events():
            return 0

        events = portfolio.domain_events

        for event in events:
            await self._event_bus.publish(event)

        portfolio.clear_domain_events()

        self._logger.debug(
            "portfolio_events_dispatched",
            portfolio_id=str(portfolio.id),
            event_count=len(events),
            event_ids=[str(event.event_id) for event in events],
        )
        return len(events)
