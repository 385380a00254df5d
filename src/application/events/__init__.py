"""Domain event dispatch - hands buffered aggregate events to the event bus."""

from src.application.events.portfolio_event_dispatcher import PortfolioEventDispatcher

__all__ = ["PortfolioEventDispatcher"]
