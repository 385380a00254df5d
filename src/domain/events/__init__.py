"""Domain events module.

Usage:
    >>> from src.domain.events import DomainEvent, PortfolioUpdated
    >>>
    >>> portfolio.mark_as_dirty()
    >>> isinstance(portfolio.domain_events[-1], PortfolioUpdated)
    True
"""

from src.domain.events.base_event import DomainEvent
from src.domain.events.portfolio_events import PortfolioUpdated

__all__ = [
    "DomainEvent",
    "PortfolioUpdated",
]
