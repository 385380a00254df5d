"""Domain protocols (ports) for the portfolio's collaborators.

Usage:
    from src.domain.protocols import EventBusProtocol, PortfolioRepository
"""

from src.domain.protocols.event_bus_protocol import EventBusProtocol, EventHandler
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.portfolio_repository import PortfolioRepository

__all__ = [
    "EventBusProtocol",
    "EventHandler",
    "LoggerProtocol",
    "PortfolioRepository",
]
