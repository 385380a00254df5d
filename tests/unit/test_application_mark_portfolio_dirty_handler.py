"""Unit tests for MarkPortfolioDirtyHandler.

Uses mocked repository, event bus, and logger for isolation.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from uuid_extensions import uuid7

from src.application.commands.handlers.mark_portfolio_dirty_handler import (
    MarkPortfolioDirtyHandler,
)
from src.application.commands.portfolio_commands import MarkPortfolioDirty
from src.core.errors import AuthorizationError, NotFoundError
from src.core.result import Failure, Success
from src.domain.entities.portfolio import Portfolio
from src.domain.events.portfolio_events import PortfolioUpdated
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.portfolio_repository import PortfolioRepository


def create_handler() -> tuple[MarkPortfolioDirtyHandler, AsyncMock, AsyncMock]:
    """Create handler with mocked dependencies."""
    repo = AsyncMock(spec=PortfolioRepository)
    event_bus = AsyncMock(spec=EventBusProtocol)
    handler = MarkPortfolioDirtyHandler(
        portfolio_repo=repo,
        event_bus=event_bus,
        logger=MagicMock(spec=LoggerProtocol),
    )
    return handler, repo, event_bus


@pytest.mark.asyncio
async def test_mark_dirty_saves_and_publishes():
    handler, repo, event_bus = create_handler()
    portfolio = Portfolio.create(owner_id="user-1", name="Growth")
    repo.find_by_id.return_value = portfolio

    result = await handler.handle(
        MarkPortfolioDirty(portfolio_id=portfolio.id, owner_id="user-1")
    )

    assert isinstance(result, Success)
    assert portfolio.is_dirty is True
    repo.save.assert_called_once_with(portfolio)
    event_bus.publish.assert_called_once()
    event = event_bus.publish.call_args.args[0]
    assert isinstance(event, PortfolioUpdated)
    assert event.is_dirty is True
    assert portfolio.domain_events == ()


@pytest.mark.asyncio
async def test_already_dirty_portfolio_still_publishes():
    handler, repo, event_bus = create_handler()
    portfolio = Portfolio.create(owner_id="user-1", name="Growth")
    portfolio.is_dirty = True
    repo.find_by_id.return_value = portfolio

    await handler.handle(MarkPortfolioDirty(portfolio_id=portfolio.id, owner_id="user-1"))

    event_bus.publish.assert_called_once()


@pytest.mark.asyncio
async def test_portfolio_not_found():
    handler, repo, event_bus = create_handler()
    repo.find_by_id.return_value = None

    result = await handler.handle(MarkPortfolioDirty(portfolio_id=uuid7(), owner_id="user-1"))

    assert isinstance(result, Failure)
    assert isinstance(result.error, NotFoundError)
    repo.save.assert_not_called()
    event_bus.publish.assert_not_called()


@pytest.mark.asyncio
async def test_portfolio_not_owned():
    handler, repo, event_bus = create_handler()
    portfolio = Portfolio.create(owner_id="user-1", name="Growth")
    repo.find_by_id.return_value = portfolio

    result = await handler.handle(
        MarkPortfolioDirty(portfolio_id=portfolio.id, owner_id="user-2")
    )

    assert isinstance(result, Failure)
    assert isinstance(result.error, AuthorizationError)
    assert portfolio.is_dirty is False
    event_bus.publish.assert_not_called()
