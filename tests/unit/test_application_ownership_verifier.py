"""Unit tests for OwnershipVerifier (portfolio lookups)."""

from unittest.mock import AsyncMock

import pytest
from uuid_extensions import uuid7

from src.application.services.ownership_verifier import OwnershipVerifier
from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError, NotFoundError
from src.core.result import Failure, Success
from src.domain.entities.portfolio import Portfolio
from src.domain.protocols.portfolio_repository import PortfolioRepository


@pytest.mark.asyncio
async def test_returns_portfolio_for_owner():
    repo = AsyncMock(spec=PortfolioRepository)
    portfolio = Portfolio.create(owner_id="user-1", name="Growth")
    repo.find_by_id.return_value = portfolio

    result = await OwnershipVerifier(repo).verify_portfolio_ownership(
        portfolio.id, "user-1"
    )

    assert isinstance(result, Success)
    assert result.value is portfolio
    repo.find_by_id.assert_called_once_with(portfolio.id)


@pytest.mark.asyncio
async def test_missing_portfolio_returns_not_found():
    repo = AsyncMock(spec=PortfolioRepository)
    repo.find_by_id.return_value = None
    portfolio_id = uuid7()

    result = await OwnershipVerifier(repo).verify_portfolio_ownership(
        portfolio_id, "user-1"
    )

    assert isinstance(result, Failure)
    assert isinstance(result.error, NotFoundError)
    assert result.error.code == ErrorCode.PORTFOLIO_NOT_FOUND
    assert result.error.resource_id == str(portfolio_id)


@pytest.mark.asyncio
async def test_other_owner_returns_authorization_error():
    repo = AsyncMock(spec=PortfolioRepository)
    portfolio = Portfolio.create(owner_id="user-1", name="Growth")
    repo.find_by_id.return_value = portfolio

    result = await OwnershipVerifier(repo).verify_portfolio_ownership(
        portfolio.id, "intruder"
    )

    assert isinstance(result, Failure)
    assert isinstance(result.error, AuthorizationError)
    assert result.error.code == ErrorCode.RESOURCE_NOT_OWNED
