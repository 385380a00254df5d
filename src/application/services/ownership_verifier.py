"""Ownership verification service.

Loads a portfolio and checks that the requesting user owns it, so every
command handler applies the same not-found / not-owned rules.

Architecture:
    - Application service (not domain - uses repositories)
    - Returns the portfolio on success (avoids a second fetch)

Usage:
    verifier = OwnershipVerifier(portfolio_repo)
    result = await verifier.verify_portfolio_ownership(portfolio_id, owner_id)
"""

from uuid import UUID

from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError, DomainError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.entities.portfolio import Portfolio
from src.domain.errors.portfolio_error import PortfolioError
from src.domain.protocols.portfolio_repository import PortfolioRepository


class OwnershipVerifier:
    """Service for verifying portfolio ownership.

    Dependencies (injected via constructor):
        - PortfolioRepository: For portfolio retrieval
    """

    def __init__(self, portfolio_repo: PortfolioRepository) -> None:
        self._portfolio_repo = portfolio_repo

    async def verify_portfolio_ownership(
        self,
        portfolio_id: UUID,
        owner_id: str,
    ) -> Result[Portfolio, DomainError]:
        """Verify a user owns a portfolio.

        Args:
            portfolio_id: The portfolio to verify.
            owner_id: The user who should own the portfolio.

        Returns:
            Success(Portfolio): Portfolio exists and is owned by the user.
            Failure(NotFoundError): Portfolio does not exist.
            Failure(AuthorizationError): Portfolio belongs to someone else.
        """
        portfolio = await self._portfolio_repo.find_by_id(portfolio_id)

        if portfolio is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.PORTFOLIO_NOT_FOUND,
                    message=PortfolioError.PORTFOLIO_NOT_FOUND,
                    resource_type="Portfolio",
                    resource_id=str(portfolio_id),
                )
            )

        if portfolio.owner_id != owner_id:
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.RESOURCE_NOT_OWNED,
                    message=PortfolioError.NOT_OWNED_BY_USER,
                )
            )

        return Success(value=portfolio)
