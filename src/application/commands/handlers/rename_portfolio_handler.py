"""RenamePortfolio command handler.

Loads the portfolio, applies the rename through the aggregate, saves it,
and dispatches the buffered PortfolioUpdated event.

Architecture:
- Application layer handler (orchestrates business logic)
- Imports only from domain layer (entities, protocols, errors)
- Uses Result types for error handling
"""

from typing import cast

from src.application.commands.portfolio_commands import RenamePortfolio
from src.application.events.portfolio_event_dispatcher import PortfolioEventDispatcher
from src.application.services.ownership_verifier import OwnershipVerifier
from src.core.errors import DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.errors.portfolio_error import InvalidPortfolioName
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.portfolio_repository import PortfolioRepository


class RenamePortfolioHandler:
    """Handler for RenamePortfolio command.

    Dependencies (injected via constructor):
        - PortfolioRepository: For persistence
        - EventBusProtocol: For publishing buffered domain events
        - LoggerProtocol: For structured logging
    """

    def __init__(
        self,
        portfolio_repo: PortfolioRepository,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._portfolio_repo = portfolio_repo
        self._verifier = OwnershipVerifier(portfolio_repo)
        self._dispatcher = PortfolioEventDispatcher(event_bus=event_bus, logger=logger)
        self._logger = logger

    async def handle(self, cmd: RenamePortfolio) -> Result[None, DomainError]:
        """Handle RenamePortfolio command.

        Args:
            cmd: RenamePortfolio command.

        Returns:
            Success(None): Rename applied (or name already equal).
            Failure(NotFoundError): Portfolio does not exist.
            Failure(AuthorizationError): Portfolio owned by another user.
            Failure(ValidationError): Name rejected; nothing saved or published.

        Side Effects (on success):
            - Saves the portfolio
            - Publishes one PortfolioUpdated event, even for an unchanged name
        """
        ownership = await self._verifier.verify_portfolio_ownership(
            cmd.portfolio_id, cmd.owner_id
        )
        if isinstance(ownership, Failure):
            self._logger.warning(
                "portfolio_rename_rejected",
                portfolio_id=str(cmd.portfolio_id),
                reason=ownership.error.code.value,
            )
            return ownership

        portfolio = ownership.value
        previous_name = portfolio.name

        try:
            portfolio.update_name(cmd.new_name)
        except InvalidPortfolioName as e:
            self._logger.warning(
                "portfolio_rename_rejected",
                portfolio_id=str(cmd.portfolio_id),
                reason=e.code.value,
                detail=str(e),
            )
            return cast(
                Result[None, DomainError],
                Failure(error=ValidationError(code=e.code, message=str(e), field=e.field)),
            )

        await self._portfolio_repo.save(portfolio)
        await self._dispatcher.dispatch(portfolio)

        if portfolio.name != previous_name:
            self._logger.info(
                "portfolio_renamed",
                portfolio_id=str(portfolio.id),
                previous_name=previous_name,
                new_name=portfolio.name,
            )
        else:
            self._logger.debug("portfolio_rename_unchanged", portfolio_id=str(portfolio.id))

        return Success(value=None)
