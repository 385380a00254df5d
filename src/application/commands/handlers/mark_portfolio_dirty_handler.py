"""MarkPortfolioDirty command handler.

Flags the portfolio's valuation as stale and publishes the resulting
PortfolioUpdated event (compliance handlers subscribe to it).
"""

from src.application.commands.portfolio_commands import MarkPortfolioDirty
from src.application.events.portfolio_event_dispatcher import PortfolioEventDispatcher
from src.application.services.ownership_verifier import OwnershipVerifier
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.portfolio_repository import PortfolioRepository


class MarkPortfolioDirtyHandler:
    """Handler for MarkPortfolioDirty command.

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

    async def handle(self, cmd: MarkPortfolioDirty) -> Result[None, DomainError]:
        """Handle MarkPortfolioDirty command.

        Returns:
            Success(None): Portfolio flagged dirty and event published.
            Failure(NotFoundError | AuthorizationError): Lookup failed.
        """
        ownership = await self._verifier.verify_portfolio_ownership(
            cmd.portfolio_id, cmd.owner_id
        )
        if isinstance(ownership, Failure):
            self._logger.warning(
                "portfolio_mark_dirty_rejected",
                portfolio_id=str(cmd.portfolio_id),
                reason=ownership.error.code.value,
            )
            return ownership

        portfolio = ownership.value
        portfolio.mark_as_dirty()

        await self._portfolio_repo.save(portfolio)
        await self._dispatcher.dispatch(portfolio)

        self._logger.info("portfolio_marked_dirty", portfolio_id=str(portfolio.id))
        return Success(value=None)
