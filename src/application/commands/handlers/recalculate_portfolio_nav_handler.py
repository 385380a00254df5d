"""RecalculatePortfolioNav command handler.

Runs after the valuation service has refreshed the portfolio's total
value: clears the dirty flag and stamps last_calculated_at.
"""

from src.application.commands.portfolio_commands import RecalculatePortfolioNav
from src.application.events.portfolio_event_dispatcher import PortfolioEventDispatcher
from src.application.services.ownership_verifier import OwnershipVerifier
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.portfolio_repository import PortfolioRepository


class RecalculatePortfolioNavHandler:
    """Handler for RecalculatePortfolioNav command.

    Dependencies (injected via constructor):
        - PortfolioRepository: For persistence
        - EventBusProtocol: For publishing any events still buffered
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

    async def handle(self, cmd: RecalculatePortfolioNav) -> Result[None, DomainError]:
        """Handle RecalculatePortfolioNav command.

        calculate_nav() records no event, so normally nothing is published;
        events left in the buffer by an earlier failed dispatch still are.

        Returns:
            Success(None): Portfolio marked as freshly valued.
            Failure(NotFoundError | AuthorizationError): Lookup failed.
        """
        ownership = await self._verifier.verify_portfolio_ownership(
            cmd.portfolio_id, cmd.owner_id
        )
        if isinstance(ownership, Failure):
            self._logger.warning(
                "portfolio_nav_recalculation_rejected",
                portfolio_id=str(cmd.portfolio_id),
                reason=ownership.error.code.value,
            )
            return ownership

        portfolio = ownership.value
        was_dirty = portfolio.is_dirty
        portfolio.calculate_nav()

        await self._portfolio_repo.save(portfolio)
        await self._dispatcher.dispatch(portfolio)

        self._logger.info(
            "portfolio_nav_recalculated",
            portfolio_id=str(portfolio.id),
            was_dirty=was_dirty,
            last_calculated_at=portfolio.last_calculated_at.isoformat()
            if portfolio.last_calculated_at
            else None,
        )
        return Success(value=None)
