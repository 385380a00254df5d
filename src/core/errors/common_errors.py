"""Error values returned by the portfolio command handlers.

- ValidationError: a portfolio invariant rejected the input
- NotFoundError: no portfolio with the requested id
- AuthorizationError: the portfolio belongs to a different owner

Example:
    return Failure(error=ValidationError(
        code=ErrorCode.INVALID_PORTFOLIO_NAME,
        message=PortfolioError.NAME_FORBIDDEN_CHARACTERS,
        field="new_name",
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input rejected by a domain rule.

    Attributes:
        field: Argument that was rejected ("name", "new_name", ...).
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Lookup by id found nothing.

    Attributes:
        resource_type: Kind of resource looked up ("Portfolio").
        resource_id: Id that was requested, as a string.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Caller is not allowed to act on the resource (not the owner)."""
