"""Error values for ``Failure`` results."""

from src.core.errors.common_errors import (
    AuthorizationError,
    NotFoundError,
    ValidationError,
)
from src.core.errors.domain_error import DomainError

__all__ = [
    "AuthorizationError",
    "DomainError",
    "NotFoundError",
    "ValidationError",
]
