"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming and attached
to the portfolio validation exceptions raised by the domain.

Categories:
- Validation errors (INVALID_*)
- Resource errors (*_NOT_FOUND)
- Authorization errors (RESOURCE_NOT_OWNED)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    INVALID_PORTFOLIO_NAME = "invalid_portfolio_name"
    INVALID_PORTFOLIO_VALUE = "invalid_portfolio_value"

    # Resource errors
    PORTFOLIO_NOT_FOUND = "portfolio_not_found"

    # Authorization errors
    RESOURCE_NOT_OWNED = "resource_not_owned"
