"""Portfolio domain errors.

Message constants plus the two validation exceptions the Portfolio
aggregate raises. Unlike most error values in this codebase these ARE
exceptions: aggregate operations fail fast and synchronously, and the
application layer converts them into ``Failure`` results.

Usage:
    from src.domain.errors import InvalidPortfolioName, PortfolioError

    try:
        portfolio.update_name(new_name)
    except InvalidPortfolioName as e:
        return Failure(error=ValidationError(code=e.code, message=str(e), field=e.field))
"""

from src.core.enums import ErrorCode


class PortfolioError:
    """Portfolio error message constants."""

    # -------------------------------------------------------------------------
    # Name Errors
    # -------------------------------------------------------------------------

    NAME_REQUIRED = "Portfolio name cannot be empty"
    """Name is None or an empty string."""

    NAME_LENGTH_OUT_OF_RANGE = "Portfolio name must be between 1 and 32 characters"
    """Name is shorter or longer than the allowed bounds."""

    NAME_FORBIDDEN_CHARACTERS = "Portfolio name contains forbidden characters"
    """Name contains one of @ / ! # $ % ^ & * ( ) , + = : < > ' { }."""

    # -------------------------------------------------------------------------
    # Value Errors
    # -------------------------------------------------------------------------

    NEGATIVE_TOTAL_VALUE = "Portfolio total value cannot be negative"
    """Total value must be >= 0 when the portfolio is constructed."""

    # -------------------------------------------------------------------------
    # Lookup Errors
    # -------------------------------------------------------------------------

    PORTFOLIO_NOT_FOUND = "Portfolio not found"
    NOT_OWNED_BY_USER = "Portfolio not owned by user"


class InvalidPortfolioName(ValueError):
    """Portfolio name rejected (empty, wrong length, or forbidden characters).

    Attributes:
        code: Machine-readable error code.
        field: Name of the rejected argument ("name" or "new_name").
    """

    code = ErrorCode.INVALID_PORTFOLIO_NAME

    def __init__(self, message: str, *, field: str = "name") -> None:
        super().__init__(message)
        self.field = field


class InvalidPortfolioValue(ValueError):
    """Portfolio total value rejected (negative at construction).

    Attributes:
        code: Machine-readable error code.
        field: Name of the rejected argument.
    """

    code = ErrorCode.INVALID_PORTFOLIO_VALUE

    def __init__(self, message: str, *, field: str = "total_value") -> None:
        super().__init__(message)
        self.field = field
