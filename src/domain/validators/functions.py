"""Centralized portfolio validation functions (DRY principle).

All name rules are defined once here and reused by the Portfolio aggregate
and by the ``PortfolioName`` Annotated type, so construction, rename and
any external input form agree on what a valid name is.

Validators are pure functions; ``validate_portfolio_name`` raises
ValueError on failure (the contract Pydantic's AfterValidator expects).
"""

from src.core.constants import (
    PORTFOLIO_NAME_FORBIDDEN_CHARACTERS,
    PORTFOLIO_NAME_MAX_LENGTH,
    PORTFOLIO_NAME_MIN_LENGTH,
)
from src.domain.errors.portfolio_error import PortfolioError


def is_valid_portfolio_name_characters(v: str) -> bool:
    """Check that a candidate name contains no forbidden characters.

    Length is NOT considered; an empty string is valid here.

    Args:
        v: Candidate portfolio name.

    Returns:
        True if none of the forbidden characters appear in ``v``.

    Example:
        >>> is_valid_portfolio_name_characters("Retirement 2040")
        True
        >>> is_valid_portfolio_name_characters("bad@name")
        False
    """
    return PORTFOLIO_NAME_FORBIDDEN_CHARACTERS.isdisjoint(v)


def is_valid_portfolio_name_length(v: str) -> bool:
    """Check that a candidate name is within the allowed length bounds."""
    return PORTFOLIO_NAME_MIN_LENGTH <= len(v) <= PORTFOLIO_NAME_MAX_LENGTH


def validate_portfolio_name(v: str) -> str:
    """Validate a portfolio name with the same rules as Portfolio.update_name.

    Args:
        v: Portfolio name to validate.

    Returns:
        Name unchanged (validation only, no normalization).

    Raises:
        ValueError: If the name is empty, out of bounds, or contains a
            forbidden character.

    Example:
        >>> validate_portfolio_name("Growth")
        'Growth'
        >>> validate_portfolio_name("a/b")
        ValueError: Portfolio name contains forbidden characters
    """
    if not v:
        raise ValueError(PortfolioError.NAME_REQUIRED)
    if not is_valid_portfolio_name_length(v):
        raise ValueError(PortfolioError.NAME_LENGTH_OUT_OF_RANGE)
    if not is_valid_portfolio_name_characters(v):
        raise ValueError(PortfolioError.NAME_FORBIDDEN_CHARACTERS)
    return v
