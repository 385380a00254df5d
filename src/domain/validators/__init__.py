"""Validators package exports."""

from src.domain.validators.functions import (
    is_valid_portfolio_name_characters,
    is_valid_portfolio_name_length,
    validate_portfolio_name,
)

__all__ = [
    "is_valid_portfolio_name_characters",
    "is_valid_portfolio_name_length",
    "validate_portfolio_name",
]
