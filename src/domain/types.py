"""Annotated types with centralized validation (DRY principle).

Define validation once, use everywhere. Input models at the edges
(forms, HTTP schemas, CLI parsers) declare ``PortfolioName`` so they reject
exactly what ``Portfolio.update_name`` rejects, before any mutation is tried.

Usage:
    from pydantic import BaseModel
    from src.domain.types import PortfolioName

    class RenamePortfolioRequest(BaseModel):
        new_name: PortfolioName
"""

from typing import Annotated

from pydantic import AfterValidator, Field

from src.core.constants import PORTFOLIO_NAME_MAX_LENGTH, PORTFOLIO_NAME_MIN_LENGTH
from src.domain.validators import validate_portfolio_name

PortfolioName = Annotated[
    str,
    Field(
        min_length=PORTFOLIO_NAME_MIN_LENGTH,
        max_length=PORTFOLIO_NAME_MAX_LENGTH,
        description="Portfolio display name",
        examples=["Retirement 2040"],
    ),
    AfterValidator(validate_portfolio_name),
]
"""Portfolio name with validation.

Validation:
- 1 to 32 characters
- None of @ / ! # $ % ^ & * ( ) , + = : < > ' { }

Examples:
    >>> from pydantic import BaseModel
    >>> class Form(BaseModel):
    ...     name: PortfolioName
    >>> Form(name="Growth").name
    'Growth'
"""
