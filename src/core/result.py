"""Result types for railway-oriented programming.

Application handlers return a Result instead of letting domain exceptions
escape, so callers branch on the outcome explicitly.

Usage:
    result = await handler.handle(RenamePortfolio(...))
    match result:
        case Success():
            ...
        case Failure(error=err):
            print(f"Rename rejected: {err.message}")
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
Result: TypeAlias = Success[T] | Failure[E]
