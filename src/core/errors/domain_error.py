"""Base error value carried by ``Failure`` results.

Handlers return these as data; they are never raised. The portfolio
aggregate raises exceptions instead (see src/domain/errors), and command
handlers translate them into DomainError values.
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Error value (NOT an Exception subclass).

    Attributes:
        code: Machine-readable error code.
        message: Human-readable explanation.
    """

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
