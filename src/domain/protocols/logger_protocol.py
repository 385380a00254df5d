"""LoggerProtocol definition for structured logging.

Backend-agnostic structured logging port. Messages are short snake_case
event names; details go in key-value context, never in f-strings.

Log Levels:
    - DEBUG: Detailed diagnostic info (event dispatch, no-op renames)
    - INFO: Normal operational events (portfolio renamed, NAV refreshed)
    - WARNING: Rejected commands (invalid name, not owned, not found)
    - ERROR: Operation failed, system continues
    - CRITICAL: System-wide failure

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("portfolio_renamed", portfolio_id=str(portfolio.id))

    scoped = logger.bind(portfolio_id=str(portfolio.id))
    scoped.debug("portfolio_events_dispatched", count=2)
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message with structured context."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message with structured context."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message with structured context."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message.

        Args:
            message: Event name.
            error: Optional exception; adapters add error_type and
                error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message (same contract as error())."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        The original logger is unchanged.
        """
        ...

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Alias for bind()."""
        ...
