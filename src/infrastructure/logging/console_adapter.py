"""structlog-backed stdout logger.

Renders each log call as one line on stdout: colored key=value pairs on a
developer machine, one JSON object per line everywhere else so log
shippers can parse it. Satisfies LoggerProtocol structurally; there is no
base class.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def _level_number(level: str) -> int:
    """Map a level name to its stdlib number; unknown names mean INFO."""
    return logging.getLevelNamesMapping().get(level.upper(), logging.INFO)


class ConsoleAdapter:
    """LoggerProtocol adapter writing structured lines to stdout.

    Args:
        use_json: Emit JSON lines instead of the colored console format.
        level: Lowest level name that is emitted (case-insensitive).
    """

    def __init__(self, *, use_json: bool = False, level: str = "INFO") -> None:
        renderer = (
            structlog.processors.JSONRenderer()
            if use_json
            else structlog.dev.ConsoleRenderer(colors=True)
        )

        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso", utc=True),
                renderer,
            ],
            wrapper_class=structlog.make_filtering_bound_logger(_level_number(level)),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )

        self._logger = structlog.get_logger()

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level event.

        Args:
            message: snake_case event name (e.g., "portfolio_events_dispatched").
            **context: Structured fields added to the line.
        """
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level event.

        Args:
            message: snake_case event name (e.g., "portfolio_renamed").
            **context: Structured fields added to the line.
        """
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level event (rejected commands land here).

        Args:
            message: snake_case event name (e.g., "portfolio_rename_rejected").
            **context: Structured fields added to the line.
        """
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level event.

        Args:
            message: snake_case event name.
            error: Exception that caused the failure. Adds ``error_type``
                and ``error_message`` fields when given.
            **context: Structured fields added to the line.
        """
        self._logger.error(message, **_with_error(context, error))

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level event.

        Args:
            message: snake_case event name.
            error: Exception that caused the failure. Adds ``error_type``
                and ``error_message`` fields when given.
            **context: Structured fields added to the line.
        """
        self._logger.critical(message, **_with_error(context, error))

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return a sibling adapter whose every log line carries ``context``.

        structlog stays configured as-is; only the bound logger differs.

        Args:
            **context: Fields to attach to all subsequent lines.

        Returns:
            ConsoleAdapter: New adapter; this one is unchanged.
        """
        bound = ConsoleAdapter.__new__(ConsoleAdapter)
        bound._logger = self._logger.bind(**context)
        return bound

    def with_context(self, **context: Any) -> ConsoleAdapter:
        """Alias for bind().

        Args:
            **context: Fields to attach to all subsequent lines.

        Returns:
            ConsoleAdapter: New adapter with the bound fields.
        """
        return self.bind(**context)


def _with_error(context: dict[str, Any], error: Exception | None) -> dict[str, Any]:
    """Add error_type/error_message to ``context`` when ``error`` is given."""
    if error is not None:
        context["error_type"] = type(error).__name__
        context["error_message"] = str(error)
    return context
