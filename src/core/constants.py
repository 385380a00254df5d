"""Centralized constants for internal implementation details.

This module contains constants that are internal implementation details,
NOT environment-specific configuration. For environment-specific settings,
use `src/core/config.py` instead.

Categories:
- Portfolio name rules: Length bounds and forbidden characters
- Logging: Accepted log level names

Example:
    >>> from src.core.constants import PORTFOLIO_NAME_MAX_LENGTH
    >>> len(name) <= PORTFOLIO_NAME_MAX_LENGTH
"""

# =============================================================================
# Portfolio Name Rules
# =============================================================================

PORTFOLIO_NAME_MIN_LENGTH: int = 1
"""Minimum portfolio name length (inclusive)."""

PORTFOLIO_NAME_MAX_LENGTH: int = 32
"""Maximum portfolio name length (inclusive)."""

PORTFOLIO_NAME_FORBIDDEN_CHARACTERS: frozenset[str] = frozenset(
    "@/!#$%^&*(),+=:<>'{}"
)
"""Characters a portfolio name may never contain.

Every entry point (forms, HTTP, CLI, update_name) applies the same set.
"""


# =============================================================================
# Logging
# =============================================================================

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
"""Standard 5-level logging hierarchy accepted by Settings.log_level."""
