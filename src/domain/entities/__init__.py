"""Domain entities.

Usage:
    from src.domain.entities import Portfolio
"""

from src.domain.entities.portfolio import Portfolio

__all__ = ["Portfolio"]
