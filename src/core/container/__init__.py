"""Composition root for ambient singletons.

Usage:
    from src.core.container import get_logger

Handlers receive their repository, event bus, and logger through their
constructors; the container only owns the ambient singletons.
"""

from src.core.container.infrastructure import get_logger

__all__ = ["get_logger"]
