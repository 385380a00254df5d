"""Application services shared by command handlers."""

from src.application.services.ownership_verifier import OwnershipVerifier

__all__ = ["OwnershipVerifier"]
