"""Domain layer - Pure business logic.

This layer contains the Portfolio aggregate, its domain events, validation
rules, and the protocols (ports) of its collaborators. The domain layer has
NO dependencies on any framework or infrastructure.

Structure:
- entities/: Portfolio aggregate (mutable, has identity, buffers events)
- events/: Domain events (things that happened to a portfolio)
- errors/: Validation exceptions and message constants
- validators/: Pure name-rule functions
- protocols/: Repository, event bus, and logger interfaces
- types.py: Annotated Pydantic types for input models
"""
