"""Infrastructure layer - Adapters implementing domain protocols.

Structure:
- logging/: structlog console adapter (LoggerProtocol)

Persistence and event-bus adapters are provided by the surrounding system.
The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
