"""Application layer - Use cases and orchestration.

Structure:
- commands/: Command dataclasses and handlers (write operations)
- events/: Dispatch of buffered portfolio events to the event bus

The application layer orchestrates domain logic but contains no business rules.
"""
