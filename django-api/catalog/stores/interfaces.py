"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from catalog.domain import Event, EventId


class EventStore(ABC):
    """Interface for event catalog read operations."""

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all published events ordered by date ascending."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event with its ticket types, or None if not found."""
        ...
