"""Catalog service - all catalog business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

from catalog.domain import Event, EventId
from catalog.domain.errors import EventNotFoundError, InvalidEventIdError
from catalog.stores.interfaces import EventStore

CATEGORIES = (
    "All",
    "Music",
    "Technology",
    "Food",
    "Art",
    "Sports",
    "Entertainment",
    "Business",
    "Education",
)


def parse_event_id(event_id: str | EventId) -> EventId:
    """Parse an event id, raising InvalidEventIdError on malformed input."""
    if isinstance(event_id, EventId):
        return event_id
    try:
        return EventId.from_string(event_id)
    except (TypeError, ValueError, AttributeError):
        raise InvalidEventIdError() from None


class CatalogService:
    """Service for event catalog operations."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def categories(self) -> tuple[str, ...]:
        return CATEGORIES

    def list_events(
        self, category: str | None = None, search: str | None = None
    ) -> list[Event]:
        """Return events matching the category and free-text search.

        Category is an exact match unless it is empty or "All". Search is a
        case-insensitive substring match on title, description and location.
        """
        search = (search or "").strip()
        return [
            event
            for event in self._store.list_events()
            if event.matches(category, search)
        ]

    def get_event(self, event_id: str | EventId) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        parsed = parse_event_id(event_id)
        event = self._store.get_event(parsed)
        if event is None:
            raise EventNotFoundError(str(event_id))
        return event
