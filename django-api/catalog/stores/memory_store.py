"""In-memory EventStore used by unit tests and local wiring."""

from collections.abc import Iterable

from catalog.domain import Event, EventId
from catalog.stores.interfaces import EventStore


class InMemoryEventStore(EventStore):
    def __init__(self, events: Iterable[Event] = ()) -> None:
        self._events: dict[EventId, Event] = {event.id: event for event in events}

    def add(self, event: Event) -> None:
        self._events[event.id] = event

    def list_events(self) -> list[Event]:
        return sorted(self._events.values(), key=lambda e: (e.date, e.title))

    def get_event(self, event_id: EventId) -> Event | None:
        return self._events.get(event_id)
