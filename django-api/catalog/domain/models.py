"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in catalog/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import date, time

from catalog.domain.value_objects import Capacity, EventId, Money, TicketTypeId


@dataclass(frozen=True)
class TicketType:
    """Domain representation of a TicketType."""

    id: TicketTypeId
    name: str
    price: Money
    description: str = ""


@dataclass(frozen=True)
class Event:
    """Domain representation of a published Event."""

    id: EventId
    title: str
    description: str
    category: str
    date: date
    start_time: time
    end_time: time
    location: str
    organizer: str
    total_tickets: Capacity
    ticket_types: tuple[TicketType, ...] = ()
    image_url: str | None = None

    def find_ticket_type(self, ticket_type_id: str) -> TicketType | None:
        for ticket_type in self.ticket_types:
            if ticket_type.id.value == ticket_type_id:
                return ticket_type
        return None

    def matches(self, category: str | None, search: str | None) -> bool:
        """Apply the storefront listing filter to this event."""
        if category and category != "All" and self.category != category:
            return False
        if search:
            needle = search.lower()
            return any(
                needle in field.lower()
                for field in (self.title, self.description, self.location)
            )
        return True
