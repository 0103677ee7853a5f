"""Django ORM implementation of the EventStore."""

from catalog import models
from catalog.domain import Capacity, Event, EventId, Money, TicketType, TicketTypeId
from catalog.stores.interfaces import EventStore


def to_domain(row: models.Event) -> Event:
    """Convert an ORM event (with prefetched ticket types) to a domain Event."""
    return Event(
        id=EventId(value=row.id),
        title=row.title,
        description=row.description,
        category=row.category,
        date=row.date,
        start_time=row.start_time,
        end_time=row.end_time,
        location=row.location,
        organizer=row.organizer,
        total_tickets=Capacity(row.total_tickets),
        ticket_types=tuple(
            TicketType(
                id=TicketTypeId(tt.code),
                name=tt.name,
                price=Money(tt.price),
                description=tt.description,
            )
            for tt in row.ticket_types.all()
        ),
        image_url=row.image_url or None,
    )


class DjangoEventStore(EventStore):
    """Database-backed event store using Django ORM."""

    def _queryset(self):
        return models.Event.objects.prefetch_related("ticket_types")

    def list_events(self) -> list[Event]:
        return [to_domain(row) for row in self._queryset()]

    def get_event(self, event_id: EventId) -> Event | None:
        row = self._queryset().filter(pk=event_id.value).first()
        if row is None:
            return None
        return to_domain(row)
