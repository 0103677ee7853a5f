from catalog.domain.models import Event, TicketType
from catalog.domain.value_objects import Capacity, EventId, Money, TicketTypeId

__all__ = [
    "Event",
    "TicketType",
    "EventId",
    "TicketTypeId",
    "Money",
    "Capacity",
]
