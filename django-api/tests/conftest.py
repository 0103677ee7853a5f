"""Pytest configuration and shared fixtures."""

from datetime import date, time
from decimal import Decimal
from uuid import UUID

import pytest
from rest_framework.test import APIClient

from catalog.domain import Capacity, Event, EventId, Money, TicketType, TicketTypeId
from catalog.stores import InMemoryEventStore

TECH_CONFERENCE_ID = UUID("5b1f7a52-2f0e-4a86-9d59-0d6a4c1e2b10")


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture(autouse=True)
def instant_payments(settings):
    """Approve every simulated payment immediately unless a test says otherwise."""
    settings.SIMULATED_PAYMENT_SUCCESS_RATE = 1.0
    settings.SIMULATED_PAYMENT_DELAY = 0.0
    settings.CHECKOUT_AUTHORIZATION_TIMEOUT = 5.0


def make_event(
    event_id: UUID = TECH_CONFERENCE_ID,
    title: str = "Tech Conference 2023",
    category: str = "Technology",
    total_tickets: int = 1000,
    ticket_types: tuple[TicketType, ...] | None = None,
    **overrides,
) -> Event:
    if ticket_types is None:
        ticket_types = (
            TicketType(
                id=TicketTypeId("standard"),
                name="Standard Pass",
                price=Money(Decimal("299.99")),
                description="Access to all sessions and exhibitions",
            ),
            TicketType(
                id=TicketTypeId("premium"),
                name="Premium Pass",
                price=Money(Decimal("499.99")),
            ),
        )
    fields = dict(
        id=EventId(value=event_id),
        title=title,
        description="Join industry leaders and innovators for a two-day conference.",
        category=category,
        date=date(2023, 8, 10),
        start_time=time(9, 0),
        end_time=time(17, 0),
        location="Convention Center, San Francisco",
        organizer="FutureTech Inc.",
        total_tickets=Capacity(total_tickets),
        ticket_types=ticket_types,
    )
    fields.update(overrides)
    return Event(**fields)


@pytest.fixture
def event_factory():
    return make_event


@pytest.fixture
def tech_conference() -> Event:
    return make_event()


@pytest.fixture
def event_store(tech_conference) -> InMemoryEventStore:
    return InMemoryEventStore([tech_conference])


@pytest.fixture
def db_event(db):
    """Persisted Tech Conference with a standard and a premium ticket type."""
    from catalog.models import Event as EventRow, TicketType as TicketTypeRow

    event = EventRow.objects.create(
        id=TECH_CONFERENCE_ID,
        title="Tech Conference 2023",
        description="Join industry leaders and innovators for a two-day conference.",
        category="Technology",
        date=date(2023, 8, 10),
        start_time=time(9, 0),
        end_time=time(17, 0),
        location="Convention Center, San Francisco",
        organizer="FutureTech Inc.",
        total_tickets=1000,
    )
    TicketTypeRow.objects.create(
        event=event, code="standard", name="Standard Pass", price=Decimal("299.99"), position=0
    )
    TicketTypeRow.objects.create(
        event=event, code="premium", name="Premium Pass", price=Decimal("499.99"), position=1
    )
    return event
