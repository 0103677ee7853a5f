"""Unit tests for CatalogService.

These test filtering and domain error mapping.
Run with: pytest tests/test_services.py -v
"""

from uuid import UUID

import pytest

from catalog.domain.errors import EventNotFoundError, InvalidEventIdError
from catalog.services import CATEGORIES, CatalogService
from catalog.stores import EventStore, InMemoryEventStore


@pytest.fixture
def catalog(event_factory) -> CatalogService:
    return CatalogService(
        InMemoryEventStore(
            [
                event_factory(),
                event_factory(
                    event_id=UUID("0c3c2a8e-6ff4-4c0a-9a3c-7e0d6a8c9b01"),
                    title="Summer Music Festival",
                    category="Music",
                    description="Three days of live performances.",
                    location="Central Park, New York",
                ),
            ]
        )
    )


class TestListEvents:
    def test_no_filter_returns_all(self, catalog):
        assert len(catalog.list_events()) == 2

    def test_all_category_is_no_filter(self, catalog):
        assert len(catalog.list_events(category="All")) == 2

    def test_category_is_exact_match(self, catalog):
        events = catalog.list_events(category="Music")
        assert [e.title for e in events] == ["Summer Music Festival"]
        assert catalog.list_events(category="music") == []

    def test_search_is_case_insensitive_on_title(self, catalog):
        assert [e.title for e in catalog.list_events(search="TECH")] == [
            "Tech Conference 2023"
        ]

    def test_search_matches_location_and_description(self, catalog):
        assert [e.title for e in catalog.list_events(search="new york")] == [
            "Summer Music Festival"
        ]
        assert [e.title for e in catalog.list_events(search="live perf")] == [
            "Summer Music Festival"
        ]

    def test_category_and_search_combine(self, catalog):
        assert catalog.list_events(category="Technology", search="music") == []

    def test_categories(self, catalog):
        assert catalog.categories() == CATEGORIES
        assert catalog.categories()[0] == "All"


class TestGetEvent:
    """Tests for CatalogService.get_event."""

    def test_get_event_returns_event(self, catalog, tech_conference):
        assert catalog.get_event(str(tech_conference.id)) == tech_conference

    def test_get_event_invalid_id_raises_error(self, catalog):
        with pytest.raises(InvalidEventIdError):
            catalog.get_event("42")

    def test_get_event_not_found_raises_error(self, catalog):
        with pytest.raises(EventNotFoundError):
            catalog.get_event("9f0e8d7c-6b5a-4938-8271-605f4e3d2c1b")


class TestEventStoreInterface:
    def test_stores_implement_only_the_catalog_reads(self):
        assert EventStore.__abstractmethods__ == {"list_events", "get_event"}
