from catalog.stores.django_store import DjangoEventStore
from catalog.stores.interfaces import EventStore
from catalog.stores.memory_store import InMemoryEventStore

__all__ = ["EventStore", "DjangoEventStore", "InMemoryEventStore"]
