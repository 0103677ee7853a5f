from catalog.handlers.views import EventDetailView, EventListView

__all__ = ["EventDetailView", "EventListView"]
