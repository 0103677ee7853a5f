"""Cache keys for catalog responses."""

from django.conf import settings
from django.core.cache import cache

EVENT_LIST_KEY = "catalog:events:list"


def event_detail_key(event_id) -> str:
    return f"catalog:events:{event_id}"


def get_or_set(key: str, producer):
    """Return the cached payload for ``key``, computing and storing it on a miss."""
    payload = cache.get(key)
    if payload is None:
        payload = producer()
        cache.set(key, payload, timeout=settings.CATALOG_CACHE_TIMEOUT)
    return payload


def invalidate_event(event_id) -> None:
    cache.delete_many([EVENT_LIST_KEY, event_detail_key(event_id)])
