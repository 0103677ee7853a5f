from catalog.services.catalog_service import CATEGORIES, CatalogService, parse_event_id

__all__ = ["CATEGORIES", "CatalogService", "parse_event_id"]
