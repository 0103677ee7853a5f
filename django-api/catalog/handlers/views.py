"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from catalog import cache
from catalog.domain.errors import EventNotFoundError, InvalidEventIdError
from catalog.handlers.serializers import EventFilterSerializer, EventSerializer
from catalog.services import CatalogService, parse_event_id
from catalog.stores import DjangoEventStore
from common.errors import ErrorCode
from common.http import error_body, error_response


def get_catalog_service() -> CatalogService:
    return CatalogService(DjangoEventStore())


class EventListView(APIView):
    """Handler for GET /api/events"""

    def get(self, request: Request) -> Response:
        filters = EventFilterSerializer(data=request.query_params)
        if not filters.is_valid():
            return Response(
                error_body(
                    ErrorCode.VALIDATION_FAILED,
                    "Invalid query parameters",
                    field_errors=filters.errors,
                ),
                status=status.HTTP_400_BAD_REQUEST,
            )
        category = filters.validated_data["category"]
        search = filters.validated_data["search"]
        service = get_catalog_service()

        def produce():
            events = service.list_events(category=category, search=search)
            return {
                "count": len(events),
                "categories": list(service.categories()),
                "results": EventSerializer(events, many=True).data,
            }

        if (not category or category == "All") and not search:
            return Response(cache.get_or_set(cache.EVENT_LIST_KEY, produce))
        return Response(produce())


class EventDetailView(APIView):
    """Handler for GET /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        service = get_catalog_service()
        try:
            parsed = parse_event_id(event_id)
            payload = cache.get_or_set(
                cache.event_detail_key(parsed),
                lambda: EventSerializer(service.get_event(parsed)).data,
            )
        except (InvalidEventIdError, EventNotFoundError) as exc:
            return error_response(exc)
        return Response(payload)
