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

from events.domain import SPORT_TYPES, ErrorCode, Failure, clean_venues
from events.handlers.responses import failure_response, result_response
from events.handlers.serializers import EventSerializer
from events.services import get_event_service, get_identity_provider


def event_payload(request: Request) -> dict:
    """Flatten the request body into a plain dict, dropping blank venues."""
    data = request.data
    if hasattr(data, "getlist"):
        payload = {key: data.get(key) for key in data.keys()}
        payload["venues"] = data.getlist("venues")
    elif isinstance(data, dict):
        payload = dict(data)
    else:
        return data
    if isinstance(payload.get("venues"), list):
        payload["venues"] = clean_venues(payload["venues"])
    return payload


def _serialize_event(event):
    return EventSerializer(event).data


def _serialize_events(events):
    return EventSerializer(events, many=True).data


class EventView(APIView):
    """Base view resolving the caller's session for each request."""

    def session(self, request: Request):
        return get_identity_provider().get_session(request)


class EventListView(EventView):
    """Handler for GET/POST /api/events"""

    def get(self, request: Request) -> Response:
        filters = {
            key: request.query_params.get(key)
            for key in ("search", "sport_type")
            if key in request.query_params
        }
        result = get_event_service().list_events(self.session(request), filters)
        return result_response(result, _serialize_events)

    def post(self, request: Request) -> Response:
        result = get_event_service().create_event(
            self.session(request), event_payload(request)
        )
        return result_response(result, _serialize_event, status.HTTP_201_CREATED)


class EventDetailView(EventView):
    """Handler for GET/PUT/DELETE /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        result = get_event_service().get_event(self.session(request), {"id": event_id})
        if result.success and result.data is None:
            return failure_response(
                Failure(error="Event not found", code=ErrorCode.EVENT_NOT_FOUND)
            )
        return result_response(result, _serialize_event)

    def put(self, request: Request, event_id: str) -> Response:
        payload = event_payload(request)
        if isinstance(payload, dict):
            payload = {**payload, "id": event_id}
        result = get_event_service().update_event(self.session(request), payload)
        return result_response(result, _serialize_event)

    def delete(self, request: Request, event_id: str) -> Response:
        result = get_event_service().delete_event(self.session(request), {"id": event_id})
        return result_response(result)


class SportTypeListView(APIView):
    """Handler for GET /api/sport-types"""

    def get(self, request: Request) -> Response:
        return Response({"success": True, "data": list(SPORT_TYPES)})
