"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate untrusted input against a schema
- Resolve the caller from an explicit AuthSession
- Enforce ownership before touching an existing event
- Return a Result envelope, never raise

Each action runs validate -> authenticate -> authorize -> persist and stops
at the first failure.
"""

from typing import Any

from events.domain import (
    Event,
    EventDraft,
    EventId,
    EventNotFoundError,
    OwnerId,
    Result,
    Success,
    Venues,
)
from events.identity.interfaces import AuthSession
from events.services.safe_action import (
    get_authenticated_user,
    safe_action,
    validate_input,
)
from events.services.schemas import (
    EventDeleteSerializer,
    EventFilterSerializer,
    EventInputSerializer,
    EventLookupSerializer,
    EventUpdateSerializer,
)
from events.stores.interfaces import EventStore


def _draft(data: dict[str, Any]) -> EventDraft:
    return EventDraft(
        name=data["name"],
        sport_type=data["sport_type"],
        date_time=data["date_time"],
        venues=Venues.from_iterable(data["venues"]).names,
        description=data.get("description") or None,
    )


class EventService:
    """Service for a user's own sports events."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def _ensure_owner(self, event_id: EventId, owner_id: OwnerId, action: str) -> None:
        if self._store.get_owner(event_id) != owner_id:
            raise EventNotFoundError(str(event_id), action=action)

    @safe_action("create_event")
    def create_event(self, session: AuthSession, data: Any) -> Result[Event]:
        """Create an event owned by the caller.

        Owner fields in the input are ignored.
        """
        validation = validate_input(EventInputSerializer, data)
        if not validation.success:
            return validation
        auth = get_authenticated_user(session)
        if not auth.success:
            return auth

        event = self._store.insert(auth.data, _draft(validation.data))
        return Success(event)

    @safe_action("update_event")
    def update_event(self, session: AuthSession, data: Any) -> Result[Event]:
        """Replace every editable field of one of the caller's events.

        Raises nothing; a missing event and someone else's event both yield
        the same not-found failure.
        """
        validation = validate_input(EventUpdateSerializer, data)
        if not validation.success:
            return validation
        auth = get_authenticated_user(session)
        if not auth.success:
            return auth

        event_id = EventId.from_string(validation.data["id"])
        self._ensure_owner(event_id, auth.data, "edit")
        event = self._store.update(event_id, auth.data, _draft(validation.data))
        if event is None:
            raise EventNotFoundError(str(event_id), action="edit")
        return Success(event)

    @safe_action("delete_event")
    def delete_event(self, session: AuthSession, data: Any) -> Result[dict[str, str]]:
        validation = validate_input(EventDeleteSerializer, data)
        if not validation.success:
            return validation
        auth = get_authenticated_user(session)
        if not auth.success:
            return auth

        event_id = EventId.from_string(validation.data["id"])
        self._ensure_owner(event_id, auth.data, "delete")
        if not self._store.delete(event_id, auth.data):
            raise EventNotFoundError(str(event_id), action="delete")
        return Success({"id": str(event_id)})

    @safe_action("list_events")
    def list_events(self, session: AuthSession, data: Any = None) -> Result[list[Event]]:
        """Return the caller's events ordered by date_time ascending.

        search matches the name case-insensitively; sport_type "all" means
        no filter.
        """
        validation = validate_input(EventFilterSerializer, data or {})
        if not validation.success:
            return validation
        auth = get_authenticated_user(session)
        if not auth.success:
            return auth

        events = self._store.list_events(
            auth.data,
            search=validation.data.get("search"),
            sport_type=validation.data.get("sport_type"),
        )
        return Success(list(events))

    @safe_action("get_event")
    def get_event(self, session: AuthSession, data: Any) -> Result[Event | None]:
        """Return one of the caller's events, or Success(None) if there is none."""
        validation = validate_input(EventLookupSerializer, data)
        if not validation.success:
            return validation
        auth = get_authenticated_user(session)
        if not auth.success:
            return auth

        event_id = EventId.from_string(validation.data["id"])
        return Success(self._store.get_event(event_id, auth.data))
