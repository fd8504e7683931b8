"""Django ORM implementation of the EventStore."""

import logging

from django.db import DatabaseError
from django.utils import timezone

from events import models
from events.domain import Event, EventDraft, EventId, OwnerId, StoreError
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


def to_domain(row: models.Event) -> Event:
    return Event(
        id=EventId(value=row.id),
        owner_id=OwnerId(str(row.user_id)),
        name=row.name,
        sport_type=row.sport_type,
        date_time=row.date_time,
        description=row.description,
        venues=tuple(row.venues or ()),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _fields(draft: EventDraft) -> dict:
    return {
        "name": draft.name,
        "sport_type": draft.sport_type,
        "date_time": draft.date_time,
        "description": draft.description or None,
        "venues": list(draft.venues),
    }


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def insert(self, owner_id: OwnerId, draft: EventDraft) -> Event:
        try:
            row = models.Event.objects.create(user_id=owner_id.value, **_fields(draft))
        except DatabaseError as exc:
            logger.error("insert failed: %s", exc)
            raise StoreError(str(exc)) from exc
        return to_domain(row)

    def get_owner(self, event_id: EventId) -> OwnerId | None:
        try:
            user_id = (
                models.Event.objects.filter(id=event_id.value)
                .values_list("user_id", flat=True)
                .first()
            )
        except DatabaseError as exc:
            raise StoreError(str(exc)) from exc
        return OwnerId(str(user_id)) if user_id is not None else None

    def update(
        self, event_id: EventId, owner_id: OwnerId, draft: EventDraft
    ) -> Event | None:
        # Single conditional UPDATE so the ownership check and the write
        # cannot interleave with a concurrent ownership change.
        try:
            matched = models.Event.objects.filter(
                id=event_id.value, user_id=owner_id.value
            ).update(updated_at=timezone.now(), **_fields(draft))
            if not matched:
                return None
            row = models.Event.objects.get(id=event_id.value)
        except models.Event.DoesNotExist:
            return None
        except DatabaseError as exc:
            logger.error("update of %s failed: %s", event_id, exc)
            raise StoreError(str(exc)) from exc
        return to_domain(row)

    def delete(self, event_id: EventId, owner_id: OwnerId) -> bool:
        try:
            deleted, _ = models.Event.objects.filter(
                id=event_id.value, user_id=owner_id.value
            ).delete()
        except DatabaseError as exc:
            logger.error("delete of %s failed: %s", event_id, exc)
            raise StoreError(str(exc)) from exc
        return deleted > 0

    def list_events(
        self,
        owner_id: OwnerId,
        search: str | None = None,
        sport_type: str | None = None,
    ) -> list[Event]:
        queryset = models.Event.objects.filter(user_id=owner_id.value)
        if search:
            queryset = queryset.filter(name__icontains=search)
        if sport_type:
            queryset = queryset.filter(sport_type=sport_type)
        try:
            return [to_domain(row) for row in queryset.order_by("date_time", "created_at")]
        except DatabaseError as exc:
            raise StoreError(str(exc)) from exc

    def get_event(self, event_id: EventId, owner_id: OwnerId) -> Event | None:
        try:
            row = models.Event.objects.filter(
                id=event_id.value, user_id=owner_id.value
            ).first()
        except DatabaseError as exc:
            raise StoreError(str(exc)) from exc
        return to_domain(row) if row is not None else None
