"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

from events.domain.value_objects import EventId, OwnerId


@dataclass(frozen=True)
class EventDraft:
    """Caller-supplied fields of an Event, used for create and update."""

    name: str
    sport_type: str
    date_time: datetime
    venues: tuple[str, ...]
    description: str | None = None


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    owner_id: OwnerId
    name: str
    sport_type: str
    date_time: datetime
    description: str | None
    venues: tuple[str, ...]
    created_at: datetime
    updated_at: datetime
