from events.domain.errors import (
    DomainError,
    ErrorCode,
    EventNotFoundError,
    IdentityError,
    StoreError,
)
from events.domain.models import Event, EventDraft
from events.domain.result import Failure, Result, Success
from events.domain.sport_types import ALL_SPORTS, SPORT_TYPES
from events.domain.value_objects import EventId, OwnerId, Venues, clean_venues

__all__ = [
    "Event",
    "EventDraft",
    "EventId",
    "OwnerId",
    "Venues",
    "clean_venues",
    "Result",
    "Success",
    "Failure",
    "ErrorCode",
    "DomainError",
    "EventNotFoundError",
    "StoreError",
    "IdentityError",
    "SPORT_TYPES",
    "ALL_SPORTS",
]
