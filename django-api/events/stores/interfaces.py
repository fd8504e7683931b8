"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
Every read and write except get_owner is scoped to an owner.
"""

from abc import ABC, abstractmethod

from events.domain import Event, EventDraft, EventId, OwnerId


class EventStore(ABC):
    """Interface for event persistence operations.

    Implementations raise StoreError when the backing database fails.
    """

    @abstractmethod
    def insert(self, owner_id: OwnerId, draft: EventDraft) -> Event:
        """Persist a new event owned by owner_id and return it."""
        ...

    @abstractmethod
    def get_owner(self, event_id: EventId) -> OwnerId | None:
        """Return the owner of an event, or None if it does not exist."""
        ...

    @abstractmethod
    def update(
        self, event_id: EventId, owner_id: OwnerId, draft: EventDraft
    ) -> Event | None:
        """Replace all caller-supplied fields of an owned event.

        Returns None when no event matches both id and owner.
        """
        ...

    @abstractmethod
    def delete(self, event_id: EventId, owner_id: OwnerId) -> bool:
        """Hard-delete an owned event. Returns False when nothing matched."""
        ...

    @abstractmethod
    def list_events(
        self,
        owner_id: OwnerId,
        search: str | None = None,
        sport_type: str | None = None,
    ) -> list[Event]:
        """Return the owner's events ordered by date_time ascending."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId, owner_id: OwnerId) -> Event | None:
        """Return an owned event by ID, or None if not found."""
        ...
