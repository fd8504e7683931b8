"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self
from uuid import UUID


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID

    @classmethod
    def from_string(cls, value: str | UUID) -> Self:
        return cls(value=UUID(str(value)))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class OwnerId:
    """Identifier of the user that owns an Event."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("Owner id cannot be empty")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Venues:
    """Ordered, non-empty sequence of venue names."""

    names: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.names:
            raise ValueError("At least one venue is required")
        if any(not name for name in self.names):
            raise ValueError("Venue cannot be empty")

    @classmethod
    def from_iterable(cls, values) -> Self:
        return cls(names=tuple(values))


def clean_venues(values) -> list[str]:
    """Drop blank venue entries, keeping order and the kept entries as given."""
    return [v for v in values or [] if isinstance(v, str) and v.strip()]
