"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    UNAUTHORIZED = "UNAUTHORIZED"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    STORE_ERROR = "STORE_ERROR"
    AUTH_ERROR = "AUTH_ERROR"
    UNEXPECTED_ERROR = "UNEXPECTED_ERROR"


UNAUTHORIZED_MESSAGE = "Unauthorized. Please sign in."
UNEXPECTED_MESSAGE = "An unexpected error occurred"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is missing or owned by someone else.

    The two cases share one message so callers cannot probe for other
    users' events.
    """

    def __init__(self, event_id: str, action: str = "access") -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message=f"Event not found or you don't have permission to {action} it",
        )
        object.__setattr__(self, "event_id", event_id)


class StoreError(Exception):
    """Raised by stores when the backing database fails."""


class IdentityError(Exception):
    """Raised by identity providers when an auth operation is rejected."""
