"""Result envelope returned by every action."""

from dataclasses import dataclass
from typing import Generic, TypeVar

from events.domain.errors import DomainError, ErrorCode

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    data: T
    success: bool = True


@dataclass(frozen=True)
class Failure:
    error: str
    code: ErrorCode = ErrorCode.UNEXPECTED_ERROR
    success: bool = False

    @classmethod
    def from_domain_error(cls, exc: DomainError) -> "Failure":
        return cls(error=exc.message, code=exc.code)


Result = Success[T] | Failure
