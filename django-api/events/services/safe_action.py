"""Schema validation, identity resolution and error capture shared by every action."""

import functools
import logging
from collections.abc import Callable, Mapping
from typing import Any

from rest_framework import serializers

from events.domain import DomainError, ErrorCode, Failure, OwnerId, Result, StoreError, Success
from events.domain.errors import UNAUTHORIZED_MESSAGE, UNEXPECTED_MESSAGE
from events.identity.interfaces import AuthSession

logger = logging.getLogger(__name__)


def first_error(errors: Any) -> str:
    """Return the first message from a (possibly nested) DRF error structure."""
    if isinstance(errors, Mapping):
        for value in errors.values():
            message = first_error(value)
            if message:
                return message
        return ""
    if isinstance(errors, (list, tuple)):
        for value in errors:
            message = first_error(value)
            if message:
                return message
        return ""
    return str(errors)


def validate_input(
    schema: type[serializers.Serializer], data: Any
) -> Result[dict[str, Any]]:
    """Validate untrusted input against a schema.

    Returns Success with the coerced data, or Failure carrying the message of
    the first violated constraint.
    """
    serializer = schema(data=data)
    if not serializer.is_valid():
        return Failure(
            error=first_error(serializer.errors) or "Invalid input",
            code=ErrorCode.VALIDATION_ERROR,
        )
    return Success(dict(serializer.validated_data))


def get_authenticated_user(session: AuthSession | None) -> Result[OwnerId]:
    """Resolve the caller's identity. Absence of a session is not an error."""
    if session is None or not session.is_authenticated:
        return Failure(error=UNAUTHORIZED_MESSAGE, code=ErrorCode.UNAUTHORIZED)
    return Success(OwnerId(session.user_id))


def safe_action(name: str) -> Callable[[Callable[..., Result]], Callable[..., Result]]:
    """Convert every error raised inside an action into a Failure.

    Store errors keep their message verbatim; anything else is logged and
    reported with its message, or a generic one when it has none.
    """

    def decorator(func: Callable[..., Result]) -> Callable[..., Result]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Result:
            try:
                return func(*args, **kwargs)
            except DomainError as exc:
                return Failure.from_domain_error(exc)
            except StoreError as exc:
                logger.error("%s failed in store: %s", name, exc)
                return Failure(error=str(exc) or UNEXPECTED_MESSAGE, code=ErrorCode.STORE_ERROR)
            except Exception as exc:
                logger.exception("%s failed", name)
                return Failure(
                    error=str(exc) or UNEXPECTED_MESSAGE,
                    code=ErrorCode.UNEXPECTED_ERROR,
                )

        return wrapper

    return decorator
