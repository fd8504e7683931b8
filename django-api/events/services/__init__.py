"""Service wiring.

Stores and identity providers are configured by dotted path in settings so
tests and deployments can swap them.
"""

from django.conf import settings
from django.utils.module_loading import import_string

from events.identity.interfaces import IdentityProvider
from events.services.auth_service import AuthService
from events.services.event_service import EventService
from events.stores.interfaces import EventStore


def get_event_store() -> EventStore:
    return import_string(settings.EVENTS_STORE_CLASS)()


def get_identity_provider() -> IdentityProvider:
    return import_string(settings.EVENTS_IDENTITY_PROVIDER_CLASS)()


def get_event_service() -> EventService:
    return EventService(get_event_store())


def get_auth_service() -> AuthService:
    return AuthService(get_identity_provider())


__all__ = [
    "AuthService",
    "EventService",
    "get_auth_service",
    "get_event_service",
    "get_event_store",
    "get_identity_provider",
]
