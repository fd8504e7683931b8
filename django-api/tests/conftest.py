"""Pytest configuration and shared fixtures."""

from datetime import datetime, timezone

import pytest
from django.contrib.auth.models import AnonymousUser
from django.contrib.sessions.middleware import SessionMiddleware
from rest_framework.test import APIClient

from events.identity.interfaces import AuthSession
from events.services.event_service import EventService
from tests.fakes import InMemoryEventStore


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def service(store) -> EventService:
    return EventService(store)


@pytest.fixture
def alice() -> AuthSession:
    return AuthSession(user_id="alice")


@pytest.fixture
def bob() -> AuthSession:
    return AuthSession(user_id="bob")


@pytest.fixture
def event_input() -> dict:
    return {
        "name": "City Marathon",
        "sport_type": "Athletics",
        "date_time": "2025-06-01T09:00:00Z",
        "description": "Annual run through downtown",
        "venues": ["Main Square", "Riverside Park"],
    }


@pytest.fixture
def june_first() -> datetime:
    return datetime(2025, 6, 1, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def http_request(rf):
    """A bare Django request with a working session and no user."""
    request = rf.get("/")
    SessionMiddleware(lambda r: None).process_request(request)
    request.user = AnonymousUser()
    return request


@pytest.fixture
def user(django_user_model):
    return django_user_model.objects.create_user(
        username="alice@example.com", email="alice@example.com", password="secret123"
    )


@pytest.fixture
def other_user(django_user_model):
    return django_user_model.objects.create_user(
        username="bob@example.com", email="bob@example.com", password="secret123"
    )


@pytest.fixture
def auth_client(api_client, user) -> APIClient:
    api_client.force_login(user)
    return api_client
