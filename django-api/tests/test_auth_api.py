"""Tests for the auth endpoints, the OAuth callback and AuthService.

Run with: pytest tests/test_auth_api.py -v
"""

from urllib.parse import parse_qs, urlparse

import pytest
from rest_framework.test import APIClient

from events.domain import ErrorCode
from events.handlers.auth_views import safe_next
from events.identity.interfaces import IdentityUser
from events.services.auth_service import AuthService
from tests.fakes import FakeIdentityProvider


def _login_error(response) -> str:
    location = urlparse(response["Location"])
    assert location.path == "/login"
    return parse_qs(location.query)["error"][0]


class TestAuthService:
    def test_sign_in_delegates_to_provider(self, http_request):
        identity = FakeIdentityProvider()

        result = AuthService(identity).sign_in(
            http_request, {"email": "a@example.com", "password": "secret123"}
        )

        assert result.success
        assert result.data == {"redirect": "/dashboard"}
        assert identity.calls == [("sign_in_with_password", "a@example.com", "secret123")]

    def test_sign_in_validation_short_circuits(self, http_request):
        identity = FakeIdentityProvider()

        result = AuthService(identity).sign_in(http_request, {"email": "bad", "password": "x"})

        assert result.code is ErrorCode.VALIDATION_ERROR
        assert identity.calls == []

    def test_provider_error_message_is_returned(self, http_request):
        result = AuthService(FakeIdentityProvider(error="Invalid login credentials")).sign_in(
            http_request, {"email": "a@example.com", "password": "secret123"}
        )

        assert result.code is ErrorCode.AUTH_ERROR
        assert result.error == "Invalid login credentials"

    def test_sign_up_points_confirmation_at_callback(self, http_request, settings):
        settings.SITE_URL = "https://events.example"
        identity = FakeIdentityProvider()

        result = AuthService(identity).sign_up(
            http_request,
            {"email": "a@example.com", "password": "secret123", "confirm_password": "secret123"},
        )

        assert result.data == {"message": "Check your email for a confirmation link."}
        assert identity.calls[0][-1] == "https://events.example/auth/callback"

    def test_oauth_returns_authorization_url(self, http_request):
        result = AuthService(FakeIdentityProvider()).sign_in_with_oauth(http_request, "google")

        assert result.data["url"].startswith("https://idp.example/authorize")

    def test_sign_out_redirects_to_login(self, http_request):
        identity = FakeIdentityProvider(user=IdentityUser(id="1", email="a@example.com"))

        result = AuthService(identity).sign_out(http_request)

        assert result.data == {"redirect": "/login"}
        assert identity.calls == [("sign_out",)]


class TestSafeNext:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("/events/new", "/events/new"),
            (None, "/dashboard"),
            ("", "/dashboard"),
            ("//evil.example/phish", "/dashboard"),
            ("https://evil.example/", "/dashboard"),
        ],
    )
    def test_only_local_paths(self, value, expected):
        assert safe_next(value) == expected


@pytest.mark.django_db
class TestAuthCallback:
    """Tests for GET /auth/callback"""

    def test_provider_error_redirects_to_login(self, client):
        response = client.get(
            "/auth/callback", {"error": "access_denied", "error_description": "User denied access"}
        )

        assert response.status_code == 302
        assert _login_error(response) == "User denied access"

    def test_error_without_description(self, client):
        response = client.get("/auth/callback", {"error": "access_denied"})

        assert _login_error(response) == "access_denied"

    def test_missing_code(self, client):
        assert _login_error(client.get("/auth/callback")) == "Could not authenticate user"

    def test_bad_code(self, client):
        response = client.get("/auth/callback", {"code": "not-a-real-code"})

        assert _login_error(response) == "No sign-in in progress"

    def test_confirmation_link_signs_in_and_redirects(self, client, mailoutbox):
        signup = client.post(
            "/api/auth/sign-up",
            {"email": "new@example.com", "password": "secret123", "confirm_password": "secret123"},
            content_type="application/json",
        )
        assert signup.status_code == 201
        link = next(line for line in mailoutbox[0].body.splitlines() if "code=" in line)
        code = parse_qs(urlparse(link).query)["code"][0]

        response = client.get("/auth/callback", {"code": code, "next": "/events/new"})

        assert response.status_code == 302
        assert response["Location"] == "http://testserver/events/new"
        assert client.get("/api/auth/me").json()["data"]["email"] == "new@example.com"

    def test_redirect_uses_site_url(self, client, mailoutbox, settings):
        settings.SITE_URL = "https://events.example"
        client.post(
            "/api/auth/sign-up",
            {"email": "new@example.com", "password": "secret123", "confirm_password": "secret123"},
            content_type="application/json",
        )
        link = next(line for line in mailoutbox[0].body.splitlines() if "code=" in line)
        assert link.startswith("https://events.example/auth/callback?")
        code = parse_qs(urlparse(link).query)["code"][0]

        response = client.get("/auth/callback", {"code": code})

        assert response["Location"] == "https://events.example/dashboard"


@pytest.mark.django_db
class TestAuthEndpoints:
    def test_sign_in_and_me(self, api_client, user):
        response = api_client.post(
            "/api/auth/sign-in",
            {"email": user.email, "password": "secret123"},
            format="json",
        )

        assert response.status_code == 200
        assert response.json()["data"] == {"redirect": "/dashboard"}
        me = api_client.get("/api/auth/me").json()
        assert me["data"] == {"id": str(user.pk), "email": user.email}

    def test_sign_in_wrong_password(self, api_client, user):
        response = api_client.post(
            "/api/auth/sign-in",
            {"email": user.email, "password": "not-the-password"},
            format="json",
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid login credentials"

    def test_sign_in_invalid_email(self, api_client):
        response = api_client.post(
            "/api/auth/sign-in", {"email": "nope", "password": "secret123"}, format="json"
        )

        assert response.json()["error"] == "Invalid email address"

    def test_sign_in_requires_csrf_token(self, user):
        client = APIClient(enforce_csrf_checks=True)
        credentials = {"email": user.email, "password": "secret123"}

        rejected = client.post("/api/auth/sign-in", credentials, format="json")
        assert rejected.status_code == 403
        assert client.get("/api/auth/me").status_code == 401

        token = client.cookies["csrftoken"].value
        response = client.post(
            "/api/auth/sign-in", credentials, format="json", HTTP_X_CSRFTOKEN=token
        )
        assert response.status_code == 200

    def test_sign_up_requires_csrf_token(self, mailoutbox):
        client = APIClient(enforce_csrf_checks=True)

        response = client.post(
            "/api/auth/sign-up",
            {
                "email": "new@example.com",
                "password": "secret123",
                "confirm_password": "secret123",
            },
            format="json",
        )

        assert response.status_code == 403
        assert mailoutbox == []

    def test_me_when_signed_out(self, api_client):
        assert api_client.get("/api/auth/me").status_code == 401

    def test_sign_out(self, auth_client):
        response = auth_client.post("/api/auth/sign-out")

        assert response.json()["data"] == {"redirect": "/login"}
        assert auth_client.get("/api/auth/me").status_code == 401

    def test_oauth_redirects_to_provider(self, api_client, settings):
        settings.OAUTH_PROVIDERS = {
            "google": {
                "client_id": "client-123",
                "authorize_url": "https://idp.example/authorize",
                "token_url": "https://idp.example/token",
                "userinfo_url": "https://idp.example/userinfo",
            }
        }

        response = api_client.get("/api/auth/oauth/google")

        assert response.status_code == 302
        assert response["Location"].startswith("https://idp.example/authorize?")

    def test_oauth_unconfigured_provider_redirects_to_login(self, api_client, settings):
        settings.OAUTH_PROVIDERS = {}

        response = api_client.get("/api/auth/oauth/google")

        assert _login_error(response) == "Unsupported provider: google"
