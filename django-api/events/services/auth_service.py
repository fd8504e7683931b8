"""Sign-in, sign-up and sign-out actions."""

from typing import Any

from django.conf import settings
from django.http import HttpRequest

from events.domain import ErrorCode, Failure, IdentityError, Result, Success
from events.identity.interfaces import IdentityProvider
from events.services.safe_action import safe_action, validate_input
from events.services.schemas import SignInSerializer, SignUpSerializer

CALLBACK_PATH = "/auth/callback"


def site_url(request: HttpRequest) -> str:
    """Public origin of the site, falling back to the request's own origin."""
    configured = getattr(settings, "SITE_URL", "")
    if configured:
        return configured.rstrip("/")
    return f"{request.scheme}://{request.get_host()}"


class AuthService:
    """Service wrapping an IdentityProvider with input validation."""

    def __init__(self, identity: IdentityProvider) -> None:
        self._identity = identity

    @safe_action("sign_in")
    def sign_in(self, request: HttpRequest, data: Any) -> Result[dict[str, str]]:
        validation = validate_input(SignInSerializer, data)
        if not validation.success:
            return validation
        try:
            self._identity.sign_in_with_password(
                request, validation.data["email"], validation.data["password"]
            )
        except IdentityError as exc:
            return Failure(error=str(exc), code=ErrorCode.AUTH_ERROR)
        return Success({"redirect": settings.LOGIN_REDIRECT_URL})

    @safe_action("sign_up")
    def sign_up(self, request: HttpRequest, data: Any) -> Result[dict[str, str]]:
        validation = validate_input(SignUpSerializer, data)
        if not validation.success:
            return validation
        try:
            self._identity.sign_up(
                request,
                validation.data["email"],
                validation.data["password"],
                redirect_to=f"{site_url(request)}{CALLBACK_PATH}",
            )
        except IdentityError as exc:
            return Failure(error=str(exc), code=ErrorCode.AUTH_ERROR)
        return Success({"message": "Check your email for a confirmation link."})

    @safe_action("sign_in_with_oauth")
    def sign_in_with_oauth(self, request: HttpRequest, provider: str) -> Result[dict[str, str]]:
        try:
            url = self._identity.sign_in_with_oauth(
                request, provider, redirect_to=f"{site_url(request)}{CALLBACK_PATH}"
            )
        except IdentityError as exc:
            return Failure(error=str(exc), code=ErrorCode.AUTH_ERROR)
        return Success({"url": url})

    @safe_action("sign_out")
    def sign_out(self, request: HttpRequest) -> Result[dict[str, str]]:
        self._identity.sign_out(request)
        return Success({"redirect": settings.LOGIN_URL})
