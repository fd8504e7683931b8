"""HTTP handlers for sign-in, sign-up, OAuth and the auth callback."""

import logging
from urllib.parse import urlencode

from django.conf import settings
from django.http import HttpRequest, HttpResponseRedirect
from django.utils.decorators import method_decorator
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.csrf import csrf_protect, ensure_csrf_cookie
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.domain import IdentityError
from events.domain.errors import UNAUTHORIZED_MESSAGE
from events.handlers.responses import result_response
from events.handlers.serializers import IdentityUserSerializer
from events.services import get_auth_service, get_identity_provider
from events.services.auth_service import site_url

logger = logging.getLogger(__name__)

CALLBACK_FALLBACK_ERROR = "Could not authenticate user"


def login_redirect(request: HttpRequest, message: str) -> HttpResponseRedirect:
    origin = f"{request.scheme}://{request.get_host()}"
    return HttpResponseRedirect(
        f"{origin}{settings.LOGIN_URL}?{urlencode({'error': message})}"
    )


def safe_next(value: str | None) -> str:
    """Only same-site paths are accepted as post-login targets."""
    if (
        value
        and value.startswith("/")
        and url_has_allowed_host_and_scheme(value, allowed_hosts=set())
    ):
        return value
    return settings.LOGIN_REDIRECT_URL


@method_decorator(csrf_protect, name="dispatch")
class SignInView(APIView):
    """Handler for POST /api/auth/sign-in

    DRF only checks CSRF for authenticated sessions, so anonymous sign-in
    and sign-up are protected explicitly.
    """

    def post(self, request: Request) -> Response:
        return result_response(get_auth_service().sign_in(request, request.data))


@method_decorator(csrf_protect, name="dispatch")
class SignUpView(APIView):
    """Handler for POST /api/auth/sign-up"""

    def post(self, request: Request) -> Response:
        result = get_auth_service().sign_up(request, request.data)
        return result_response(result, status_code=status.HTTP_201_CREATED)


class SignOutView(APIView):
    """Handler for POST /api/auth/sign-out"""

    def post(self, request: Request) -> Response:
        return result_response(get_auth_service().sign_out(request))


class OAuthSignInView(APIView):
    """Handler for GET /api/auth/oauth/{provider}"""

    def get(self, request: Request, provider: str):
        result = get_auth_service().sign_in_with_oauth(request, provider)
        if not result.success:
            return login_redirect(request, result.error)
        return HttpResponseRedirect(result.data["url"])


@method_decorator(ensure_csrf_cookie, name="dispatch")
class CurrentUserView(APIView):
    """Handler for GET /api/auth/me (also issues the CSRF cookie)"""

    def get(self, request: Request) -> Response:
        user = get_identity_provider().get_user(request)
        if user is None:
            return Response(
                {"success": False, "error": UNAUTHORIZED_MESSAGE, "code": "UNAUTHORIZED"},
                status=status.HTTP_401_UNAUTHORIZED,
            )
        return Response({"success": True, "data": IdentityUserSerializer(user).data})


def auth_callback(request: HttpRequest) -> HttpResponseRedirect:
    """Handler for GET /auth/callback (OAuth and signup confirmation links)."""
    error = request.GET.get("error")
    if error:
        description = request.GET.get("error_description")
        logger.error("OAuth error: %s %s", error, description or "")
        return login_redirect(request, description or error)

    code = request.GET.get("code")
    if not code:
        return login_redirect(request, CALLBACK_FALLBACK_ERROR)

    try:
        get_identity_provider().exchange_code_for_session(
            request, code, state=request.GET.get("state")
        )
    except IdentityError as exc:
        logger.error("Session exchange error: %s", exc)
        return login_redirect(request, str(exc))

    return HttpResponseRedirect(f"{site_url(request)}{safe_next(request.GET.get('next'))}")
