"""Identity provider backed by django.contrib.auth.

Password accounts are confirmed by email before they can sign in. OAuth uses
the authorization-code flow against the providers configured in
settings.OAUTH_PROVIDERS.
"""

import logging
import secrets
from urllib.parse import urlencode

import requests
from django.conf import settings
from django.contrib.auth import authenticate, get_user_model, login, logout
from django.core import signing
from django.core.mail import send_mail
from django.http import HttpRequest

from events.domain import IdentityError
from events.identity.interfaces import IdentityProvider, IdentityUser

logger = logging.getLogger(__name__)

CONFIRMATION_SALT = "events.identity.signup-confirmation"
OAUTH_SESSION_KEY = "events_oauth_pending"
MODEL_BACKEND = "django.contrib.auth.backends.ModelBackend"


def _to_identity(user) -> IdentityUser:
    return IdentityUser(id=str(user.pk), email=user.email)


class DjangoIdentityProvider(IdentityProvider):
    """Session-based identity using Django's user model."""

    def __init__(
        self,
        providers: dict | None = None,
        http=requests,
        timeout: float | None = None,
        confirmation_max_age: int | None = None,
    ) -> None:
        self._providers = settings.OAUTH_PROVIDERS if providers is None else providers
        self._http = http
        self._timeout = settings.OAUTH_HTTP_TIMEOUT if timeout is None else timeout
        self._max_age = (
            settings.SIGNUP_CONFIRMATION_MAX_AGE
            if confirmation_max_age is None
            else confirmation_max_age
        )

    def sign_in_with_password(
        self, request: HttpRequest, email: str, password: str
    ) -> IdentityUser:
        account = get_user_model().objects.filter(email__iexact=email).first()
        if account is None:
            raise IdentityError("Invalid login credentials")

        user = authenticate(request, username=account.get_username(), password=password)
        if user is None:
            if not account.is_active and account.check_password(password):
                raise IdentityError("Email not confirmed")
            raise IdentityError("Invalid login credentials")

        login(request, user)
        return _to_identity(user)

    def sign_up(
        self, request: HttpRequest, email: str, password: str, redirect_to: str
    ) -> IdentityUser:
        """Register an account, or re-send the link for one never confirmed.

        Signing up again with an unconfirmed email replaces its password and
        issues a fresh confirmation code.
        """
        email = email.strip().lower()
        user_model = get_user_model()
        user = user_model.objects.filter(email__iexact=email).first()
        created = user is None
        if created:
            user = user_model.objects.create_user(
                username=email, email=email, password=password, is_active=False
            )
        elif user.is_active:
            raise IdentityError("User already registered")
        else:
            user.set_password(password)
            user.save(update_fields=["password"])

        code = signing.dumps({"uid": user.pk}, salt=CONFIRMATION_SALT)
        link = f"{redirect_to}?{urlencode({'code': code})}"
        try:
            send_mail(
                "Confirm your signup",
                f"Follow this link to confirm your account:\n\n{link}\n",
                None,
                [email],
            )
        except OSError as exc:
            logger.error("confirmation email to %s failed: %s", email, exc)
            if created:
                user.delete()
            raise IdentityError("Error sending confirmation email") from exc
        return _to_identity(user)

    def sign_in_with_oauth(
        self, request: HttpRequest, provider: str, redirect_to: str
    ) -> str:
        config = self._providers.get(provider)
        if not config or not config.get("client_id"):
            raise IdentityError(f"Unsupported provider: {provider}")

        state = secrets.token_urlsafe(32)
        request.session[OAUTH_SESSION_KEY] = {
            "provider": provider,
            "state": state,
            "redirect_to": redirect_to,
        }
        params = {
            "client_id": config["client_id"],
            "redirect_uri": redirect_to,
            "response_type": "code",
            "scope": config.get("scope", "openid email profile"),
            "state": state,
            **config.get("extra_params", {}),
        }
        return f"{config['authorize_url']}?{urlencode(params)}"

    def exchange_code_for_session(
        self, request: HttpRequest, code: str, state: str | None = None
    ) -> IdentityUser:
        user = self._confirm_signup(request, code)
        if user is not None:
            return user
        return self._complete_oauth(request, code, state)

    def get_user(self, request: HttpRequest) -> IdentityUser | None:
        user = getattr(request, "user", None)
        if user is None or not user.is_authenticated:
            return None
        return _to_identity(user)

    def sign_out(self, request: HttpRequest) -> None:
        logout(request)

    def _confirm_signup(self, request: HttpRequest, code: str) -> IdentityUser | None:
        try:
            payload = signing.loads(code, salt=CONFIRMATION_SALT, max_age=self._max_age)
        except signing.SignatureExpired as exc:
            raise IdentityError("Email link is invalid or has expired") from exc
        except signing.BadSignature:
            return None

        user = get_user_model().objects.filter(pk=payload.get("uid")).first()
        if user is None:
            raise IdentityError("Email link is invalid or has expired")
        if not user.is_active:
            user.is_active = True
            user.save(update_fields=["is_active"])
        login(request, user, backend=MODEL_BACKEND)
        return _to_identity(user)

    def _complete_oauth(
        self, request: HttpRequest, code: str, state: str | None
    ) -> IdentityUser:
        pending = request.session.pop(OAUTH_SESSION_KEY, None)
        if not pending:
            raise IdentityError("No sign-in in progress")
        if state != pending["state"]:
            raise IdentityError("Invalid OAuth state")

        config = self._providers.get(pending["provider"])
        if not config:
            raise IdentityError(f"Unsupported provider: {pending['provider']}")

        try:
            token_response = self._http.post(
                config["token_url"],
                data={
                    "grant_type": "authorization_code",
                    "code": code,
                    "redirect_uri": pending["redirect_to"],
                    "client_id": config["client_id"],
                    "client_secret": config.get("client_secret", ""),
                },
                headers={"Accept": "application/json"},
                timeout=self._timeout,
            )
            token_response.raise_for_status()
            access_token = token_response.json().get("access_token")
            if not access_token:
                raise IdentityError("OAuth provider did not return an access token")

            profile_response = self._http.get(
                config["userinfo_url"],
                headers={"Authorization": f"Bearer {access_token}"},
                timeout=self._timeout,
            )
            profile_response.raise_for_status()
            profile = profile_response.json()
        except requests.RequestException as exc:
            logger.error("OAuth exchange with %s failed: %s", pending["provider"], exc)
            raise IdentityError("Unable to exchange authorization code") from exc

        email = (profile.get("email") or "").strip().lower()
        if not email or profile.get("email_verified") is False:
            raise IdentityError("OAuth provider did not return a verified email")

        user = self._get_or_create_oauth_user(email)
        login(request, user, backend=MODEL_BACKEND)
        return _to_identity(user)

    def _get_or_create_oauth_user(self, email: str):
        user_model = get_user_model()
        user = user_model.objects.filter(email__iexact=email).first()
        if user is None:
            user = user_model(username=email, email=email, is_active=True)
            user.set_unusable_password()
            user.save()
        elif not user.is_active:
            user.is_active = True
            user.save(update_fields=["is_active"])
        return user
