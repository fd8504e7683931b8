"""Identity provider interface.

Credential storage, password hashing and the OAuth handshake live behind
this interface. Actions only ever see an AuthSession.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from django.http import HttpRequest


@dataclass(frozen=True)
class AuthSession:
    """Identity resolved for one request. user_id is None when signed out."""

    user_id: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.user_id)


ANONYMOUS = AuthSession()


@dataclass(frozen=True)
class IdentityUser:
    id: str
    email: str


class IdentityProvider(ABC):
    """Interface for authentication operations.

    Rejected operations raise IdentityError with a user-safe message.
    """

    @abstractmethod
    def sign_in_with_password(
        self, request: HttpRequest, email: str, password: str
    ) -> IdentityUser:
        ...

    @abstractmethod
    def sign_up(
        self, request: HttpRequest, email: str, password: str, redirect_to: str
    ) -> IdentityUser:
        """Register an unconfirmed account and send its confirmation link."""
        ...

    @abstractmethod
    def sign_in_with_oauth(
        self, request: HttpRequest, provider: str, redirect_to: str
    ) -> str:
        """Return the provider authorization URL to send the browser to."""
        ...

    @abstractmethod
    def exchange_code_for_session(
        self, request: HttpRequest, code: str, state: str | None = None
    ) -> IdentityUser:
        """Turn a callback code (OAuth or signup confirmation) into a session."""
        ...

    @abstractmethod
    def get_user(self, request: HttpRequest) -> IdentityUser | None:
        ...

    @abstractmethod
    def sign_out(self, request: HttpRequest) -> None:
        ...

    def get_session(self, request: HttpRequest) -> AuthSession:
        user = self.get_user(request)
        return AuthSession(user_id=user.id) if user else ANONYMOUS
