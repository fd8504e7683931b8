from events.handlers.auth_views import (
    CurrentUserView,
    OAuthSignInView,
    SignInView,
    SignOutView,
    SignUpView,
    auth_callback,
)
from events.handlers.views import (
    EventDetailView,
    EventListView,
    SportTypeListView,
)

__all__ = [
    "EventListView",
    "EventDetailView",
    "SportTypeListView",
    "SignInView",
    "SignUpView",
    "SignOutView",
    "OAuthSignInView",
    "CurrentUserView",
    "auth_callback",
]
