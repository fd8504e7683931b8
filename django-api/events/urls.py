from django.urls import path

from events.handlers import (
    CurrentUserView,
    EventDetailView,
    EventListView,
    OAuthSignInView,
    SignInView,
    SignOutView,
    SignUpView,
    SportTypeListView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path("sport-types", SportTypeListView.as_view(), name="sport-type-list"),
    path("auth/sign-in", SignInView.as_view(), name="auth-sign-in"),
    path("auth/sign-up", SignUpView.as_view(), name="auth-sign-up"),
    path("auth/sign-out", SignOutView.as_view(), name="auth-sign-out"),
    path("auth/oauth/<str:provider>", OAuthSignInView.as_view(), name="auth-oauth"),
    path("auth/me", CurrentUserView.as_view(), name="auth-me"),
]
