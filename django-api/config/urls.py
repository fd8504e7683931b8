from django.contrib import admin
from django.urls import include, path

from events.handlers import auth_callback

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/", include("events.urls")),
    path("auth/callback", auth_callback, name="auth-callback"),
]
