# backend/wil_monitor/urls.py
from django.contrib import admin
from django.urls import include, path
from django.http import JsonResponse
from drf_spectacular.views import SpectacularAPIView, SpectacularRedocView, SpectacularSwaggerView
from users.views import SupervisorListView


def health_view(request):
    return JsonResponse({"status": "ok"})


urlpatterns = [
    # HEALTH
    path("health/", health_view, name="health"),

    # DJANGO ADMIN
    path("admin/", admin.site.urls),

    # API DOCS
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    path("api/redoc/", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),

    # APP APIs
    path("api/auth/", include(("users.urls", "auth"), namespace="auth")),
    path("api/supervisors", SupervisorListView.as_view(), name="supervisor_list"),
    path("api/", include([
        path("proposals", include(("proposals.urls", "proposals"), namespace="proposals")),
        path("logbooks", include(("logbooks.urls", "logbooks"), namespace="logbooks")),
        path("notifications", include(("notifications.urls", "notifications"), namespace="notifications")),
        path("settings", include(("system_settings.urls", "system_settings"), namespace="system_settings")),
        path("dashboard", include(("dashboard.urls", "dashboard"), namespace="dashboard")),
    ])),
]
