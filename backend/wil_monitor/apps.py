from django.apps import AppConfig
from django.contrib import admin


class WilMonitorConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "wil_monitor"
    verbose_name = "WIL Monitor"

    def ready(self) -> None:
        """Configure admin site when the app is ready"""
        from django.conf import settings

        admin.site.site_header = getattr(
            settings, "ADMIN_SITE_HEADER", "WIL Monitor Administration"
        )
        admin.site.site_title = getattr(
            settings, "ADMIN_SITE_TITLE", "WIL Monitor Admin"
        )
        admin.site.index_title = getattr(
            settings, "ADMIN_INDEX_TITLE", "Welcome to WIL Monitor Administration"
        )
