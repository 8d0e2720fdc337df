# backend/system_settings/models.py
from django.conf import settings
from django.db import models


class SystemSettings(models.Model):
    """
    Platform-wide configuration. Exactly one row, pk=1, created on first read.
    auto_assignment and email_notifications are stored for the UI only.
    """
    SINGLETON_PK = 1

    max_supervision_limit = models.PositiveIntegerField(default=4)
    similarity_threshold  = models.PositiveIntegerField(default=70)
    logbook_deadline      = models.CharField(max_length=100, default="Friday 17:00")
    auto_assignment       = models.BooleanField(default=True)
    email_notifications   = models.BooleanField(default=True)
    updated_at            = models.DateTimeField(auto_now=True)
    updated_by            = models.ForeignKey(
        settings.AUTH_USER_MODEL, null=True, blank=True,
        on_delete=models.SET_NULL, related_name='+',
    )

    class Meta:
        verbose_name = 'System settings'
        verbose_name_plural = 'System settings'

    def __str__(self):
        return "System settings"

    def save(self, *args, **kwargs):
        self.pk = self.SINGLETON_PK
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ValueError("System settings cannot be deleted.")

    @classmethod
    def load(cls):
        obj, _ = cls.objects.get_or_create(pk=cls.SINGLETON_PK)
        return obj
