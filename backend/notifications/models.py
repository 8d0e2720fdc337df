# backend/notifications/models.py
from django.conf import settings
from django.db import models
from django.utils import timezone


class NotificationType(models.TextChoices):
    INFO = 'info', 'Info'
    SUCCESS = 'success', 'Success'
    DANGER = 'danger', 'Danger'


class Notification(models.Model):
    """An inbox message for one user. Only the read flag ever changes."""
    to_user    = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='notifications')
    title      = models.CharField(max_length=200)
    message    = models.TextField()
    type       = models.CharField(max_length=10, choices=NotificationType.choices, default=NotificationType.INFO)
    read       = models.BooleanField(default=False)
    created_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        ordering = ['-created_at', '-id']
        indexes = [models.Index(fields=['to_user', 'read'], name='notification_inbox_idx')]

    def __str__(self):
        return f"[{self.type}] {self.title} -> {self.to_user_id}"
