# backend/notifications/services.py
import logging

from rest_framework.exceptions import PermissionDenied

from .models import Notification, NotificationType

logger = logging.getLogger(__name__)


def notify(to_user, title, message, type=NotificationType.INFO):
    """Drop a message into ``to_user``'s inbox."""
    n = Notification.objects.create(to_user=to_user, title=title, message=message, type=type)
    logger.info("Notified user %s [%s]: %s", n.to_user_id, n.type, n.title)
    return n


def mark_read(notification, user_id):
    """Recipient-only; marking an already read message is a no-op."""
    if notification.to_user_id != user_id:
        raise PermissionDenied("You can only mark your own notifications as read.")
    if not notification.read:
        notification.read = True
        notification.save(update_fields=['read'])
    return notification


def unread_count(user_id):
    return Notification.objects.filter(to_user_id=user_id, read=False).count()
