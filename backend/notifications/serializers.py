# backend/notifications/serializers.py
from django.contrib.auth import get_user_model
from rest_framework import serializers

from .models import Notification, NotificationType

User = get_user_model()


class NotificationSerializer(serializers.ModelSerializer):
    toUid = serializers.IntegerField(source='to_user_id', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Notification
        fields = ['id', 'toUid', 'title', 'message', 'type', 'read', 'createdAt']
        read_only_fields = fields


class NotificationCreateSerializer(serializers.Serializer):
    toUid = serializers.PrimaryKeyRelatedField(queryset=User.objects.all())
    title = serializers.CharField(max_length=200)
    message = serializers.CharField()
    type = serializers.ChoiceField(choices=NotificationType.choices, default=NotificationType.INFO)
