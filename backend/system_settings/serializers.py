# backend/system_settings/serializers.py
from rest_framework import serializers

from .models import SystemSettings


class SystemSettingsSerializer(serializers.ModelSerializer):
    maxSupervisionLimit = serializers.IntegerField(source='max_supervision_limit', min_value=1)
    similarityThreshold = serializers.IntegerField(source='similarity_threshold', min_value=0, max_value=100)
    logbookDeadline = serializers.CharField(source='logbook_deadline', max_length=100)
    autoAssignment = serializers.BooleanField(source='auto_assignment')
    emailNotifications = serializers.BooleanField(source='email_notifications')
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = SystemSettings
        fields = [
            'maxSupervisionLimit', 'similarityThreshold', 'logbookDeadline',
            'autoAssignment', 'emailNotifications', 'updatedAt',
        ]
