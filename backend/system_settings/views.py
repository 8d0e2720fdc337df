# backend/system_settings/views.py
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema, OpenApiExample
import logging

from users.permissions import CoordinatorWritesOnly
from .models import SystemSettings
from .serializers import SystemSettingsSerializer

logger = logging.getLogger(__name__)


class SystemSettingsView(APIView):
    permission_classes = [CoordinatorWritesOnly]

    @extend_schema(responses={200: SystemSettingsSerializer},
                   description="Current platform settings; defaults are created on first read.")
    def get(self, request):
        return Response(SystemSettingsSerializer(SystemSettings.load()).data)

    @extend_schema(
        request=SystemSettingsSerializer,
        responses={200: SystemSettingsSerializer},
        description="Replace the platform settings (coordinator only).",
        examples=[OpenApiExample('Settings', value={
            'maxSupervisionLimit': 5, 'similarityThreshold': 70,
            'logbookDeadline': 'Friday 17:00', 'autoAssignment': True, 'emailNotifications': False,
        })],
    )
    def put(self, request):
        instance = SystemSettings.load()
        s = SystemSettingsSerializer(instance, data=request.data)
        s.is_valid(raise_exception=True)
        saved = s.save(updated_by_id=request.user.id)
        logger.info("Settings updated by %s: %s", request.user.email, s.validated_data)
        return Response(SystemSettingsSerializer(saved).data)
