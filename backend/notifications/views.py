# backend/notifications/views.py
from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.exceptions import PermissionDenied, ValidationError
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema, OpenApiExample, OpenApiParameter

from users.models import Role
from .models import Notification
from .serializers import NotificationSerializer, NotificationCreateSerializer
from .services import notify, mark_read, unread_count


class NotificationListCreateView(APIView):

    @extend_schema(
        parameters=[OpenApiParameter('uid', int, description="Recipient; defaults to the caller")],
        responses={200: NotificationSerializer(many=True)},
        description="Inbox, newest first. Other users' inboxes are visible to the coordinator only.",
    )
    def get(self, request):
        uid = request.query_params.get('uid')
        if uid in (None, ''):
            uid = request.user.id
        else:
            try:
                uid = int(uid)
            except ValueError:
                raise ValidationError("uid must be an integer.")
        if uid != request.user.id and request.user.role != Role.COORDINATOR:
            raise PermissionDenied("You can only read your own notifications.")

        qs = Notification.objects.filter(to_user_id=uid).order_by('-created_at', '-id')
        return Response(NotificationSerializer(qs, many=True).data)

    @extend_schema(
        request=NotificationCreateSerializer,
        responses={201: NotificationSerializer},
        examples=[OpenApiExample('Notify', value={
            'toUid': 7, 'title': 'Reminder', 'message': 'Week 3 logbook is due Friday.', 'type': 'info',
        })],
    )
    def post(self, request):
        s = NotificationCreateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        n = notify(
            s.validated_data['toUid'],
            s.validated_data['title'],
            s.validated_data['message'],
            s.validated_data['type'],
        )
        return Response(NotificationSerializer(n).data, status=status.HTTP_201_CREATED)


class NotificationReadView(APIView):

    @extend_schema(request=None, responses={200: dict})
    def patch(self, request, pk):
        n = get_object_or_404(Notification, pk=pk)
        mark_read(n, request.user.id)
        return Response({'success': True})


class UnreadCountView(APIView):

    @extend_schema(responses={200: dict})
    def get(self, request):
        return Response({'unreadCount': unread_count(request.user.id)})
