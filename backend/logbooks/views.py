# backend/logbooks/views.py
from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema, OpenApiExample, OpenApiParameter

from proposals.views import int_param
from users.models import User
from users.permissions import StudentCreatesOnly
from .models import Logbook
from .serializers import LogbookSerializer, LogbookCreateSerializer, LogbookPatchSerializer
from . import services


class LogbookListCreateView(APIView):
    permission_classes = [StudentCreatesOnly]

    @extend_schema(
        parameters=[
            OpenApiParameter('studentId', int, description="Only this student's logbooks, by week"),
            OpenApiParameter('supervisorId', int, description="Only logbooks for this supervisor, by week"),
        ],
        responses={200: LogbookSerializer(many=True)},
        description="Filtered lists are ordered by week; the full list is newest first.",
    )
    def get(self, request):
        student_id = int_param(request, 'studentId')
        supervisor_id = int_param(request, 'supervisorId')
        qs = Logbook.objects.all()
        if student_id is not None:
            qs = qs.filter(student_id=student_id).order_by('week_no', 'id')
        elif supervisor_id is not None:
            qs = qs.filter(supervisor_id=supervisor_id).order_by('week_no', 'id')
        else:
            qs = qs.order_by('-submitted_at', '-id')
        return Response(LogbookSerializer(qs, many=True).data)

    @extend_schema(
        request=LogbookCreateSerializer,
        responses={201: LogbookSerializer},
        examples=[OpenApiExample('Week 1', value={
            'weekNo': 1, 'meetingNo': 1, 'term': 'Term 1',
            'workDone': ['Set up repository', 'Drafted ERD'],
            'recordOfDiscussion': ['Agreed on scope'],
            'problemsEncountered': [], 'furtherNotes': '',
        })],
    )
    def post(self, request):
        s = LogbookCreateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        data = s.validated_data
        logbook = services.submit_logbook(
            User.objects.for_request(request),
            week_no=data['weekNo'],
            work_done=data['workDone'],
            record_of_discussion=data['recordOfDiscussion'],
            problems_encountered=data['problemsEncountered'],
            further_notes=data['furtherNotes'],
            meeting_no=data['meetingNo'],
            term=data['term'],
            date_range=data['dateRange'],
        )
        return Response(LogbookSerializer(logbook).data, status=status.HTTP_201_CREATED)


class LogbookDetailView(APIView):

    @extend_schema(responses={200: LogbookSerializer})
    def get(self, request, pk):
        return Response(LogbookSerializer(get_object_or_404(Logbook, pk=pk)).data)

    @extend_schema(
        request=LogbookPatchSerializer,
        responses={200: LogbookSerializer},
        description="Supervisor review (status, feedback) or student content edit.",
        examples=[
            OpenApiExample('Approve', value={'status': 'approved'}),
            OpenApiExample('Request revision', value={'status': 'rejected', 'feedback': 'Add more detail.'}),
            OpenApiExample('Edit', value={'workDone': ['Implemented login', 'Wrote tests']}),
        ],
    )
    def patch(self, request, pk):
        logbook = get_object_or_404(Logbook, pk=pk)
        s = LogbookPatchSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        actor = User.objects.for_request(request)
        if s.is_review:
            updated = services.apply_review(logbook, actor, s.validated_data['status'], s.feedback_text)
        else:
            updated = services.revise_logbook(logbook, actor, s.content_changes)
        return Response(LogbookSerializer(updated).data)
