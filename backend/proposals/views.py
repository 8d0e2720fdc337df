# backend/proposals/views.py
from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema, OpenApiExample, OpenApiParameter
import logging

from users.models import User
from users.permissions import StudentCreatesOnly
from .matching import check_duplicate, rank_supervisors
from .models import Proposal
from .serializers import (
    ProposalSerializer, ProposalWithStudentSerializer, ProposalCreateSerializer,
    ProposalPatchSerializer, ProposalCheckSerializer, ProposalCheckResultSerializer,
)
from .services import submit_proposal, apply_review

logger = logging.getLogger(__name__)


def int_param(request, name):
    raw = request.query_params.get(name)
    if raw in (None, ''):
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f"{name} must be an integer.")


class ProposalListCreateView(APIView):
    permission_classes = [StudentCreatesOnly]

    @extend_schema(
        parameters=[
            OpenApiParameter('submittedBy', int, description="Only proposals by this student"),
            OpenApiParameter('supervisorId', int, description="Only proposals assigned to this supervisor"),
        ],
        responses={200: ProposalWithStudentSerializer(many=True)},
        description="Proposals with student details, newest first.",
    )
    def get(self, request):
        qs = Proposal.objects.select_related('submitted_by').order_by('-submitted_at', '-id')
        submitted_by = int_param(request, 'submittedBy')
        supervisor_id = int_param(request, 'supervisorId')
        if submitted_by is not None:
            qs = qs.filter(submitted_by_id=submitted_by)
        elif supervisor_id is not None:
            qs = qs.filter(supervisor_id=supervisor_id)
        return Response(ProposalWithStudentSerializer(qs, many=True).data)

    @extend_schema(
        request=ProposalCreateSerializer,
        responses={201: ProposalSerializer},
        description="Submit a proposal. Runs the duplicate check and assigns a supervisor.",
        examples=[OpenApiExample('Submit', value={
            'title': 'Inventory Tracker for Local Retailers',
            'description': 'Stock and sales tracking for small shops.',
            'researchArea': 'web', 'groupMembers': 'Thabo, Lindiwe',
        })],
    )
    def post(self, request):
        s = ProposalCreateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        data = s.validated_data
        proposal = submit_proposal(
            User.objects.for_request(request),
            title=data['title'],
            description=data['description'],
            research_area=data['researchArea'],
            group_members=data['groupMembers'],
            supervisor_id=data['supervisorId'],
        )
        return Response(ProposalSerializer(proposal).data, status=status.HTTP_201_CREATED)


class ProposalCheckView(APIView):

    @extend_schema(
        request=ProposalCheckSerializer,
        responses={200: ProposalCheckResultSerializer},
        description="Duplicate check plus ranked supervisors, without creating anything.",
        examples=[OpenApiExample('Check', value={'title': 'Inventory Tracker for Local Retailers', 'researchArea': 'web'})],
    )
    def post(self, request):
        s = ProposalCheckSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        similarity = check_duplicate(s.validated_data['title'])
        matches = rank_supervisors(s.validated_data['researchArea'], User.objects.supervisors())
        result = ProposalCheckResultSerializer({'similarity': similarity, 'matches': matches})
        return Response(result.data)


class ProposalDetailView(APIView):

    @extend_schema(responses={200: ProposalWithStudentSerializer})
    def get(self, request, pk):
        proposal = get_object_or_404(Proposal.objects.select_related('submitted_by'), pk=pk)
        return Response(ProposalWithStudentSerializer(proposal).data)

    @extend_schema(
        request=ProposalPatchSerializer,
        responses={200: ProposalSerializer},
        description=(
            "Review a proposal. status=approved|rejected by the assigned supervisor on a pending "
            "proposal; status=activated|rejected by the coordinator on an approved one."
        ),
        examples=[
            OpenApiExample('Approve', value={'status': 'approved'}),
            OpenApiExample('Reject', value={'status': 'rejected', 'feedback': 'Narrow the scope.'}),
        ],
    )
    def patch(self, request, pk):
        proposal = get_object_or_404(Proposal, pk=pk)
        s = ProposalPatchSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        updated = apply_review(
            proposal,
            User.objects.for_request(request),
            s.validated_data['status'],
            s.feedback_text,
        )
        return Response(ProposalSerializer(updated).data)
