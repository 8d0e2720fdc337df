# backend/dashboard/views.py
from django.conf import settings
from django.db.models import Count, Q
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema

from logbooks.models import Logbook, LogbookStatus
from notifications.services import unread_count
from proposals.models import Proposal, ProposalStatus
from proposals.serializers import ProposalSerializer
from proposals.services import latest_proposal
from users.models import User, Role


def _logbook_counts(qs):
    return qs.aggregate(
        total=Count('id'),
        approved=Count('id', filter=Q(status=LogbookStatus.APPROVED)),
        pending=Count('id', filter=Q(status=LogbookStatus.PENDING)),
        rejected=Count('id', filter=Q(status=LogbookStatus.REJECTED)),
    )


def student_overview(user):
    proposal = latest_proposal(user)
    counts = _logbook_counts(Logbook.objects.filter(student=user))
    total = counts['total']
    return {
        'proposal': ProposalSerializer(proposal).data if proposal else None,
        'logbooksSubmitted': total,
        'logbooksApproved': counts['approved'],
        'logbooksPending': counts['pending'],
        'logbooksRejected': counts['rejected'],
        'approvalRate': round(counts['approved'] * 100 / total) if total else 0,
        'termWeeks': settings.WIL_TERM_WEEKS,
        'unreadNotifications': unread_count(user.id),
    }


def supervisor_overview(user):
    proposals = Proposal.objects.filter(supervisor=user)
    counts = _logbook_counts(Logbook.objects.filter(supervisor=user))
    return {
        'pendingProposals': proposals.filter(status=ProposalStatus.PENDING).count(),
        'assignedProposals': proposals.count(),
        'pendingLogbooks': counts['pending'],
        'approvedLogbooks': counts['approved'],
        'currentGroups': user.current_groups,
        'maxCapacity': user.max_capacity,
        'unreadNotifications': unread_count(user.id),
    }


def coordinator_overview(user):
    by_status = {
        row['status']: row['n']
        for row in Proposal.objects.order_by().values('status').annotate(n=Count('id'))
    }
    counts = _logbook_counts(Logbook.objects.all())
    return {
        'pendingProposals': by_status.get(ProposalStatus.PENDING, 0),
        'forwardedProposals': Proposal.objects.filter(
            status=ProposalStatus.APPROVED, forwarded_to_coordinator=True).count(),
        'activatedProjects': by_status.get(ProposalStatus.ACTIVATED, 0),
        'rejectedProposals': by_status.get(ProposalStatus.REJECTED, 0),
        'flaggedProposals': by_status.get(ProposalStatus.FLAGGED, 0),
        'pendingLogbooks': counts['pending'],
        'approvedLogbooks': counts['approved'],
        'supervisors': User.objects.supervisors().count(),
        'unreadNotifications': unread_count(user.id),
    }


OVERVIEWS = {
    Role.STUDENT: student_overview,
    Role.SUPERVISOR: supervisor_overview,
    Role.COORDINATOR: coordinator_overview,
}


class DashboardView(APIView):

    @extend_schema(responses={200: dict}, description="Role-specific counts for the caller's dashboard.")
    def get(self, request):
        user = User.objects.for_request(request)
        data = OVERVIEWS[user.role](user)
        return Response({'role': user.role, **data})
