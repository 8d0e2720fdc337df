# backend/proposals/models.py
from django.conf import settings
from django.db import models
from django.utils import timezone


class ProposalStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    APPROVED = 'approved', 'Approved'
    REJECTED = 'rejected', 'Rejected'
    ACTIVATED = 'activated', 'Activated'
    FLAGGED = 'flagged', 'Flagged'


def step_time(at=None):
    """Checklist timestamps are display strings, e.g. '02 Feb 2026, 09:30'."""
    return timezone.localtime(at or timezone.now()).strftime("%d %b %Y, %H:%M")


def initial_steps(supervisor_name, at=None):
    stamp = step_time(at)
    return [
        {'label': 'Duplicate Check Passed',
         'detail': 'Proposal title cleared, similarity below threshold.', 'done': True, 'time': stamp},
        {'label': 'Supervisor Matched & Assigned',
         'detail': f'Matched with {supervisor_name} based on research area.', 'done': True, 'time': stamp},
        {'label': 'Awaiting Supervisor Review',
         'detail': 'Supervisor will review and provide feedback.', 'done': False, 'time': None},
        {'label': 'Forward to Coordinator',
         'detail': 'Pending supervisor approval.', 'done': False, 'time': None},
        {'label': 'Project Activation',
         'detail': 'Pending final approval.', 'done': False, 'time': None},
    ]


class Proposal(models.Model):
    """A student's WIL project proposal and its review trail."""
    title                    = models.CharField(max_length=300)
    description              = models.TextField()
    research_area            = models.CharField(max_length=100)
    group_members            = models.TextField(blank=True, default='')
    submitted_by             = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE,
                                                 related_name='proposals')
    supervisor               = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL,
                                                 null=True, blank=True, related_name='supervised_proposals')
    supervisor_name          = models.CharField(max_length=200, blank=True, default='')
    similarity_score         = models.PositiveSmallIntegerField(default=0)
    steps                    = models.JSONField(default=list, blank=True)
    status                   = models.CharField(max_length=20, choices=ProposalStatus.choices,
                                                default=ProposalStatus.PENDING, db_index=True)
    forwarded_to_coordinator = models.BooleanField(default=False)
    supervisor_approval      = models.JSONField(null=True, blank=True)
    supervisor_feedback      = models.TextField(null=True, blank=True)
    coordinator_feedback     = models.TextField(null=True, blank=True)
    coordinator_approved_at  = models.DateTimeField(null=True, blank=True)
    coordinator_approved_by  = models.CharField(max_length=200, null=True, blank=True)
    rejected_by              = models.CharField(max_length=200, null=True, blank=True)
    reviewed_at              = models.DateTimeField(null=True, blank=True)
    submitted_at             = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        ordering = ['-submitted_at', '-id']

    def __str__(self):
        return f"{self.title} ({self.status})"

    def mark_steps_done(self, *indexes, at=None):
        stamp = step_time(at)
        steps = [dict(step) for step in (self.steps or [])]
        for i in indexes:
            if i < len(steps):
                steps[i]['done'] = True
                steps[i]['time'] = stamp
        self.steps = steps
