# backend/logbooks/models.py
from django.conf import settings
from django.db import models
from django.utils import timezone


class LogbookStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    APPROVED = 'approved', 'Approved'
    REJECTED = 'rejected', 'Rejected'


class Logbook(models.Model):
    """
    One weekly meeting record for an activated project.
    Names and the project title are copied in at submission time.
    Approval locks the entry for good.
    """
    proposal             = models.ForeignKey('proposals.Proposal', on_delete=models.CASCADE, related_name='logbooks')
    student              = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='logbooks')
    student_name         = models.CharField(max_length=200)
    student_number       = models.CharField(max_length=50, blank=True, default='')
    supervisor           = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True,
                                             blank=True, related_name='supervised_logbooks')
    supervisor_name      = models.CharField(max_length=200, blank=True, default='')
    project_title        = models.CharField(max_length=300)
    week_no              = models.PositiveSmallIntegerField()
    meeting_no           = models.PositiveSmallIntegerField(null=True, blank=True)
    term                 = models.CharField(max_length=50, blank=True, default='')
    date_range           = models.CharField(max_length=50, blank=True, default='')
    work_done            = models.JSONField(default=list, blank=True)
    record_of_discussion = models.JSONField(default=list, blank=True)
    problems_encountered = models.JSONField(default=list, blank=True)
    further_notes        = models.TextField(blank=True, default='')
    status               = models.CharField(max_length=20, choices=LogbookStatus.choices,
                                            default=LogbookStatus.PENDING, db_index=True)
    locked               = models.BooleanField(default=False)
    digital_approval     = models.JSONField(null=True, blank=True)
    supervisor_feedback  = models.TextField(null=True, blank=True)
    rejected_by          = models.CharField(max_length=200, null=True, blank=True)
    reviewed_at          = models.DateTimeField(null=True, blank=True)
    submitted_at         = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        ordering = ['-submitted_at', '-id']
        constraints = [
            models.UniqueConstraint(fields=['student', 'week_no'], name='logbook_one_per_student_week'),
        ]

    def __str__(self):
        return f"Week {self.week_no} - {self.student_name} ({self.status})"
