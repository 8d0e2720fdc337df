# backend/logbooks/services.py
"""
Logbook workflow.

    pending --supervisor approves--> approved (locked)
    pending --supervisor rejects---> rejected --student edits--> pending
"""
import logging
from datetime import timedelta

from django.conf import settings
from django.db import IntegrityError, transaction
from django.utils import timezone
from rest_framework.exceptions import PermissionDenied, ValidationError

from notifications.models import NotificationType
from notifications.services import notify
from proposals.models import ProposalStatus
from users.models import Role
from wil_monitor.exceptions import Conflict
from .models import Logbook, LogbookStatus

logger = logging.getLogger(__name__)

LIST_FIELDS = ('work_done', 'record_of_discussion', 'problems_encountered')
CONTENT_FIELDS = LIST_FIELDS + ('further_notes', 'meeting_no', 'term')


def week_date_range(week_no, term_start=None):
    """Monday to Friday of a term week, e.g. '02 Feb - 06 Feb, 2026'."""
    term_start = term_start or settings.WIL_TERM_START
    start = term_start + timedelta(days=(week_no - 1) * 7)
    end = start + timedelta(days=4)
    return f"{start:%d %b} - {end:%d %b}, {end.year}"


def clean_items(items):
    return [str(item).strip() for item in (items or []) if str(item).strip()]


def _duplicate_week(week_no):
    return Conflict(f"A logbook for Week {week_no} already exists.")


def _require_assigned_supervisor(logbook, actor):
    if actor.role != Role.SUPERVISOR or logbook.supervisor_id != actor.id:
        raise PermissionDenied("Only the assigned supervisor can review this logbook.")


def _require_pending(logbook, action):
    if logbook.status != LogbookStatus.PENDING:
        raise Conflict(f"Cannot {action} a logbook that is {logbook.status}.")


def _lock(logbook):
    return Logbook.objects.select_for_update().get(pk=logbook.pk)


# ---- Submission --------------------------------------------------------------

def submit_logbook(student, week_no, work_done=None, record_of_discussion=None,
                   problems_encountered=None, further_notes="", meeting_no=None,
                   term="", date_range=None):
    if student.role != Role.STUDENT:
        raise PermissionDenied("Only students can submit logbooks.")

    max_week = settings.WIL_TERM_WEEKS
    if not isinstance(week_no, int) or not 1 <= week_no <= max_week:
        raise ValidationError(f"Week number must be between 1 and {max_week}.")

    proposal = (student.proposals
                .filter(status=ProposalStatus.ACTIVATED)
                .select_related('supervisor')
                .order_by('-submitted_at', '-id')
                .first())
    if proposal is None:
        raise Conflict("You need an activated project before submitting logbooks.")

    if Logbook.objects.filter(student=student, week_no=week_no).exists():
        raise _duplicate_week(week_no)

    try:
        with transaction.atomic():
            logbook = Logbook.objects.create(
                proposal=proposal,
                student=student,
                student_name=student.get_full_name(),
                student_number=student.id_number,
                supervisor=proposal.supervisor,
                supervisor_name=proposal.supervisor_name,
                project_title=proposal.title,
                week_no=week_no,
                meeting_no=meeting_no,
                term=(term or "").strip(),
                date_range=(date_range or "").strip() or week_date_range(week_no),
                work_done=clean_items(work_done),
                record_of_discussion=clean_items(record_of_discussion),
                problems_encountered=clean_items(problems_encountered),
                further_notes=(further_notes or "").strip(),
                status=LogbookStatus.PENDING,
            )
    except IntegrityError:
        # concurrent submission for the same week won the insert
        raise _duplicate_week(week_no)

    if proposal.supervisor is not None:
        notify(
            proposal.supervisor,
            f"New Logbook Submitted — Week {week_no}",
            f'{logbook.student_name} submitted Week {week_no} logbook for "{logbook.project_title}".',
            NotificationType.INFO,
        )
    logger.info("Logbook week %s submitted by %s", week_no, student.email)
    return logbook


# ---- Supervisor review -------------------------------------------------------

def approve_logbook(logbook, supervisor):
    _require_assigned_supervisor(logbook, supervisor)
    with transaction.atomic():
        logbook = _lock(logbook)
        _require_pending(logbook, "approve")

        now = timezone.now()
        name = supervisor.get_full_name()
        logbook.status = LogbookStatus.APPROVED
        logbook.locked = True
        logbook.digital_approval = {'approvedBy': name, 'uid': supervisor.id, 'timestamp': now.isoformat()}
        logbook.reviewed_at = now
        logbook.save()

        notify(
            logbook.student,
            f"Logbook Week {logbook.week_no} Approved",
            f"{name} approved your Week {logbook.week_no} logbook. The entry is now locked.",
            NotificationType.SUCCESS,
        )
    logger.info("Logbook %s approved and locked by %s", logbook.id, supervisor.email)
    return logbook


def reject_logbook(logbook, supervisor, feedback):
    _require_assigned_supervisor(logbook, supervisor)
    feedback = (feedback or "").strip()
    if not feedback:
        raise ValidationError("Feedback is required when requesting a revision.")

    with transaction.atomic():
        logbook = _lock(logbook)
        _require_pending(logbook, "reject")

        name = supervisor.get_full_name()
        logbook.status = LogbookStatus.REJECTED
        logbook.supervisor_feedback = feedback
        logbook.rejected_by = name
        logbook.reviewed_at = timezone.now()
        logbook.save()

        notify(
            logbook.student,
            f"Logbook Week {logbook.week_no} — Revision Required",
            f'{name} requested a revision: "{feedback}"',
            NotificationType.DANGER,
        )
    logger.info("Logbook %s sent back by %s", logbook.id, supervisor.email)
    return logbook


def apply_review(logbook, actor, status, feedback=None):
    if status == LogbookStatus.APPROVED:
        return approve_logbook(logbook, actor)
    if status == LogbookStatus.REJECTED:
        return reject_logbook(logbook, actor, feedback)
    raise Conflict(f"Cannot move a logbook to {status}.")


# ---- Student revision --------------------------------------------------------

def revise_logbook(logbook, student, changes):
    """
    Edit the content of an unlocked logbook in place.
    A rejected logbook goes back to pending and its feedback is cleared.
    """
    if logbook.student_id != student.id:
        raise PermissionDenied("You can only edit your own logbooks.")
    unknown = set(changes) - set(CONTENT_FIELDS)
    if unknown:
        raise ValidationError(f"Field(s) cannot be updated: {', '.join(sorted(unknown))}.")

    with transaction.atomic():
        logbook = _lock(logbook)
        if logbook.locked:
            raise Conflict("This logbook has been approved and is locked.")

        for field, value in changes.items():
            if field in LIST_FIELDS:
                value = clean_items(value)
            elif field in ('further_notes', 'term'):
                value = (value or "").strip()
            setattr(logbook, field, value)

        resubmitted = logbook.status == LogbookStatus.REJECTED
        if resubmitted:
            logbook.status = LogbookStatus.PENDING
            logbook.supervisor_feedback = None
            logbook.rejected_by = None
            logbook.reviewed_at = None
            logbook.submitted_at = timezone.now()
        logbook.save()

        if resubmitted and logbook.supervisor is not None:
            notify(
                logbook.supervisor,
                f"Logbook Resubmitted — Week {logbook.week_no}",
                f'{logbook.student_name} revised and resubmitted Week {logbook.week_no} '
                f'logbook for "{logbook.project_title}".',
                NotificationType.INFO,
            )
    logger.info("Logbook %s revised by %s%s", logbook.id, student.email, " (resubmitted)" if resubmitted else "")
    return logbook
