# backend/proposals/services.py
"""
Proposal workflow.

    pending --supervisor approves--> approved --coordinator activates--> activated
    pending --supervisor rejects---> rejected
    approved --coordinator rejects-> rejected

Every transition re-reads the row under a lock, checks who is acting and
from which state, writes, and notifies the people involved. ``flagged``
is never entered or left here.
"""
import logging

from django.contrib.auth import get_user_model
from django.db import transaction
from django.utils import timezone
from rest_framework.exceptions import PermissionDenied, ValidationError

from notifications.models import NotificationType
from notifications.services import notify
from users.models import Role
from wil_monitor.exceptions import Conflict
from .matching import check_duplicate, rank_supervisors
from .models import Proposal, ProposalStatus, initial_steps

logger = logging.getLogger(__name__)
User = get_user_model()

STEP_REVIEW, STEP_FORWARD, STEP_ACTIVATION = 2, 3, 4


# ---- Guards ------------------------------------------------------------------

def _require_role(actor, role, message):
    if actor.role != role:
        raise PermissionDenied(message)


def _require_assigned_supervisor(proposal, actor):
    if actor.role != Role.SUPERVISOR or proposal.supervisor_id != actor.id:
        raise PermissionDenied("Only the assigned supervisor can review this proposal.")


def _require_status(proposal, expected, action):
    if proposal.status != expected:
        raise Conflict(f"Cannot {action} a proposal that is {proposal.status}.")


def _clean_feedback(feedback):
    text = (feedback or "").strip()
    if not text:
        raise ValidationError("Feedback is required when rejecting a proposal.")
    return text


def _lock(proposal):
    return Proposal.objects.select_for_update().get(pk=proposal.pk)


# ---- Submission --------------------------------------------------------------

def latest_proposal(student):
    return student.proposals.order_by('-submitted_at', '-id').first()


def submit_proposal(student, title, description, research_area,
                    group_members="", supervisor_id=None, rng=None):
    _require_role(student, Role.STUDENT, "Only students can submit proposals.")

    title = (title or "").strip()
    description = (description or "").strip()
    research_area = (research_area or "").strip()
    if not (title and description and research_area):
        raise ValidationError("Title, description and research area are required.")

    similarity = check_duplicate(title, rng=rng)
    if similarity.is_duplicate:
        logger.info("Proposal '%s' blocked as duplicate (%s%%)", title, similarity.percentage)
        raise Conflict(similarity.message)

    ranked = rank_supervisors(research_area, User.objects.supervisors())
    if not ranked:
        raise Conflict("No supervisor with available capacity was found for this research area.")

    if supervisor_id is None:
        chosen = ranked[0]
    else:
        chosen = next((s for s in ranked if s.id == supervisor_id), None)
        if chosen is None:
            raise Conflict("The selected supervisor is not available for this research area.")

    with transaction.atomic():
        # serialises concurrent submissions by the same student
        User.objects.select_for_update().get(pk=student.pk)
        current = latest_proposal(student)
        if current is not None and current.status != ProposalStatus.REJECTED:
            raise Conflict("You already have an open proposal. Wait for it to be rejected before submitting another.")

        supervisor = User.objects.select_for_update().get(pk=chosen.pk)
        if not supervisor.has_capacity():
            raise Conflict(f"{supervisor.get_full_name()} has no remaining supervision capacity.")

        proposal = Proposal.objects.create(
            title=title,
            description=description,
            research_area=research_area,
            group_members=(group_members or "").strip(),
            submitted_by=student,
            supervisor=supervisor,
            supervisor_name=supervisor.get_full_name(),
            similarity_score=similarity.percentage,
            steps=initial_steps(supervisor.get_full_name()),
            status=ProposalStatus.PENDING,
        )
        notify(
            supervisor,
            "New Proposal Assigned",
            f'A new proposal "{proposal.title}" has been matched to you. Please review.',
            NotificationType.INFO,
        )

    logger.info("Proposal %s submitted by %s, assigned to %s", proposal.id, student.email, supervisor.email)
    return proposal


# ---- Supervisor review -------------------------------------------------------

def approve_proposal(proposal, supervisor):
    _require_assigned_supervisor(proposal, supervisor)
    with transaction.atomic():
        proposal = _lock(proposal)
        _require_status(proposal, ProposalStatus.PENDING, "approve")

        now = timezone.now()
        name = supervisor.get_full_name()
        proposal.status = ProposalStatus.APPROVED
        proposal.forwarded_to_coordinator = True
        proposal.supervisor_approval = {'approvedBy': name, 'uid': supervisor.id, 'timestamp': now.isoformat()}
        proposal.reviewed_at = now
        proposal.mark_steps_done(STEP_REVIEW, STEP_FORWARD, at=now)
        proposal.save()

        notify(
            proposal.submitted_by,
            "Proposal Approved",
            f'Your proposal "{proposal.title}" has been approved by {name} and forwarded to the coordinator.',
            NotificationType.SUCCESS,
        )
    logger.info("Proposal %s approved by %s", proposal.id, supervisor.email)
    return proposal


def reject_proposal(proposal, supervisor, feedback):
    _require_assigned_supervisor(proposal, supervisor)
    feedback = _clean_feedback(feedback)
    with transaction.atomic():
        proposal = _lock(proposal)
        _require_status(proposal, ProposalStatus.PENDING, "reject")

        name = supervisor.get_full_name()
        proposal.status = ProposalStatus.REJECTED
        proposal.supervisor_feedback = feedback
        proposal.rejected_by = name
        proposal.reviewed_at = timezone.now()
        proposal.save()

        notify(
            proposal.submitted_by,
            "Proposal Rejected — Revision Required",
            f'{name} rejected your proposal: "{feedback}"',
            NotificationType.DANGER,
        )
    logger.info("Proposal %s rejected by %s", proposal.id, supervisor.email)
    return proposal


# ---- Coordinator decision ----------------------------------------------------

def activate_proposal(proposal, coordinator):
    _require_role(coordinator, Role.COORDINATOR, "Only the WIL coordinator can activate projects.")
    with transaction.atomic():
        proposal = _lock(proposal)
        _require_status(proposal, ProposalStatus.APPROVED, "activate")
        if proposal.supervisor is None:
            raise Conflict("This proposal no longer has a supervisor.")

        proposal.supervisor.take_group()

        now = timezone.now()
        proposal.status = ProposalStatus.ACTIVATED
        proposal.coordinator_approved_at = now
        proposal.coordinator_approved_by = coordinator.get_full_name()
        proposal.mark_steps_done(STEP_ACTIVATION, at=now)
        proposal.save()

        notify(
            proposal.submitted_by,
            "Project Activated!",
            f'Your project "{proposal.title}" has been officially activated by the WIL Coordinator. '
            f'You may now proceed with full WIL activities.',
            NotificationType.SUCCESS,
        )
        notify(
            proposal.supervisor,
            "Project Activated",
            f'The project "{proposal.title}" has been activated by the coordinator. '
            f'Supervision may proceed officially.',
            NotificationType.INFO,
        )
    logger.info("Proposal %s activated by %s", proposal.id, coordinator.email)
    return proposal


def coordinator_reject_proposal(proposal, coordinator, feedback):
    _require_role(coordinator, Role.COORDINATOR, "Only the WIL coordinator can reject approved projects.")
    feedback = _clean_feedback(feedback)
    with transaction.atomic():
        proposal = _lock(proposal)
        _require_status(proposal, ProposalStatus.APPROVED, "reject")

        proposal.status = ProposalStatus.REJECTED
        proposal.coordinator_feedback = feedback
        proposal.rejected_by = coordinator.get_full_name()
        proposal.reviewed_at = timezone.now()
        proposal.save()

        notify(
            proposal.submitted_by,
            "Proposal Rejected by Coordinator",
            f'The coordinator rejected your proposal "{proposal.title}": {feedback}',
            NotificationType.DANGER,
        )
        if proposal.supervisor is not None:
            notify(
                proposal.supervisor,
                "Proposal Rejected by Coordinator",
                f'The coordinator rejected "{proposal.title}". Please advise the student.',
                NotificationType.DANGER,
            )
    logger.info("Proposal %s rejected by coordinator %s", proposal.id, coordinator.email)
    return proposal


# ---- Tagged patch dispatch ---------------------------------------------------

def apply_review(proposal, actor, status, feedback=None):
    """Pick the transition from the requested status and the caller's role."""
    if status == ProposalStatus.APPROVED:
        return approve_proposal(proposal, actor)
    if status == ProposalStatus.ACTIVATED:
        return activate_proposal(proposal, actor)
    if status == ProposalStatus.REJECTED:
        if actor.role == Role.COORDINATOR:
            return coordinator_reject_proposal(proposal, actor, feedback)
        return reject_proposal(proposal, actor, feedback)
    raise Conflict(f"Cannot move a proposal to {status}.")
