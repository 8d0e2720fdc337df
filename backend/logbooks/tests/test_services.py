"""
Test the logbook workflow services.
"""
from datetime import date

from django.test import TestCase, override_settings
from rest_framework.exceptions import PermissionDenied, ValidationError
from logbooks.factory import LogbookFactory
from logbooks.models import Logbook, LogbookStatus
from logbooks.services import (
    submit_logbook, approve_logbook, reject_logbook, revise_logbook, week_date_range,
)
from notifications.models import Notification
from proposals.factory import ActivatedProposalFactory, ProposalFactory
from users.factory import StudentFactory, SupervisorFactory
from wil_monitor.exceptions import Conflict


class WeekDateRangeTestCase(TestCase):
    """week_date_range."""

    def test_first_week(self):
        self.assertEqual(week_date_range(1, date(2026, 2, 2)), "02 Feb - 06 Feb, 2026")

    def test_later_week_crosses_month(self):
        self.assertEqual(week_date_range(4, date(2026, 2, 2)), "23 Feb - 27 Feb, 2026")

    @override_settings(WIL_TERM_START=date(2027, 7, 5))
    def test_uses_configured_term_start(self):
        self.assertEqual(week_date_range(1), "05 Jul - 09 Jul, 2027")


class SubmitLogbookTestCase(TestCase):
    """submit_logbook."""

    def setUp(self):
        """Set up test data."""
        self.proposal = ActivatedProposalFactory()
        self.student = self.proposal.submitted_by
        self.supervisor = self.proposal.supervisor

    def test_creates_pending_entry_with_copied_details(self):
        logbook = submit_logbook(
            self.student, 5,
            work_done=['Built login', '  ', ''],
            record_of_discussion=['Scope agreed'],
            problems_encountered=[],
            meeting_no=2, term='Term 1',
        )

        self.assertEqual(logbook.status, LogbookStatus.PENDING)
        self.assertFalse(logbook.locked)
        self.assertEqual(logbook.work_done, ['Built login'])
        self.assertEqual(logbook.supervisor, self.supervisor)
        self.assertEqual(logbook.project_title, self.proposal.title)
        self.assertEqual(logbook.student_number, self.student.id_number)
        self.assertEqual(logbook.date_range, '02 Mar - 06 Mar, 2026')

        n = Notification.objects.get(to_user=self.supervisor)
        self.assertEqual(n.title, 'New Logbook Submitted — Week 5')
        self.assertIn(self.proposal.title, n.message)

    def test_explicit_date_range_kept(self):
        logbook = submit_logbook(self.student, 1, work_done=['x'], date_range='Custom range')
        self.assertEqual(logbook.date_range, 'Custom range')

    def test_second_entry_for_same_week_refused(self):
        submit_logbook(self.student, 5, work_done=['first'])

        with self.assertRaises(Conflict) as cm:
            submit_logbook(self.student, 5, work_done=['second'])

        self.assertEqual(str(cm.exception.detail), 'A logbook for Week 5 already exists.')
        self.assertEqual(Logbook.objects.filter(student=self.student, week_no=5).count(), 1)

    def test_week_out_of_range(self):
        for week in (0, 17, -1):
            with self.assertRaises(ValidationError):
                submit_logbook(self.student, week, work_done=['x'])

    def test_requires_activated_project(self):
        pending = ProposalFactory()
        with self.assertRaises(Conflict):
            submit_logbook(pending.submitted_by, 1, work_done=['x'])

    def test_only_students(self):
        with self.assertRaises(PermissionDenied):
            submit_logbook(self.supervisor, 1, work_done=['x'])


class ReviewLogbookTestCase(TestCase):
    """approve_logbook / reject_logbook."""

    def setUp(self):
        """Set up test data."""
        self.logbook = LogbookFactory(week_no=3)
        self.supervisor = self.logbook.supervisor
        self.student = self.logbook.student

    def test_approve_locks_and_stamps(self):
        lb = approve_logbook(self.logbook, self.supervisor)

        self.assertEqual(lb.status, LogbookStatus.APPROVED)
        self.assertTrue(lb.locked)
        self.assertEqual(lb.digital_approval['approvedBy'], self.supervisor.full_name)
        self.assertTrue(lb.digital_approval['timestamp'])
        self.assertIsNotNone(lb.reviewed_at)

        n = Notification.objects.get(to_user=self.student)
        self.assertEqual(n.title, 'Logbook Week 3 Approved')
        self.assertEqual(n.type, 'success')

    def test_other_supervisor_refused(self):
        with self.assertRaises(PermissionDenied):
            approve_logbook(self.logbook, SupervisorFactory())

    def test_approved_cannot_be_rejected(self):
        approve_logbook(self.logbook, self.supervisor)
        with self.assertRaises(Conflict):
            reject_logbook(self.logbook, self.supervisor, 'Late change of mind')

    def test_reject_keeps_unlocked(self):
        lb = reject_logbook(self.logbook, self.supervisor, 'More detail please.')

        self.assertEqual(lb.status, LogbookStatus.REJECTED)
        self.assertFalse(lb.locked)
        self.assertEqual(lb.supervisor_feedback, 'More detail please.')
        self.assertEqual(lb.rejected_by, self.supervisor.full_name)
        n = Notification.objects.get(to_user=self.student)
        self.assertEqual(n.title, 'Logbook Week 3 — Revision Required')
        self.assertEqual(n.type, 'danger')

    def test_reject_needs_feedback(self):
        with self.assertRaises(ValidationError):
            reject_logbook(self.logbook, self.supervisor, '')
        self.logbook.refresh_from_db()
        self.assertEqual(self.logbook.status, LogbookStatus.PENDING)
        self.assertIsNone(self.logbook.supervisor_feedback)
        self.assertFalse(Notification.objects.filter(to_user=self.student).exists())


class ReviseLogbookTestCase(TestCase):
    """revise_logbook."""

    def setUp(self):
        """Set up test data."""
        self.logbook = LogbookFactory(week_no=2)
        self.supervisor = self.logbook.supervisor
        self.student = self.logbook.student

    def test_edit_pending_in_place(self):
        lb = revise_logbook(self.logbook, self.student, {'work_done': ['New item', ' ']})
        self.assertEqual(lb.work_done, ['New item'])
        self.assertEqual(lb.status, LogbookStatus.PENDING)
        self.assertFalse(Notification.objects.exists())

    def test_rejected_edit_resubmits(self):
        reject_logbook(self.logbook, self.supervisor, 'Add detail.')

        lb = revise_logbook(self.logbook, self.student, {'further_notes': 'Added detail.'})

        self.assertEqual(lb.status, LogbookStatus.PENDING)
        self.assertIsNone(lb.supervisor_feedback)
        self.assertIsNone(lb.rejected_by)
        self.assertEqual(lb.further_notes, 'Added detail.')
        self.assertTrue(Notification.objects.filter(to_user=self.supervisor, title__startswith='Logbook Resubmitted').exists())

    def test_locked_refuses_edit(self):
        approve_logbook(self.logbook, self.supervisor)
        with self.assertRaises(Conflict):
            revise_logbook(self.logbook, self.student, {'work_done': ['sneaky']})
        self.logbook.refresh_from_db()
        self.assertEqual(self.logbook.work_done, ['Built the data model'])

    def test_only_owner(self):
        with self.assertRaises(PermissionDenied):
            revise_logbook(self.logbook, StudentFactory(), {'term': 'x'})

    def test_unknown_field(self):
        with self.assertRaises(ValidationError):
            revise_logbook(self.logbook, self.student, {'status': 'approved'})
