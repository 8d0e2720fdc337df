"""
Test notifications: service helpers and endpoints.
"""
from django.test import TestCase
from django.urls import reverse
from rest_framework.exceptions import PermissionDenied
from rest_framework.test import APITestCase
from rest_framework import status
from notifications.models import Notification
from notifications.services import notify, mark_read, unread_count
from users.factory import StudentFactory, SupervisorFactory, CoordinatorFactory, auth_header


class NotificationServiceTestCase(TestCase):
    """notify / mark_read / unread_count."""

    def setUp(self):
        """Set up test data."""
        self.student = StudentFactory()

    def test_notify_creates_unread_message(self):
        n = notify(self.student, 'Hello', 'World', 'success')
        self.assertEqual(n.to_user, self.student)
        self.assertFalse(n.read)
        self.assertEqual(n.type, 'success')

    def test_mark_read_is_idempotent(self):
        n = notify(self.student, 'Hello', 'World')
        mark_read(n, self.student.id)
        mark_read(n, self.student.id)
        n.refresh_from_db()
        self.assertTrue(n.read)
        self.assertEqual(unread_count(self.student.id), 0)

    def test_mark_read_by_someone_else_refused(self):
        n = notify(self.student, 'Hello', 'World')
        with self.assertRaises(PermissionDenied):
            mark_read(n, StudentFactory().id)
        n.refresh_from_db()
        self.assertFalse(n.read)


class NotificationViewTestCase(APITestCase):
    """HTTP surface of the inbox."""

    def setUp(self):
        """Set up test data."""
        self.student = StudentFactory()
        self.supervisor = SupervisorFactory()
        self.coordinator = CoordinatorFactory()
        self.list_url = reverse('notifications:list_create')

    def test_post_creates_notification(self):
        response = self.client.post(self.list_url, {
            'toUid': self.student.id, 'title': 'Reminder', 'message': 'Submit week 2.', 'type': 'info',
        }, **auth_header(self.coordinator))

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['toUid'], self.student.id)
        self.assertFalse(response.data['read'])

    def test_post_rejects_unknown_type_and_recipient(self):
        bad_type = {'toUid': self.student.id, 'title': 't', 'message': 'm', 'type': 'warning'}
        bad_uid = {'toUid': 999999, 'title': 't', 'message': 'm'}
        for payload in (bad_type, bad_uid):
            response = self.client.post(self.list_url, payload, **auth_header(self.coordinator))
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_list_defaults_to_own_inbox_newest_first(self):
        first = notify(self.student, 'First', 'm')
        second = notify(self.student, 'Second', 'm')
        notify(self.supervisor, 'Not yours', 'm')

        response = self.client.get(self.list_url, **auth_header(self.student))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([row['id'] for row in response.data], [second.id, first.id])

    def test_other_inbox_only_for_coordinator(self):
        notify(self.student, 'Private', 'm')
        url = f"{self.list_url}?uid={self.student.id}"

        denied = self.client.get(url, **auth_header(self.supervisor))
        allowed = self.client.get(url, **auth_header(self.coordinator))

        self.assertEqual(denied.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(allowed.status_code, status.HTTP_200_OK)
        self.assertEqual(len(allowed.data), 1)

    def test_mark_read_endpoint(self):
        n = notify(self.student, 'Hello', 'World')
        url = reverse('notifications:mark_read', kwargs={'pk': n.pk})

        response = self.client.patch(url, **auth_header(self.student))
        again = self.client.patch(url, **auth_header(self.student))

        self.assertEqual(response.data, {'success': True})
        self.assertEqual(again.status_code, status.HTTP_200_OK)
        self.assertTrue(Notification.objects.get(pk=n.pk).read)

    def test_mark_read_of_someone_elses_message(self):
        n = notify(self.student, 'Hello', 'World')
        url = reverse('notifications:mark_read', kwargs={'pk': n.pk})
        response = self.client.patch(url, **auth_header(self.supervisor))
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_mark_read_unknown_id(self):
        url = reverse('notifications:mark_read', kwargs={'pk': 424242})
        response = self.client.patch(url, **auth_header(self.student))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_unread_count(self):
        notify(self.student, 'a', 'm')
        read = notify(self.student, 'b', 'm')
        mark_read(read, self.student.id)

        response = self.client.get(reverse('notifications:unread_count'), **auth_header(self.student))
        self.assertEqual(response.data, {'unreadCount': 1})

    def test_urls(self):
        self.assertEqual(self.list_url, '/api/notifications')
        self.assertEqual(reverse('notifications:unread_count'), '/api/notifications/unread-count')
        self.assertEqual(reverse('notifications:mark_read', kwargs={'pk': 3}), '/api/notifications/3/read')
