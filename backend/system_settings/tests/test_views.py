"""
Test views for the system_settings app.
"""
from django.test import TestCase
from django.urls import reverse
from rest_framework.test import APITestCase
from rest_framework import status
from system_settings.models import SystemSettings
from users.factory import StudentFactory, SupervisorFactory, CoordinatorFactory, auth_header


class SystemSettingsModelTestCase(TestCase):
    """Singleton behaviour."""

    def test_load_creates_defaults(self):
        s = SystemSettings.load()
        self.assertEqual(s.pk, 1)
        self.assertEqual(s.max_supervision_limit, 4)
        self.assertEqual(s.similarity_threshold, 70)
        self.assertEqual(s.logbook_deadline, 'Friday 17:00')
        self.assertTrue(s.auto_assignment)
        self.assertTrue(s.email_notifications)

    def test_save_always_targets_single_row(self):
        SystemSettings(max_supervision_limit=9).save()
        SystemSettings.load()
        self.assertEqual(SystemSettings.objects.count(), 1)
        self.assertEqual(SystemSettings.load().max_supervision_limit, 9)


class SystemSettingsViewTestCase(APITestCase):
    """GET for everyone signed in, PUT for the coordinator."""

    def setUp(self):
        """Set up test data."""
        self.url = reverse('system_settings:detail')
        self.coordinator = CoordinatorFactory()
        self.payload = {
            'maxSupervisionLimit': 5,
            'similarityThreshold': 65,
            'logbookDeadline': 'Thursday 12:00',
            'autoAssignment': False,
            'emailNotifications': False,
        }

    def test_any_role_can_read(self):
        for user in (StudentFactory(), SupervisorFactory(), self.coordinator):
            response = self.client.get(self.url, **auth_header(user))
            self.assertEqual(response.status_code, status.HTTP_200_OK)
            self.assertEqual(response.data['maxSupervisionLimit'], 4)

    def test_anonymous_cannot_read(self):
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_coordinator_saves_settings(self):
        response = self.client.put(self.url, self.payload, **auth_header(self.coordinator))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['maxSupervisionLimit'], 5)
        self.assertEqual(response.data['logbookDeadline'], 'Thursday 12:00')
        saved = SystemSettings.load()
        self.assertEqual(saved.similarity_threshold, 65)
        self.assertFalse(saved.email_notifications)
        self.assertEqual(saved.updated_by, self.coordinator)

    def test_supervisor_cannot_save(self):
        response = self.client.put(self.url, self.payload, **auth_header(SupervisorFactory()))
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(SystemSettings.load().max_supervision_limit, 4)

    def test_limits_are_validated(self):
        bad_limit = {**self.payload, 'maxSupervisionLimit': 0}
        bad_threshold = {**self.payload, 'similarityThreshold': 101}
        for payload in (bad_limit, bad_threshold):
            response = self.client.put(self.url, payload, **auth_header(self.coordinator))
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
            self.assertIn('error', response.data)

    def test_put_needs_full_object(self):
        response = self.client.put(self.url, {'maxSupervisionLimit': 6}, **auth_header(self.coordinator))
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
