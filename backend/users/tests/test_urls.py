"""
Test URLs for the users app.
"""
from django.test import TestCase
from django.urls import reverse, resolve
from users import views


class URLTestCase(TestCase):
    """Test cases for URL patterns."""

    def test_register_url(self):
        url = reverse('auth:register')
        self.assertEqual(url, '/api/auth/register')
        self.assertEqual(resolve(url).func.view_class, views.RegisterView)

    def test_login_url(self):
        url = reverse('auth:login')
        self.assertEqual(url, '/api/auth/login')
        self.assertEqual(resolve(url).func.view_class, views.LoginView)

    def test_me_url(self):
        url = reverse('auth:me')
        self.assertEqual(url, '/api/auth/me')
        self.assertEqual(resolve(url).func.view_class, views.MeView)

    def test_supervisor_list_url(self):
        url = reverse('supervisor_list')
        self.assertEqual(url, '/api/supervisors')
        self.assertEqual(resolve(url).func.view_class, views.SupervisorListView)
