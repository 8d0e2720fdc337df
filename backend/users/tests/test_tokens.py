"""
Test session tokens and bearer authentication.
"""
from datetime import timedelta

from django.test import TestCase
from rest_framework.exceptions import AuthenticationFailed
from rest_framework.test import APIRequestFactory
from users.authentication import SessionTokenAuthentication, SessionUser
from users.factory import CoordinatorFactory
from users.tokens import SessionToken, issue_token, read_session


class SessionTokenTestCase(TestCase):
    """Issuing and reading tokens."""

    def setUp(self):
        """Set up test data."""
        self.user = CoordinatorFactory(email='coord@wil.ac.za')

    def test_read_session_returns_identity(self):
        session = read_session(issue_token(self.user))
        self.assertEqual(session, {'id': self.user.id, 'email': 'coord@wil.ac.za', 'role': 'coordinator'})

    def test_token_lifetime_is_seven_days(self):
        token = SessionToken.for_user(self.user)
        self.assertEqual(token['exp'] - token['iat'], int(timedelta(days=7).total_seconds()))

    def test_tampered_token_rejected(self):
        raw = issue_token(self.user)
        head, payload, signature = raw.split('.')
        with self.assertRaises(AuthenticationFailed):
            read_session(f"{head}.{payload}.{signature[::-1]}")

    def test_expired_token_rejected(self):
        token = SessionToken.for_user(self.user)
        token.set_exp(lifetime=-timedelta(seconds=1))
        with self.assertRaises(AuthenticationFailed):
            read_session(str(token))

    def test_garbage_rejected(self):
        with self.assertRaises(AuthenticationFailed):
            read_session('not-a-token')


class SessionTokenAuthenticationTestCase(TestCase):
    """Bearer header handling."""

    def setUp(self):
        """Set up test data."""
        self.factory = APIRequestFactory()
        self.auth = SessionTokenAuthentication()
        self.user = CoordinatorFactory()

    def test_no_header_is_anonymous(self):
        request = self.factory.get('/api/dashboard')
        self.assertIsNone(self.auth.authenticate(request))

    def test_bearer_header_builds_session_user(self):
        request = self.factory.get('/api/dashboard', HTTP_AUTHORIZATION=f"Bearer {issue_token(self.user)}")
        principal, _ = self.auth.authenticate(request)
        self.assertIsInstance(principal, SessionUser)
        self.assertEqual(principal.id, self.user.id)
        self.assertEqual(principal.role, 'coordinator')
        self.assertTrue(principal.is_authenticated)

    def test_role_comes_from_token_not_database(self):
        raw = issue_token(self.user)
        self.user.role = 'student'
        self.user.save()
        request = self.factory.get('/api/dashboard', HTTP_AUTHORIZATION=f"Bearer {raw}")
        principal, _ = self.auth.authenticate(request)
        self.assertEqual(principal.role, 'coordinator')
