"""
Test views for the users app.
"""
from django.urls import reverse
from rest_framework.test import APITestCase
from rest_framework import status
from users.models import User, Role, INVALID_CREDENTIALS
from users.factory import StudentFactory, SupervisorFactory, CoordinatorFactory, auth_header


class RegisterViewTestCase(APITestCase):
    """Test cases for RegisterView."""

    def setUp(self):
        """Set up test data."""
        self.url = reverse('auth:register')
        self.student_data = {
            'role': 'student',
            'fullName': 'Thabo Mokoena',
            'email': 'Thabo@Student.ac.za',
            'password': 'Secret123',
            'idNumber': '221004455',
            'program': 'Diploma in IT',
        }

    def test_successful_student_registration(self):
        response = self.client.post(self.url, self.student_data)

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertTrue(response.data['success'])
        self.assertTrue(response.data['token'])
        user = response.data['user']
        self.assertEqual(user['email'], 'thabo@student.ac.za')
        self.assertEqual(user['role'], 'student')
        self.assertEqual(user['fullName'], 'Thabo Mokoena')
        self.assertEqual(user['name'], 'Thabo Mokoena')
        self.assertEqual(user['uid'], user['id'])
        self.assertNotIn('password', user)

    def test_registered_token_opens_a_session(self):
        response = self.client.post(self.url, self.student_data)
        token = response.data['token']

        me = self.client.get(reverse('auth:me'), HTTP_AUTHORIZATION=f"Bearer {token}")
        self.assertEqual(me.status_code, status.HTTP_200_OK)
        self.assertEqual(me.data['user']['email'], 'thabo@student.ac.za')

    def test_duplicate_email_conflicts(self):
        self.client.post(self.url, self.student_data)
        response = self.client.post(self.url, {**self.student_data, 'fullName': 'Someone Else'})

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data, {'error': 'email-already-in-use'})
        self.assertEqual(User.objects.count(), 1)

    def test_weak_password_rejected(self):
        for password in ['Short1', 'alllowercase1', 'NoDigitsHere']:
            response = self.client.post(self.url, {**self.student_data, 'password': password})
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, password)
            self.assertIn('password', response.data['error'])
        self.assertEqual(User.objects.count(), 0)

    def test_invalid_email_rejected(self):
        response = self.client.post(self.url, {**self.student_data, 'email': 'not-an-email'})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_student_requires_program(self):
        data = {**self.student_data}
        data.pop('program')
        response = self.client.post(self.url, data)
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('program', response.data['error'])

    def test_supervisor_requires_employee_number(self):
        response = self.client.post(self.url, {
            'role': 'supervisor', 'fullName': 'Dr. Nomsa Dlamini',
            'email': 'nomsa@wil.ac.za', 'password': 'Secret123',
        })
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('employeeNumber', response.data['error'])

    def test_supervisor_registration_sets_capacity(self):
        response = self.client.post(self.url, {
            'role': 'supervisor', 'fullName': 'Dr. Nomsa Dlamini',
            'email': 'nomsa@wil.ac.za', 'password': 'Secret123',
            'employeeNumber': 'EMP1001', 'researchAreas': ['Web Development', ' '],
        })
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        user = response.data['user']
        self.assertEqual(user['currentGroups'], 0)
        self.assertEqual(user['maxCapacity'], 4)
        self.assertEqual(user['researchAreas'], ['Web Development'])


class LoginViewTestCase(APITestCase):
    """Test cases for LoginView."""

    def setUp(self):
        """Set up test data."""
        self.user = StudentFactory(email='test@wil.ac.za', password='Secret123')
        self.url = reverse('auth:login')

    def test_successful_login(self):
        response = self.client.post(self.url, {'email': 'test@wil.ac.za', 'password': 'Secret123'})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data['success'])
        self.assertIn('token', response.data)
        self.assertEqual(response.data['user']['email'], 'test@wil.ac.za')

    def test_login_wrong_password(self):
        response = self.client.post(self.url, {'email': 'test@wil.ac.za', 'password': 'Wrong1234'})

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data, {'error': INVALID_CREDENTIALS})

    def test_login_unknown_email_same_message(self):
        response = self.client.post(self.url, {'email': 'ghost@wil.ac.za', 'password': 'Secret123'})

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data, {'error': INVALID_CREDENTIALS})

    def test_login_failure_challenges_for_bearer_token(self):
        response = self.client.post(self.url, {'email': 'test@wil.ac.za', 'password': 'Wrong1234'})

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response['WWW-Authenticate'], 'Bearer realm="api"')

    def test_login_missing_fields(self):
        response = self.client.post(self.url, {'email': 'test@wil.ac.za'})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)


class MeViewTestCase(APITestCase):
    """Test cases for MeView."""

    def setUp(self):
        """Set up test data."""
        self.user = SupervisorFactory(full_name='Dr. Nomsa Dlamini')
        self.url = reverse('auth:me')

    def test_me_returns_full_record(self):
        response = self.client.get(self.url, **auth_header(self.user))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['user']['id'], self.user.id)
        self.assertEqual(response.data['user']['role'], Role.SUPERVISOR)
        self.assertEqual(response.data['user']['maxCapacity'], self.user.max_capacity)

    def test_me_without_token(self):
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertIn('error', response.data)

    def test_me_with_tampered_token(self):
        header = auth_header(self.user)['HTTP_AUTHORIZATION'] + 'x'
        response = self.client.get(self.url, HTTP_AUTHORIZATION=header)
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_me_for_deleted_account(self):
        header = auth_header(self.user)
        self.user.delete()
        response = self.client.get(self.url, **header)
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {'error': 'User not found.'})


class SupervisorListViewTestCase(APITestCase):
    """Test cases for SupervisorListView."""

    def setUp(self):
        """Set up test data."""
        self.url = reverse('supervisor_list')
        self.student = StudentFactory()
        SupervisorFactory(full_name='Zanele Zulu')
        SupervisorFactory(full_name='Andile Abrahams')
        CoordinatorFactory()

    def test_lists_supervisors_by_name(self):
        response = self.client.get(self.url, **auth_header(self.student))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        names = [row['fullName'] for row in response.data]
        self.assertEqual(names, ['Andile Abrahams', 'Zanele Zulu'])
        self.assertTrue(all(row['role'] == 'supervisor' for row in response.data))

    def test_requires_session(self):
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
