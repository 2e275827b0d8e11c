"""
Tests for the authentication API views.
Covers login, the session user endpoint and token refresh.
"""
from rest_framework.test import APITestCase, APIClient
from rest_framework import status
from rest_framework_simplejwt.tokens import RefreshToken
from django.contrib.auth import get_user_model

from core.user_accounts.models import RoleChoices
from HR.person.models import Company, Employee

User = get_user_model()


class LoginAPITest(APITestCase):
    """Test user login endpoint"""

    def setUp(self):
        self.client = APIClient()
        self.url = '/auth/login/'
        self.company = Company.objects.create(code='ACME', name='Acme Corp')
        self.employee = Employee.objects.create(company=self.company, name='Test User')
        self.user = User.objects.create_user(
            email='testuser@example.com',
            name='Test User',
            password='TestPass123',
            user_type_name=RoleChoices.MANAGER,
            company=self.company,
            employee=self.employee,
        )

    def test_login_success(self):
        """Login returns tokens and the caller identity"""
        data = {'email': 'testuser@example.com', 'password': 'TestPass123'}
        response = self.client.post(self.url, data, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        body = response.json()
        self.assertEqual(body['status'], 'success')
        self.assertIn('access', body['data']['tokens'])
        self.assertIn('refresh', body['data']['tokens'])
        self.assertEqual(body['data']['user'], {
            'id': self.user.pk,
            'email': 'testuser@example.com',
            'name': 'Test User',
            'role': 'manager',
            'company_id': self.company.pk,
            'employee_id': self.employee.pk,
        })

    def test_login_wrong_password(self):
        data = {'email': 'testuser@example.com', 'password': 'WrongPass'}
        response = self.client.post(self.url, data, format='json')

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.json()['message'], 'Invalid credentials')

    def test_login_missing_fields(self):
        response = self.client.post(self.url, {'email': 'testuser@example.com'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('password', response.json()['message'])


class SessionUserAPITest(APITestCase):
    """Test GET /auth/me/"""

    def setUp(self):
        self.client = APIClient()
        self.url = '/auth/me/'
        self.user = User.objects.create_user(
            email='hr@example.com',
            name='HR Admin',
            password='TestPass123',
            user_type_name=RoleChoices.HR_ADMIN,
        )

    def test_me_with_bearer_token(self):
        refresh = RefreshToken.for_user(self.user)
        self.client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json()['data']['role'], 'hr_admin')
        self.assertIsNone(response.json()['data']['employee_id'])

    def test_me_unauthenticated(self):
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)


class TokenRefreshAPITest(APITestCase):
    """Test JWT token refresh endpoint"""

    def setUp(self):
        self.client = APIClient()
        self.url = '/auth/token/refresh/'
        self.user = User.objects.create_user(
            email='testuser@example.com',
            name='Test User',
            password='TestPass123',
        )
        self.refresh = RefreshToken.for_user(self.user)

    def test_refresh_token_success(self):
        response = self.client.post(self.url, {'refresh': str(self.refresh)}, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn('access', response.json()['data'])

    def test_refresh_token_invalid(self):
        response = self.client.post(self.url, {'refresh': 'invalid_token'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.json()['status'], 'error')
