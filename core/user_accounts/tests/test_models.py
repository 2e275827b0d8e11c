"""
Tests for the user account models.
"""
from django.core.exceptions import PermissionDenied
from django.test import TestCase
from django.contrib.auth import get_user_model

from core.user_accounts.models import RoleChoices, UserType

User = get_user_model()


class CustomUserManagerTest(TestCase):

    def test_create_user_defaults_to_employee(self):
        user = User.objects.create_user(email='Emp@Example.com', name='Emp', password='TestPass123')

        self.assertEqual(user.role, 'employee')
        self.assertEqual(user.email, 'Emp@example.com')
        self.assertTrue(user.check_password('TestPass123'))
        self.assertIsNone(user.company_id)
        self.assertIsNone(user.employee_id)

    def test_user_types_are_shared(self):
        User.objects.create_user(email='a@example.com', name='A', user_type_name=RoleChoices.MANAGER)
        User.objects.create_user(email='b@example.com', name='B', user_type_name='manager')

        self.assertEqual(UserType.objects.filter(type_name='manager').count(), 1)
        self.assertEqual(
            UserType.objects.get(type_name='manager').description,
            'Line manager of one or more employees'
        )

    def test_email_and_name_required(self):
        with self.assertRaises(ValueError):
            User.objects.create_user(email='', name='No Email')
        with self.assertRaises(ValueError):
            User.objects.create_user(email='x@example.com', name='')

    def test_create_superuser(self):
        user = User.objects.create_superuser(email='root@example.com', name='Root', password='TestPass123')
        self.assertTrue(user.is_super_admin())


class RoleHelpersTest(TestCase):

    def make(self, role):
        return User.objects.create_user(email=f'{role}@example.com', name=role, user_type_name=role)

    def test_role_helpers(self):
        employee = self.make('employee')
        manager = self.make('manager')
        hr_admin = self.make('hr_admin')

        self.assertFalse(employee.is_manager())
        self.assertTrue(manager.is_manager())
        self.assertFalse(manager.is_hr_admin())
        self.assertTrue(hr_admin.is_manager())
        self.assertTrue(hr_admin.is_hr_admin())

    def test_super_admin_cannot_be_deleted(self):
        admin = self.make('super_admin')

        with self.assertRaises(PermissionDenied):
            admin.delete()

    def test_regular_user_can_be_deleted(self):
        user = self.make('employee')
        user.delete()
        self.assertFalse(User.objects.filter(email='employee@example.com').exists())
