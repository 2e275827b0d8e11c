"""
Tests for the role scope resolver.
"""
from django.test import SimpleTestCase, TestCase

from core.user_accounts.models import RoleChoices
from HR.pending_actions.dtos import ScopeGroup
from HR.pending_actions.scope import groups_for_role, resolve_scope
from HR.pending_actions.tests.fixtures import create_company, create_employee, create_user


class GroupsForRoleTest(SimpleTestCase):

    def test_employee_gets_individual_only(self):
        self.assertEqual(groups_for_role('employee'), frozenset({ScopeGroup.INDIVIDUAL}))

    def test_manager_adds_manager_group(self):
        self.assertEqual(
            groups_for_role('manager'),
            frozenset({ScopeGroup.INDIVIDUAL, ScopeGroup.MANAGER})
        )

    def test_admin_roles_get_every_group(self):
        for role in ('hr_admin', 'super_admin'):
            with self.subTest(role=role):
                self.assertEqual(
                    groups_for_role(role),
                    frozenset({ScopeGroup.INDIVIDUAL, ScopeGroup.MANAGER, ScopeGroup.HR})
                )

    def test_executive_unlocks_nothing_extra(self):
        self.assertEqual(groups_for_role('executive'), frozenset({ScopeGroup.INDIVIDUAL}))

    def test_unknown_or_missing_role_is_individual(self):
        for role in ('intern', '', None):
            with self.subTest(role=role):
                self.assertEqual(groups_for_role(role), frozenset({ScopeGroup.INDIVIDUAL}))

    def test_role_choices_members_are_accepted(self):
        self.assertIn(ScopeGroup.HR, groups_for_role(RoleChoices.HR_ADMIN))


class ResolveScopeTest(TestCase):

    def setUp(self):
        self.company = create_company()
        self.employee = create_employee(self.company)

    def test_scope_carries_employee_and_company(self):
        user = create_user(RoleChoices.MANAGER, employee=self.employee)
        scope = resolve_scope(user)

        self.assertEqual(scope.user_id, user.pk)
        self.assertEqual(scope.role, 'manager')
        self.assertEqual(scope.employee_id, self.employee.pk)
        self.assertEqual(scope.company_id, self.company.pk)
        self.assertTrue(scope.has_group(ScopeGroup.MANAGER))
        self.assertFalse(scope.has_group(ScopeGroup.HR))
        self.assertFalse(scope.is_executive)

    def test_company_falls_back_to_employee_company(self):
        user = create_user(RoleChoices.EMPLOYEE, employee=self.employee)
        user.company = None
        user.save()

        scope = resolve_scope(user)
        self.assertEqual(scope.company_id, self.company.pk)

    def test_account_without_employee(self):
        user = create_user(RoleChoices.HR_ADMIN, company=self.company)
        scope = resolve_scope(user)

        self.assertIsNone(scope.employee_id)
        self.assertEqual(scope.company_id, self.company.pk)
        self.assertTrue(scope.has_group(ScopeGroup.HR))

    def test_executive_flag(self):
        user = create_user(RoleChoices.EXECUTIVE, employee=self.employee)
        scope = resolve_scope(user)

        self.assertTrue(scope.is_executive)
        self.assertEqual(scope.groups, frozenset({ScopeGroup.INDIVIDUAL}))

    def test_user_role_helpers_match_scope_groups(self):
        """CustomUser.is_manager()/is_hr_admin() agree with the collector groups"""
        roles = [choice.value for choice in RoleChoices] + ['intern']
        for role in roles:
            with self.subTest(role=role):
                user = create_user(role, company=self.company, email=f'{role}-helpers@example.com')
                groups = resolve_scope(user).groups

                self.assertEqual(user.is_manager(), ScopeGroup.MANAGER in groups)
                self.assertEqual(user.is_hr_admin(), ScopeGroup.HR in groups)
