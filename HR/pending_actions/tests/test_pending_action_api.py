"""
API Tests for the pending actions endpoints.
"""
from datetime import timedelta
from unittest import mock

from django.db import DatabaseError
from django.test import TestCase
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APIClient

from core.user_accounts.models import RoleChoices
from HR.person.models import ProfileChangeRequest
from HR.performance.models import Goal
from HR.pending_actions.collectors.individual import GoalDraftCollector
from HR.pending_actions.tests.fixtures import (
    create_company,
    create_employee,
    create_goal,
    create_leave_request,
    create_profile_change,
    create_user,
)


class PendingActionAPITest(TestCase):
    """Test GET /hr/pending-actions/"""

    def setUp(self):
        self.client = APIClient()
        self.url = '/hr/pending-actions/'
        self.today = timezone.localdate()

        self.company = create_company()
        self.manager = create_employee(self.company, name='Mia Manager')
        self.report = create_employee(self.company, name='Rui Report', manager=self.manager)
        self.manager_user = create_user(RoleChoices.MANAGER, employee=self.manager)
        self.report_user = create_user(RoleChoices.EMPLOYEE, employee=self.report)

    def test_requires_authentication(self):
        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.json()['status'], 'error')

    def test_feed_in_standard_envelope(self):
        leave = create_leave_request(self.report, self.today + timedelta(days=1))
        self.client.force_authenticate(user=self.manager_user)

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        body = response.json()
        self.assertEqual(body['status'], 'success')
        self.assertEqual(body['message'], '')
        self.assertEqual(len(body['data']), 1)

        item = body['data'][0]
        self.assertEqual(
            set(item),
            {'id', 'category', 'title', 'description', 'priority', 'dueDate', 'sourceId', 'link', 'actionable'}
        )
        self.assertEqual(item['id'], f'leave-approval-{leave.pk}')
        self.assertEqual(item['category'], 'leave-approval')
        self.assertEqual(item['priority'], 'URGENT')
        self.assertEqual(item['sourceId'], str(leave.pk))
        self.assertIsNotNone(item['dueDate'])
        self.assertTrue(item['actionable'])

    def test_undated_record_has_null_due_date(self):
        create_goal(self.report)
        self.client.force_authenticate(user=self.report_user)

        item = self.client.get(self.url).json()['data'][0]

        self.assertEqual(item['category'], 'goal-draft')
        self.assertIsNone(item['dueDate'])

    def test_empty_feed_is_success(self):
        self.client.force_authenticate(user=self.report_user)

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json()['data'], [])

    def test_limit_parameter(self):
        for i in range(5):
            create_goal(self.report, title=f'Goal {i}')
        self.client.force_authenticate(user=self.report_user)

        response = self.client.get(self.url, {'limit': 2})

        self.assertEqual(len(response.json()['data']), 2)

    def test_invalid_limit_falls_back_to_default(self):
        for i in range(3):
            create_goal(self.report, title=f'Goal {i}')
        self.client.force_authenticate(user=self.report_user)

        for raw in ('abc', '0', '-1', '500'):
            with self.subTest(limit=raw):
                response = self.client.get(self.url, {'limit': raw})
                self.assertEqual(response.status_code, status.HTTP_200_OK)
                self.assertEqual(len(response.json()['data']), 3)

    def test_source_failure_returns_503(self):
        create_goal(self.report)
        self.client.force_authenticate(user=self.report_user)

        with mock.patch.object(GoalDraftCollector, 'collect', side_effect=DatabaseError('boom')):
            response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)
        self.assertEqual(response.json(), {
            'status': 'error',
            'message': 'Could not load pending actions',
            'data': None,
        })

    def test_post_not_allowed(self):
        self.client.force_authenticate(user=self.report_user)

        response = self.client.post(self.url, {}, format='json')

        self.assertEqual(response.status_code, status.HTTP_405_METHOD_NOT_ALLOWED)


class PendingApprovalAPITest(TestCase):
    """Test GET /hr/pending-actions/approvals/"""

    def setUp(self):
        self.client = APIClient()
        self.url = '/hr/pending-actions/approvals/'
        self.today = timezone.localdate()

        self.company = create_company()
        self.manager = create_employee(self.company, name='Mia Manager')
        self.report = create_employee(self.company, name='Rui Report', manager=self.manager)
        self.outsider = create_employee(self.company, name='Olga Outsider')
        self.manager_user = create_user(RoleChoices.MANAGER, employee=self.manager)
        self.report_user = create_user(RoleChoices.EMPLOYEE, employee=self.report)

    def test_manager_summary(self):
        leave = create_leave_request(self.report, self.today + timedelta(days=3))
        create_leave_request(self.outsider, self.today + timedelta(days=3))
        create_profile_change(self.report, field_name='phone', old_value=None, new_value='010-9999')
        create_profile_change(self.report, status=ProfileChangeRequest.Status.REJECTED)
        create_goal(self.report, title='Mentor a junior', status=Goal.Status.PENDING_APPROVAL)
        self.client.force_authenticate(user=self.manager_user)

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        data = response.json()['data']
        self.assertEqual(data['total_count'], 3)

        self.assertEqual(len(data['leaves']), 1)
        self.assertEqual(data['leaves'][0]['id'], leave.pk)
        self.assertEqual(data['leaves'][0]['type'], 'LEAVE')
        self.assertEqual(data['leaves'][0]['employee_name'], 'Rui Report')
        self.assertEqual(data['leaves'][0]['employee_number'], self.report.employee_number)
        self.assertEqual(data['leaves'][0]['detail'], 'Annual Leave 1 days')

        self.assertEqual(data['profile_changes'][0]['detail'], 'phone: - -> 010-9999')
        self.assertEqual(data['goals'][0]['detail'], 'Mentor a junior')
        self.assertEqual(data['goals'][0]['weight'], '20.00')

    def test_queues_capped_at_ten_newest_first(self):
        for i in range(12):
            create_profile_change(self.report, field_name=f'field_{i}')
        self.client.force_authenticate(user=self.manager_user)

        data = self.client.get(self.url).json()['data']

        self.assertEqual(len(data['profile_changes']), 10)
        self.assertEqual(data['profile_changes'][0]['detail'].split(':')[0], 'field_11')
        self.assertEqual(data['total_count'], 10)

    def test_non_manager_forbidden(self):
        self.client.force_authenticate(user=self.report_user)

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.json()['status'], 'error')
        self.assertIsNone(response.json()['data'])
