from typing import Dict, List

from rest_framework.exceptions import PermissionDenied

from HR.leave.models import LeaveRequest
from HR.performance.models import Goal
from HR.person.models import ProfileChangeRequest
from HR.pending_actions.collectors.manager import format_days
from HR.pending_actions.dtos import ScopeGroup
from HR.pending_actions.scope import resolve_scope


class ManagerApprovalService:
    """Service layer for the manager hub approval queues"""

    QUEUE_SIZE = 10

    @staticmethod
    def get_pending_approvals(user) -> Dict:
        """
        Newest pending leave, profile change and goal requests of the
        caller's direct reports.

        Raises:
            PermissionDenied: If the caller is not a manager or has no
                employee record
        """
        scope = resolve_scope(user)
        if not scope.has_group(ScopeGroup.MANAGER) or scope.employee_id is None:
            raise PermissionDenied("Only managers can view pending approvals")

        leaves = ManagerApprovalService._leave_rows(scope)
        profile_changes = ManagerApprovalService._profile_change_rows(scope)
        goals = ManagerApprovalService._goal_rows(scope)

        return {
            'leaves': leaves,
            'profile_changes': profile_changes,
            'goals': goals,
            'total_count': len(leaves) + len(profile_changes) + len(goals),
        }

    @staticmethod
    def _leave_rows(scope) -> List[Dict]:
        leaves = LeaveRequest.objects.for_direct_reports_of(
            scope.employee_id, company_id=scope.company_id
        ).filter(
            status=LeaveRequest.Status.PENDING
        ).select_related('employee').order_by('-created_at', '-pk')[:ManagerApprovalService.QUEUE_SIZE]

        return [
            {
                'id': leave.pk,
                'type': 'LEAVE',
                'employee_name': leave.employee.name,
                'employee_number': leave.employee.employee_number,
                'detail': f"{leave.get_leave_type_display()} {format_days(leave.days)} days",
                'start_date': leave.start_date,
                'end_date': leave.end_date,
                'created_at': leave.created_at,
            }
            for leave in leaves
        ]

    @staticmethod
    def _profile_change_rows(scope) -> List[Dict]:
        changes = ProfileChangeRequest.objects.for_direct_reports_of(
            scope.employee_id, company_id=scope.company_id
        ).filter(
            status=ProfileChangeRequest.Status.PENDING
        ).select_related('employee').order_by('-created_at', '-pk')[:ManagerApprovalService.QUEUE_SIZE]

        return [
            {
                'id': change.pk,
                'type': 'PROFILE_CHANGE',
                'employee_name': change.employee.name,
                'employee_number': change.employee.employee_number,
                'detail': f"{change.field_name}: {change.old_value or '-'} -> {change.new_value}",
                'created_at': change.created_at,
            }
            for change in changes
        ]

    @staticmethod
    def _goal_rows(scope) -> List[Dict]:
        goals = Goal.objects.for_direct_reports_of(
            scope.employee_id, company_id=scope.company_id
        ).filter(
            status=Goal.Status.PENDING_APPROVAL
        ).select_related('employee').order_by('-created_at', '-pk')[:ManagerApprovalService.QUEUE_SIZE]

        return [
            {
                'id': goal.pk,
                'type': 'GOAL',
                'employee_name': goal.employee.name,
                'employee_number': goal.employee.employee_number,
                'detail': goal.title,
                'weight': goal.weight,
                'created_at': goal.created_at,
            }
            for goal in goals
        ]
