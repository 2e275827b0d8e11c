"""
Collectors for line managers: approvals and expiries of direct reports,
plus the evaluations the caller has to write as evaluator.
"""

from datetime import timedelta

from HR.leave.models import LeaveRequest
from HR.performance.models import Goal, PerformanceEvaluation
from HR.person.models import Contract, ProfileChangeRequest, WorkPermit

from ..dtos import ActionCategory, Priority, ScopeGroup
from .base import PendingActionCollector, registry


def format_days(days):
    """'3' for whole days, '1.5' for half days."""
    if days == days.to_integral_value():
        return str(int(days))
    return str(days)


@registry.register
class LeaveApprovalCollector(PendingActionCollector):
    category = ActionCategory.LEAVE_APPROVAL
    group = ScopeGroup.MANAGER
    limit = 5

    def collect(self, scope, context):
        requests = LeaveRequest.objects.for_direct_reports_of(
            scope.employee_id, company_id=scope.company_id
        ).filter(
            status=LeaveRequest.Status.PENDING,
        ).select_related('employee').order_by('start_date', 'pk')[:self.limit]

        return [
            self.build(
                context,
                source_id=leave.pk,
                title=f"Approve leave: {leave.employee.name}",
                description=(
                    f"{leave.start_date:%Y-%m-%d} ~ {leave.end_date:%Y-%m-%d} "
                    f"({format_days(leave.days)} days)"
                ),
                link='/leave/requests',
                due_date=leave.start_date,
            )
            for leave in requests
        ]


@registry.register
class ProfileChangeApprovalCollector(PendingActionCollector):
    category = ActionCategory.PROFILE_CHANGE_APPROVAL
    group = ScopeGroup.MANAGER
    limit = 5

    def collect(self, scope, context):
        requests = ProfileChangeRequest.objects.for_direct_reports_of(
            scope.employee_id, company_id=scope.company_id
        ).filter(
            status=ProfileChangeRequest.Status.PENDING,
        ).select_related('employee').order_by('created_at', 'pk')[:self.limit]

        return [
            self.build(
                context,
                source_id=change.pk,
                title=f"Approve profile change: {change.employee.name}",
                description=f"Requested change of {change.field_name}",
                link='/employees',
                priority=Priority.NORMAL,
            )
            for change in requests
        ]


@registry.register
class ManagerEvaluationCollector(PendingActionCollector):
    category = ActionCategory.MANAGER_EVALUATION_PENDING
    group = ScopeGroup.MANAGER
    limit = 5

    def collect(self, scope, context):
        evaluations = PerformanceEvaluation.objects.for_company(scope.company_id).filter(
            evaluator_id=scope.employee_id,
            eval_type=PerformanceEvaluation.EvalType.MANAGER,
            status=PerformanceEvaluation.Status.DRAFT,
        ).select_related('employee', 'cycle').order_by('cycle__eval_end', 'pk')[:self.limit]

        return [
            self.build(
                context,
                source_id=evaluation.pk,
                title=f"Evaluate: {evaluation.employee.name}",
                description=f"{evaluation.cycle.name} manager evaluation",
                link='/performance/evaluations',
                due_date=evaluation.cycle.eval_end,
            )
            for evaluation in evaluations
        ]


@registry.register
class GoalApprovalCollector(PendingActionCollector):
    category = ActionCategory.GOAL_APPROVAL_PENDING
    group = ScopeGroup.MANAGER
    limit = 5

    def collect(self, scope, context):
        goals = Goal.objects.for_direct_reports_of(
            scope.employee_id, company_id=scope.company_id
        ).filter(
            status=Goal.Status.PENDING_APPROVAL,
        ).select_related('employee').order_by('created_at', 'pk')[:self.limit]

        return [
            self.build(
                context,
                source_id=goal.pk,
                title=f"Approve goal: {goal.employee.name}",
                description=goal.title,
                link='/performance/goals',
                priority=Priority.NORMAL,
            )
            for goal in goals
        ]


@registry.register
class ContractExpiryCollector(PendingActionCollector):
    category = ActionCategory.CONTRACT_EXPIRING
    group = ScopeGroup.MANAGER
    limit = 3

    def collect(self, scope, context):
        horizon = context.today + timedelta(days=context.config.contract_lookahead_days)
        contracts = Contract.objects.for_direct_reports_of(
            scope.employee_id, company_id=scope.company_id
        ).filter(
            contract_end_date__gte=context.today,
            contract_end_date__lte=horizon,
        ).select_related('employee').order_by('contract_end_date', 'pk')[:self.limit]

        return [
            self.build(
                context,
                source_id=contract.pk,
                title=f"Contract expiring: {contract.employee.name}",
                description=f"Expires on {contract.contract_end_date:%Y-%m-%d}",
                link='/employees',
                due_date=contract.contract_end_date,
                actionable=False,
            )
            for contract in contracts
        ]


@registry.register
class WorkPermitExpiryCollector(PendingActionCollector):
    category = ActionCategory.WORK_PERMIT_EXPIRING
    group = ScopeGroup.MANAGER
    limit = 3

    def collect(self, scope, context):
        horizon = context.today + timedelta(days=context.config.work_permit_lookahead_days)
        permits = WorkPermit.objects.alive().for_direct_reports_of(
            scope.employee_id, company_id=scope.company_id
        ).filter(
            status=WorkPermit.Status.ACTIVE,
            expiry_date__gte=context.today,
            expiry_date__lte=horizon,
        ).select_related('employee').order_by('expiry_date', 'pk')[:self.limit]

        return [
            self.build(
                context,
                source_id=permit.pk,
                title=f"Work permit expiring: {permit.employee.name}",
                description=f"{permit.permit_type} expires on {permit.expiry_date:%Y-%m-%d}",
                link='/employees',
                due_date=permit.expiry_date,
                actionable=False,
            )
            for permit in permits
        ]
