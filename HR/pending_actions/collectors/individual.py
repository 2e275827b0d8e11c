"""
Collectors every caller gets: records where the caller is the employee
(or a participant).
"""

from django.utils import timezone

from HR.performance.models import Goal, PerformanceEvaluation, OneOnOne
from HR.person.models import EmployeeOnboardingTask

from ..dtos import ActionCategory, Priority, ScopeGroup
from .base import PendingActionCollector, registry


@registry.register
class GoalDraftCollector(PendingActionCollector):
    category = ActionCategory.GOAL_DRAFT
    group = ScopeGroup.INDIVIDUAL
    limit = 5

    def collect(self, scope, context):
        goals = Goal.objects.for_employee(
            scope.employee_id, company_id=scope.company_id
        ).filter(status=Goal.Status.DRAFT).order_by('created_at', 'pk')[:self.limit]

        return [
            self.build(
                context,
                source_id=goal.pk,
                title=f"Complete goal: {goal.title}",
                description="Finish the draft and submit it for approval.",
                link='/performance/goals',
                priority=Priority.NORMAL,
            )
            for goal in goals
        ]


@registry.register
class SelfEvaluationCollector(PendingActionCollector):
    category = ActionCategory.SELF_EVALUATION_PENDING
    group = ScopeGroup.INDIVIDUAL
    limit = 5

    def collect(self, scope, context):
        evaluations = PerformanceEvaluation.objects.for_employee(
            scope.employee_id, company_id=scope.company_id
        ).filter(
            eval_type=PerformanceEvaluation.EvalType.SELF,
            status=PerformanceEvaluation.Status.DRAFT,
        ).select_related('cycle').order_by('cycle__eval_end', 'pk')[:self.limit]

        return [
            self.build(
                context,
                source_id=evaluation.pk,
                title="Write your self evaluation",
                description=f"Complete your self evaluation for {evaluation.cycle.name}.",
                link='/performance/evaluations',
                due_date=evaluation.cycle.eval_end,
            )
            for evaluation in evaluations
        ]


@registry.register
class OnboardingTaskCollector(PendingActionCollector):
    category = ActionCategory.ONBOARDING_TASK
    group = ScopeGroup.INDIVIDUAL
    limit = 5

    def collect(self, scope, context):
        tasks = EmployeeOnboardingTask.objects.for_employee(
            scope.employee_id, company_id=scope.company_id
        ).filter(
            status=EmployeeOnboardingTask.Status.PENDING,
        ).select_related('task')[:self.limit]

        return [
            self.build(
                context,
                source_id=task.pk,
                title=f"Onboarding: {task.task.title}",
                description="Complete this onboarding task.",
                link='/onboarding',
                priority=Priority.NORMAL,
            )
            for task in tasks
        ]


@registry.register
class OneOnOneCollector(PendingActionCollector):
    category = ActionCategory.ONE_ON_ONE_SCHEDULED
    group = ScopeGroup.INDIVIDUAL
    limit = 3

    def collect(self, scope, context):
        meetings = OneOnOne.objects.for_company(scope.company_id).with_participant(
            scope.employee_id
        ).filter(
            status=OneOnOne.Status.SCHEDULED,
            scheduled_at__gte=context.now,
        ).select_related('employee', 'manager').order_by('scheduled_at', 'pk')[:self.limit]

        records = []
        for meeting in meetings:
            # The other side of the table, seen from the caller.
            if meeting.employee_id == scope.employee_id:
                counterpart = meeting.manager.name
            else:
                counterpart = meeting.employee.name
            when = timezone.localtime(meeting.scheduled_at)
            records.append(self.build(
                context,
                source_id=meeting.pk,
                title="1:1 meeting scheduled",
                description=f"Meeting with {counterpart} on {when:%Y-%m-%d %H:%M}",
                link='/performance/one-on-one',
                due_date=meeting.scheduled_at,
                actionable=False,
            ))
        return records
