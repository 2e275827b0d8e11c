"""
Collectors for HR administrators: company-wide queues.

Priorities here are forced by the record state, not by a deadline.
"""

from HR.helpdesk.models import ChatMessage
from HR.leave.models import LeaveRequest
from HR.payroll.models import PayrollRun

from ..dtos import ActionCategory, Priority, ScopeGroup
from .base import PendingActionCollector, registry


@registry.register
class PayrollReviewCollector(PendingActionCollector):
    category = ActionCategory.PAYROLL_REVIEW
    group = ScopeGroup.HR
    limit = 3
    requires_employee = False

    def collect(self, scope, context):
        runs = PayrollRun.objects.for_company(scope.company_id).filter(
            status__in=PayrollRun.OPEN_STATUSES,
        ).order_by('year_month', 'pk')[:self.limit]

        return [
            self.build(
                context,
                source_id=run.pk,
                title=f"Process payroll: {run.name or run.year_month}",
                description=f"{run.get_status_display()} status",
                link=f'/payroll/{run.pk}',
                due_date=run.pay_date,
                # A run under review is one step from payout.
                priority=Priority.HIGH if run.status == PayrollRun.Status.REVIEW else Priority.NORMAL,
            )
            for run in runs
        ]


@registry.register
class BulkLeaveApprovalCollector(PendingActionCollector):
    category = ActionCategory.LEAVE_APPROVAL_BULK
    group = ScopeGroup.HR
    limit = 1
    requires_employee = False

    def collect(self, scope, context):
        pending = LeaveRequest.objects.for_company(scope.company_id).filter(
            status=LeaveRequest.Status.PENDING,
        ).count()

        if pending == 0:
            return []

        threshold = context.config.bulk_leave_high_threshold
        return [
            self.build(
                context,
                source_id='all',
                title="Company-wide leave approvals",
                description=f"{pending} leave requests are waiting for a decision",
                link='/leave/requests',
                priority=Priority.HIGH if pending > threshold else Priority.NORMAL,
            )
        ]


@registry.register
class SupportEscalationCollector(PendingActionCollector):
    category = ActionCategory.SUPPORT_ESCALATION
    group = ScopeGroup.HR
    limit = 3
    requires_employee = False

    def collect(self, scope, context):
        messages = ChatMessage.objects.for_company(
            scope.company_id
        ).open_escalations().order_by('created_at', 'pk')[:self.limit]

        return [
            self.build(
                context,
                source_id=message.pk,
                title="Chatbot escalation",
                description="An employee asked to talk to an HR officer.",
                link='/hr-chat/escalations',
                priority=Priority.HIGH,
            )
            for message in messages
        ]
