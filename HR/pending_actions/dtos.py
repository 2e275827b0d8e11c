"""
Data Transfer Objects for Pending Actions

The feed is assembled from these immutable value objects; none of them is
persisted.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import FrozenSet, Optional

from django.db import models


class ActionCategory(models.TextChoices):
    """Kind of pending action; one per collector."""
    GOAL_DRAFT = 'goal-draft', 'Goal draft'
    SELF_EVALUATION_PENDING = 'self-evaluation-pending', 'Self evaluation pending'
    ONBOARDING_TASK = 'onboarding-task', 'Onboarding task'
    ONE_ON_ONE_SCHEDULED = 'one-on-one-scheduled', 'One-on-one scheduled'
    LEAVE_APPROVAL = 'leave-approval', 'Leave approval'
    PROFILE_CHANGE_APPROVAL = 'profile-change-approval', 'Profile change approval'
    MANAGER_EVALUATION_PENDING = 'manager-evaluation-pending', 'Manager evaluation pending'
    GOAL_APPROVAL_PENDING = 'goal-approval-pending', 'Goal approval pending'
    CONTRACT_EXPIRING = 'contract-expiring', 'Contract expiring'
    WORK_PERMIT_EXPIRING = 'work-permit-expiring', 'Work permit expiring'
    PAYROLL_REVIEW = 'payroll-review', 'Payroll review'
    LEAVE_APPROVAL_BULK = 'leave-approval-bulk', 'Company-wide leave approvals'
    SUPPORT_ESCALATION = 'support-escalation', 'Support escalation'


class Priority(models.TextChoices):
    """Urgency tier, most urgent first."""
    URGENT = 'URGENT', 'Urgent'
    HIGH = 'HIGH', 'High'
    NORMAL = 'NORMAL', 'Normal'


PRIORITY_ORDER = (Priority.URGENT, Priority.HIGH, Priority.NORMAL)


def priority_rank(priority) -> int:
    """0 for URGENT, 1 for HIGH, 2 for NORMAL."""
    return PRIORITY_ORDER.index(Priority(priority))


class ScopeGroup(models.TextChoices):
    """Collector groups a caller's role can unlock."""
    INDIVIDUAL = 'individual', 'Individual contributor'
    MANAGER = 'manager', 'Manager'
    HR = 'hr', 'HR administration'


@dataclass(frozen=True)
class ActionRecord:
    """One pending item of the feed"""
    id: str
    category: ActionCategory
    title: str
    description: str
    priority: Priority
    due_date: Optional[datetime]
    source_id: str
    link: str
    actionable: bool

    @property
    def priority_rank(self) -> int:
        return priority_rank(self.priority)

    def sort_key(self):
        """
        Ranking key: priority tier, then records with a due date (earliest
        first) before records without one.
        """
        if self.due_date is None:
            return (self.priority_rank, 1)
        return (self.priority_rank, 0, self.due_date)


@dataclass(frozen=True)
class CallerScope:
    """Who is asking and which collector groups apply to them"""
    user_id: int
    role: str
    employee_id: Optional[int] = None
    company_id: Optional[int] = None
    groups: FrozenSet[str] = field(default_factory=lambda: frozenset({ScopeGroup.INDIVIDUAL}))
    is_executive: bool = False

    def has_group(self, group) -> bool:
        return str(group) in {str(g) for g in self.groups}


@dataclass(frozen=True)
class CollectionContext:
    """Per-call values shared by all collectors"""
    now: datetime
    today: date
    config: 'PendingActionConfig'  # noqa: F821
