"""
Pending Actions Services

Services:
- PendingActionService: Role-scoped, ranked feed of pending items
- ManagerApprovalService: Approval queues of a manager's direct reports
"""

from .pending_action_service import PendingActionService
from .approval_service import ManagerApprovalService

__all__ = [
    'PendingActionService',
    'ManagerApprovalService',
]
