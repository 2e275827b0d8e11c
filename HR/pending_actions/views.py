"""
API Views for the pending actions feed.
Thin layer: parse the request, call the service, serialize.
"""

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework import status

from hr_project.response_formatter import success_response, error_response

from .config import PendingActionConfig
from .exceptions import PendingActionsUnavailable
from .serializers import ActionRecordSerializer, PendingApprovalSummarySerializer
from .services import PendingActionService, ManagerApprovalService


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def pending_action_list(request):
    """
    Ranked pending actions of the caller.

    GET /hr/pending-actions/
    - Query params: limit (optional, 1..MAX_LIMIT; other values fall back
      to DEFAULT_LIMIT)
    """
    config = PendingActionConfig.from_settings()
    limit = config.clamp_limit(request.query_params.get('limit'))

    try:
        records = PendingActionService.get_pending_actions(
            request.user, limit=limit, config=config
        )
    except PendingActionsUnavailable as e:
        return error_response(
            message=str(e),
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE
        )

    serializer = ActionRecordSerializer(records, many=True)
    return success_response(data=serializer.data)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def pending_approval_summary(request):
    """
    Approval queues of the caller's direct reports.

    GET /hr/pending-actions/approvals/
    - 403 for callers who are not managers
    """
    summary = ManagerApprovalService.get_pending_approvals(request.user)
    serializer = PendingApprovalSummarySerializer(summary)
    return success_response(data=serializer.data)
