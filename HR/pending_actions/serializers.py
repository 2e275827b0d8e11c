"""
Serializers for the pending actions feed and the manager hub.

Feed records are rendered with the camelCase keys the home page widget
reads (dueDate, sourceId).
"""
from rest_framework import serializers


class ActionRecordSerializer(serializers.Serializer):
    """Read serializer for ActionRecord"""
    id = serializers.CharField(read_only=True)
    category = serializers.CharField(read_only=True)
    title = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True)
    priority = serializers.CharField(read_only=True)
    dueDate = serializers.DateTimeField(source='due_date', read_only=True, allow_null=True)
    sourceId = serializers.CharField(source='source_id', read_only=True)
    link = serializers.CharField(read_only=True)
    actionable = serializers.BooleanField(read_only=True)


class ApprovalRowSerializer(serializers.Serializer):
    """Common columns of a manager hub row"""
    id = serializers.IntegerField(read_only=True)
    type = serializers.CharField(read_only=True)
    employee_name = serializers.CharField(read_only=True)
    employee_number = serializers.CharField(read_only=True)
    detail = serializers.CharField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)


class LeaveApprovalRowSerializer(ApprovalRowSerializer):
    start_date = serializers.DateField(read_only=True)
    end_date = serializers.DateField(read_only=True)


class GoalApprovalRowSerializer(ApprovalRowSerializer):
    weight = serializers.DecimalField(max_digits=5, decimal_places=2, read_only=True)


class PendingApprovalSummarySerializer(serializers.Serializer):
    """Read serializer for ManagerApprovalService.get_pending_approvals()"""
    leaves = LeaveApprovalRowSerializer(many=True, read_only=True)
    profile_changes = ApprovalRowSerializer(many=True, read_only=True)
    goals = GoalApprovalRowSerializer(many=True, read_only=True)
    total_count = serializers.IntegerField(read_only=True)
