from django.db import models
from django.utils import timezone


class StatusChoices(models.TextChoices):
    """
    Standard status choices for master records (companies, employees).

    Workflow records (leave requests, goals, payroll runs) define their own
    TextChoices next to the model.
    """
    ACTIVE = 'ACTIVE', 'Active'
    INACTIVE = 'INACTIVE', 'Inactive'


class AuditMixin(models.Model):
    """
    Adds creation and modification timestamps.

    Fields:
        - created_at: Timestamp when record was created
        - updated_at: Timestamp when record was last modified

    Usage:
        class LeaveRequest(AuditMixin):
            start_date = models.DateField()

    The manager approval summary orders pending requests by created_at.
    """
    created_at = models.DateTimeField(
        default=timezone.now,
        db_index=True,
        help_text="Timestamp when record was created"
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        help_text="Timestamp when record was last modified"
    )

    class Meta:
        abstract = True


class SoftDeleteMixin(models.Model):
    """
    Mixin for records that are hidden instead of deleted.

    A record is deleted when deleted_at is set. Readers filter with
    SoftDeleteQuerySet.alive().

    Methods:
        - soft_delete(): Stamp deleted_at with the current time
    """
    deleted_at = models.DateTimeField(
        null=True,
        blank=True,
        help_text="Set when the record is soft deleted. NULL = live record"
    )

    class Meta:
        abstract = True

    @property
    def is_deleted(self):
        return self.deleted_at is not None

    def soft_delete(self):
        """
        Mark the record as deleted without removing the row.

        Example:
            permit = WorkPermit.objects.get(permit_number='WP-1')
            permit.soft_delete()
        """
        self.deleted_at = timezone.now()
        self.save(update_fields=['deleted_at'])
