from django.db import models
from core.base.models import AuditMixin
from core.base.managers import CompanyScopedQuerySet


class ProfileChangeRequestQuerySet(CompanyScopedQuerySet):
    # The request has no company column; it is reached through the employee.
    company_lookup = 'employee__company_id'


class ProfileChangeRequest(AuditMixin, models.Model):
    """
    Self-service request from an employee to change a profile field.

    The employee's manager approves or rejects it.
    """

    class Status(models.TextChoices):
        PENDING = 'PENDING', 'Pending'
        APPROVED = 'APPROVED', 'Approved'
        REJECTED = 'REJECTED', 'Rejected'

    employee = models.ForeignKey(
        'person.Employee',
        on_delete=models.CASCADE,
        related_name='profile_change_requests'
    )
    field_name = models.CharField(max_length=100, help_text="Profile field to change (e.g., 'phone')")
    old_value = models.TextField(null=True, blank=True)
    new_value = models.TextField()
    status = models.CharField(
        max_length=10,
        choices=Status.choices,
        default=Status.PENDING
    )

    objects = ProfileChangeRequestQuerySet.as_manager()

    class Meta:
        db_table = 'hr_profile_change_request'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.employee.name}: {self.field_name}"
