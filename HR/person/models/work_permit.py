from django.db import models
from core.base.models import AuditMixin, SoftDeleteMixin
from core.base.managers import SoftDeleteManager


class WorkPermit(SoftDeleteMixin, AuditMixin, models.Model):
    """
    Work permit / visa held by a foreign employee.

    Only ACTIVE, non-deleted permits are tracked for expiry.
    """

    class Status(models.TextChoices):
        ACTIVE = 'ACTIVE', 'Active'
        EXPIRED = 'EXPIRED', 'Expired'
        REVOKED = 'REVOKED', 'Revoked'

    employee = models.ForeignKey(
        'person.Employee',
        on_delete=models.CASCADE,
        related_name='work_permits'
    )
    company = models.ForeignKey(
        'person.Company',
        on_delete=models.CASCADE,
        related_name='work_permits'
    )
    permit_type = models.CharField(max_length=50, help_text="Visa or permit category (e.g., 'E-7')")
    permit_number = models.CharField(max_length=100, blank=True, default='')
    issue_date = models.DateField(null=True, blank=True)
    expiry_date = models.DateField(null=True, blank=True)
    status = models.CharField(
        max_length=10,
        choices=Status.choices,
        default=Status.ACTIVE
    )

    objects = SoftDeleteManager()

    class Meta:
        db_table = 'hr_work_permit'
        ordering = ['expiry_date']
        indexes = [
            models.Index(fields=['company', 'status', 'expiry_date']),
        ]

    def __str__(self):
        return f"{self.permit_type} {self.permit_number} - {self.employee.name}"
