from decimal import Decimal
from django.db import models
from django.db.models import CheckConstraint, Q, F
from core.base.models import AuditMixin
from core.base.managers import CompanyScopedManager


class LeaveRequest(AuditMixin, models.Model):
    """
    Leave request of an employee.

    PENDING requests wait for the employee's manager; HR administrators
    see the company-wide backlog.
    """

    class LeaveType(models.TextChoices):
        ANNUAL = 'ANNUAL', 'Annual Leave'
        SICK = 'SICK', 'Sick Leave'
        PARENTAL = 'PARENTAL', 'Parental Leave'
        UNPAID = 'UNPAID', 'Unpaid Leave'

    class Status(models.TextChoices):
        PENDING = 'PENDING', 'Pending'
        APPROVED = 'APPROVED', 'Approved'
        REJECTED = 'REJECTED', 'Rejected'
        CANCELLED = 'CANCELLED', 'Cancelled'

    employee = models.ForeignKey(
        'person.Employee',
        on_delete=models.CASCADE,
        related_name='leave_requests'
    )
    company = models.ForeignKey(
        'person.Company',
        on_delete=models.CASCADE,
        related_name='leave_requests'
    )
    leave_type = models.CharField(
        max_length=10,
        choices=LeaveType.choices,
        default=LeaveType.ANNUAL
    )
    start_date = models.DateField()
    end_date = models.DateField()
    days = models.DecimalField(
        max_digits=5,
        decimal_places=1,
        default=Decimal('1'),
        help_text="Working days requested (half days allowed)"
    )
    reason = models.TextField(blank=True, default='')
    status = models.CharField(
        max_length=10,
        choices=Status.choices,
        default=Status.PENDING
    )

    objects = CompanyScopedManager()

    class Meta:
        db_table = 'leave_request'
        ordering = ['start_date']
        indexes = [
            models.Index(fields=['company', 'status']),
            models.Index(fields=['employee', 'status']),
        ]
        constraints = [
            CheckConstraint(
                condition=Q(end_date__gte=F('start_date')),
                name='leave_end_date_gte_start'
            ),
        ]

    def __str__(self):
        return f"{self.employee.name} {self.start_date} ~ {self.end_date} ({self.status})"
