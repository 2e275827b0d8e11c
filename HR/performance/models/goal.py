from decimal import Decimal
from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
from core.base.models import AuditMixin
from core.base.managers import CompanyScopedManager


class Goal(AuditMixin, models.Model):
    """
    Management-by-objectives goal of an employee.

    Lifecycle: DRAFT -> PENDING_APPROVAL -> APPROVED (or REJECTED back to
    the employee). The employee's manager approves.
    """

    class Status(models.TextChoices):
        DRAFT = 'DRAFT', 'Draft'
        PENDING_APPROVAL = 'PENDING_APPROVAL', 'Pending Approval'
        APPROVED = 'APPROVED', 'Approved'
        REJECTED = 'REJECTED', 'Rejected'

    employee = models.ForeignKey(
        'person.Employee',
        on_delete=models.CASCADE,
        related_name='goals'
    )
    company = models.ForeignKey(
        'person.Company',
        on_delete=models.CASCADE,
        related_name='goals'
    )
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True, default='')
    weight = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        default=Decimal('0'),
        validators=[MinValueValidator(Decimal('0')), MaxValueValidator(Decimal('100'))],
        help_text="Share of the employee's total objectives, in percent"
    )
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.DRAFT
    )

    objects = CompanyScopedManager()

    class Meta:
        db_table = 'perf_goal'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['company', 'status']),
            models.Index(fields=['employee', 'status']),
        ]

    def __str__(self):
        return f"{self.title} ({self.status})"
