from django.db import models
from django.db.models import CheckConstraint, Q, F
from core.base.models import AuditMixin
from core.base.managers import CompanyScopedManager


class Contract(AuditMixin, models.Model):
    """
    Employment contract of an employee.

    Open-ended contracts have no end date; fixed-term contracts expire on
    contract_end_date.
    """
    CONTRACT_TYPE_CHOICES = [
        ('PERMANENT', 'Permanent'),
        ('FIXED_TERM', 'Fixed Term'),
        ('INTERNSHIP', 'Internship'),
    ]

    contract_reference = models.CharField(
        max_length=100,
        unique=True,
        help_text="Unique contract reference number"
    )
    employee = models.ForeignKey(
        'person.Employee',
        on_delete=models.CASCADE,
        related_name='contracts'
    )
    company = models.ForeignKey(
        'person.Company',
        on_delete=models.CASCADE,
        related_name='contracts'
    )
    contract_type = models.CharField(
        max_length=20,
        choices=CONTRACT_TYPE_CHOICES,
        default='FIXED_TERM'
    )
    contract_start_date = models.DateField(help_text="Start date of the contract")
    contract_end_date = models.DateField(
        null=True,
        blank=True,
        help_text="End date of the contract. NULL = open-ended"
    )
    description = models.TextField(blank=True, default='')

    objects = CompanyScopedManager()

    class Meta:
        db_table = 'hr_contract'
        ordering = ['contract_end_date', 'contract_reference']
        indexes = [
            models.Index(fields=['company', 'contract_end_date']),
            models.Index(fields=['employee']),
        ]
        constraints = [
            CheckConstraint(
                condition=Q(contract_end_date__isnull=True) | Q(contract_end_date__gte=F('contract_start_date')),
                name='contract_end_date_gte_start'
            ),
        ]

    def __str__(self):
        return f"{self.contract_reference} - {self.employee.name}"
