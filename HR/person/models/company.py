from django.db import models
from core.base.models import AuditMixin, StatusChoices


class Company(AuditMixin, models.Model):
    """
    Tenant of the HR system.

    Every HR record carries the company it belongs to; company-wide
    reads (payroll, escalations, leave counts) filter on it.
    """
    code = models.CharField(
        max_length=50,
        unique=True,
        help_text="Short unique company code (e.g., 'ACME')"
    )
    name = models.CharField(max_length=255)
    status = models.CharField(
        max_length=10,
        choices=StatusChoices.choices,
        default=StatusChoices.ACTIVE,
    )

    class Meta:
        db_table = 'hr_company'
        verbose_name = 'Company'
        verbose_name_plural = 'Companies'
        ordering = ['name']

    def __str__(self):
        return f"{self.code} - {self.name}"
