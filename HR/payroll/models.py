from django.db import models
from core.base.models import AuditMixin
from core.base.managers import CompanyScopedManager


class PayrollRun(AuditMixin, models.Model):
    """
    Monthly payroll run of a company.

    Lifecycle: DRAFT -> REVIEW -> APPROVED -> PAID. DRAFT and REVIEW runs
    still need an HR administrator.
    """

    class Status(models.TextChoices):
        DRAFT = 'DRAFT', 'Draft'
        REVIEW = 'REVIEW', 'Review'
        APPROVED = 'APPROVED', 'Approved'
        PAID = 'PAID', 'Paid'

    OPEN_STATUSES = (Status.DRAFT, Status.REVIEW)

    company = models.ForeignKey(
        'person.Company',
        on_delete=models.CASCADE,
        related_name='payroll_runs'
    )
    name = models.CharField(max_length=100, blank=True, default='')
    year_month = models.CharField(max_length=7, help_text="Payroll month as YYYY-MM")
    pay_date = models.DateTimeField(null=True, blank=True)
    status = models.CharField(
        max_length=10,
        choices=Status.choices,
        default=Status.DRAFT
    )

    objects = CompanyScopedManager()

    class Meta:
        db_table = 'payroll_run'
        ordering = ['-year_month']
        unique_together = [('company', 'year_month', 'name')]

    def __str__(self):
        return self.name or self.year_month
