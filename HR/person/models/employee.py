from django.db import models
from django.core.exceptions import ValidationError
from core.base.models import AuditMixin, StatusChoices


class Employee(AuditMixin, models.Model):
    """
    Employee of a company.

    The manager reference defines the reporting line: an employee is a
    direct report of the employee referenced by `manager`.
    """
    company = models.ForeignKey(
        'person.Company',
        on_delete=models.PROTECT,
        related_name='employees'
    )
    employee_number = models.CharField(
        max_length=50,
        unique=True,
        blank=True,
        help_text="Globally unique employee identifier (auto-generated: EMP-000001)"
    )
    name = models.CharField(max_length=255)
    email_address = models.EmailField(blank=True, default='')
    manager = models.ForeignKey(
        'self',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='direct_reports',
        help_text="Line manager of this employee"
    )
    hire_date = models.DateField(null=True, blank=True)
    status = models.CharField(
        max_length=10,
        choices=StatusChoices.choices,
        default=StatusChoices.ACTIVE,
    )

    class Meta:
        db_table = 'employee'
        ordering = ['name']
        indexes = [
            models.Index(fields=['company', 'status']),
            models.Index(fields=['manager']),
        ]

    def __str__(self):
        return f"{self.employee_number} - {self.name}"

    def clean(self):
        super().clean()

        if self.manager_id and self.manager_id == self.pk:
            raise ValidationError({'manager': 'An employee cannot manage themself'})

        if self.manager_id and self.manager.company_id != self.company_id:
            raise ValidationError({'manager': 'Manager must belong to the same company'})

    def save(self, *args, **kwargs):
        """Auto-generate employee_number for new records"""
        if not self.pk and not self.employee_number:
            last_emp = Employee.objects.filter(
                employee_number__startswith='EMP-'
            ).order_by('-employee_number').first()

            next_num = 1
            if last_emp:
                try:
                    next_num = int(last_emp.employee_number.split('-')[1]) + 1
                except (ValueError, IndexError):
                    next_num = Employee.objects.count() + 1

            self.employee_number = f"EMP-{next_num:06d}"

        super().save(*args, **kwargs)
