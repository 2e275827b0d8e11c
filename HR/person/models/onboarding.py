from django.db import models
from core.base.models import AuditMixin
from core.base.managers import CompanyScopedQuerySet


class OnboardingTask(models.Model):
    """Task template of a company's onboarding checklist."""
    company = models.ForeignKey(
        'person.Company',
        on_delete=models.CASCADE,
        related_name='onboarding_tasks'
    )
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True, default='')
    sort_order = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = 'hr_onboarding_task'
        ordering = ['sort_order', 'id']

    def __str__(self):
        return self.title


class EmployeeOnboarding(AuditMixin, models.Model):
    """Onboarding run of one new hire."""

    class Status(models.TextChoices):
        IN_PROGRESS = 'IN_PROGRESS', 'In Progress'
        COMPLETED = 'COMPLETED', 'Completed'

    employee = models.ForeignKey(
        'person.Employee',
        on_delete=models.CASCADE,
        related_name='onboardings'
    )
    started_on = models.DateField()
    status = models.CharField(
        max_length=15,
        choices=Status.choices,
        default=Status.IN_PROGRESS
    )

    class Meta:
        db_table = 'hr_employee_onboarding'

    def __str__(self):
        return f"Onboarding of {self.employee.name}"


class EmployeeOnboardingTaskQuerySet(CompanyScopedQuerySet):
    company_lookup = 'employee_onboarding__employee__company_id'
    employee_lookup = 'employee_onboarding__employee_id'


class EmployeeOnboardingTask(models.Model):
    """One checklist item of an employee's onboarding run."""

    class Status(models.TextChoices):
        PENDING = 'PENDING', 'Pending'
        DONE = 'DONE', 'Done'
        SKIPPED = 'SKIPPED', 'Skipped'

    employee_onboarding = models.ForeignKey(
        EmployeeOnboarding,
        on_delete=models.CASCADE,
        related_name='tasks'
    )
    task = models.ForeignKey(
        OnboardingTask,
        on_delete=models.PROTECT,
        related_name='assignments'
    )
    status = models.CharField(
        max_length=10,
        choices=Status.choices,
        default=Status.PENDING
    )
    completed_at = models.DateTimeField(null=True, blank=True)

    objects = EmployeeOnboardingTaskQuerySet.as_manager()

    class Meta:
        db_table = 'hr_employee_onboarding_task'
        ordering = ['task__sort_order', 'id']

    def __str__(self):
        return f"{self.task.title} ({self.status})"
