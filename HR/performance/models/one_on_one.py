from django.db import models
from django.db.models import Q
from core.base.models import AuditMixin
from core.base.managers import CompanyScopedQuerySet


class OneOnOneQuerySet(CompanyScopedQuerySet):

    def with_participant(self, employee_id):
        """Meetings where the employee sits on either side of the table."""
        return self.filter(Q(employee_id=employee_id) | Q(manager_id=employee_id))


class OneOnOne(AuditMixin, models.Model):
    """1:1 meeting between an employee and their manager."""

    class Status(models.TextChoices):
        SCHEDULED = 'SCHEDULED', 'Scheduled'
        COMPLETED = 'COMPLETED', 'Completed'
        CANCELLED = 'CANCELLED', 'Cancelled'

    company = models.ForeignKey(
        'person.Company',
        on_delete=models.CASCADE,
        related_name='one_on_ones'
    )
    employee = models.ForeignKey(
        'person.Employee',
        on_delete=models.CASCADE,
        related_name='one_on_ones'
    )
    manager = models.ForeignKey(
        'person.Employee',
        on_delete=models.CASCADE,
        related_name='one_on_ones_led'
    )
    scheduled_at = models.DateTimeField()
    agenda = models.TextField(blank=True, default='')
    status = models.CharField(
        max_length=10,
        choices=Status.choices,
        default=Status.SCHEDULED
    )

    objects = OneOnOneQuerySet.as_manager()

    class Meta:
        db_table = 'perf_one_on_one'
        ordering = ['scheduled_at']

    def __str__(self):
        return f"1:1 {self.manager.name} / {self.employee.name} @ {self.scheduled_at:%Y-%m-%d %H:%M}"
