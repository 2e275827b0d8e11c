from django.db import models
from django.core.exceptions import ValidationError
from core.base.models import AuditMixin
from core.base.managers import CompanyScopedManager


class EvaluationCycle(models.Model):
    """
    Evaluation period of a company (e.g. '2025 H2').

    eval_end is the submission deadline for self and manager evaluations.
    """
    company = models.ForeignKey(
        'person.Company',
        on_delete=models.CASCADE,
        related_name='evaluation_cycles'
    )
    name = models.CharField(max_length=100)
    eval_start = models.DateTimeField()
    eval_end = models.DateTimeField(help_text="Deadline for submitting evaluations")

    class Meta:
        db_table = 'perf_evaluation_cycle'
        ordering = ['-eval_start']

    def __str__(self):
        return self.name

    def clean(self):
        super().clean()
        if self.eval_start and self.eval_end and self.eval_end < self.eval_start:
            raise ValidationError({'eval_end': 'Evaluation end must be after start'})


class PerformanceEvaluation(AuditMixin, models.Model):
    """
    One evaluation form within a cycle.

    SELF evaluations are written by the employee (evaluator = employee);
    MANAGER evaluations are written by the evaluator about the employee.
    """

    class EvalType(models.TextChoices):
        SELF = 'SELF', 'Self'
        MANAGER = 'MANAGER', 'Manager'

    class Status(models.TextChoices):
        DRAFT = 'DRAFT', 'Draft'
        SUBMITTED = 'SUBMITTED', 'Submitted'
        CONFIRMED = 'CONFIRMED', 'Confirmed'

    cycle = models.ForeignKey(
        EvaluationCycle,
        on_delete=models.CASCADE,
        related_name='evaluations'
    )
    company = models.ForeignKey(
        'person.Company',
        on_delete=models.CASCADE,
        related_name='evaluations'
    )
    employee = models.ForeignKey(
        'person.Employee',
        on_delete=models.CASCADE,
        related_name='evaluations'
    )
    evaluator = models.ForeignKey(
        'person.Employee',
        on_delete=models.CASCADE,
        related_name='evaluations_given'
    )
    eval_type = models.CharField(max_length=10, choices=EvalType.choices)
    status = models.CharField(
        max_length=10,
        choices=Status.choices,
        default=Status.DRAFT
    )
    score = models.DecimalField(max_digits=5, decimal_places=2, null=True, blank=True)
    comment = models.TextField(blank=True, default='')

    objects = CompanyScopedManager()

    class Meta:
        db_table = 'perf_evaluation'
        indexes = [
            models.Index(fields=['employee', 'eval_type', 'status']),
            models.Index(fields=['evaluator', 'eval_type', 'status']),
        ]

    def __str__(self):
        return f"{self.cycle.name} {self.eval_type} - {self.employee.name}"
