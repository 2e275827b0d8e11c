"""
Core Base Module

Provides shared base classes, mixins, and querysets for the HR apps.

Exports:
    Basic Utilities:
        - StatusChoices: Standard ACTIVE/INACTIVE status choices

    Individual Feature Mixins:
        - AuditMixin: Adds created_at, updated_at
        - SoftDeleteMixin: Adds deleted_at + soft delete behavior

    Managers & QuerySets:
        - CompanyScopedQuerySet: Company, employee and direct-report filters
        - CompanyScopedManager: Manager for company-scoped models
        - SoftDeleteQuerySet: CompanyScopedQuerySet with alive()
        - SoftDeleteManager: Manager for SoftDeleteMixin models

Usage Examples:

    from core.base import AuditMixin, SoftDeleteMixin
    from core.base.managers import SoftDeleteManager

    class WorkPermit(SoftDeleteMixin, AuditMixin, models.Model):
        employee = models.ForeignKey('person.Employee', on_delete=models.CASCADE)
        company = models.ForeignKey('person.Company', on_delete=models.CASCADE)
        objects = SoftDeleteManager()
"""

from core.base.models import (
    StatusChoices,
    AuditMixin,
    SoftDeleteMixin,
)

from core.base.managers import (
    CompanyScopedQuerySet,
    CompanyScopedManager,
    SoftDeleteQuerySet,
    SoftDeleteManager,
)

__all__ = [
    # Basic Utilities
    'StatusChoices',

    # Individual Feature Mixins
    'AuditMixin',
    'SoftDeleteMixin',

    # Managers & QuerySets
    'CompanyScopedQuerySet',
    'CompanyScopedManager',
    'SoftDeleteQuerySet',
    'SoftDeleteManager',
]
