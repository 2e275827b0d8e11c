"""
Core Base Managers Module

Provides custom querysets for HR domain models.

**Architecture:**
- CompanyScopedQuerySet: Tenant filtering (company) and the manager
  relationship (direct reports)
- SoftDeleteQuerySet: For SoftDeleteMixin models (deleted_at)

Exports:
    QuerySets:
        - CompanyScopedQuerySet: for_company(), for_employee(), for_direct_reports_of()
        - SoftDeleteQuerySet: alive()

    Managers:
        - CompanyScopedManager
        - SoftDeleteManager

Usage:
    class LeaveRequest(AuditMixin):
        objects = CompanyScopedManager()

    # Pending leave of the people reporting to manager #7 in company #1
    LeaveRequest.objects.for_direct_reports_of(7, company_id=1).filter(status='PENDING')
"""

from django.db import models


class CompanyScopedQuerySet(models.QuerySet):
    """
    QuerySet for records that belong to a company and (optionally) an employee.

    Subclasses may change the lookup paths when the company or employee is
    reached through a relation (e.g. chat messages through their session).
    """
    company_lookup = 'company_id'
    employee_lookup = 'employee_id'

    def for_company(self, company_id):
        """
        Return records of one company.

        Args:
            company_id: Company primary key

        Returns:
            QuerySet: Records owned by that company
        """
        return self.filter(**{self.company_lookup: company_id})

    def for_employee(self, employee_id, company_id=None):
        """
        Return records that belong to one employee.

        Args:
            employee_id: Employee primary key
            company_id: Optional company primary key to also match

        Returns:
            QuerySet
        """
        queryset = self.filter(**{self.employee_lookup: employee_id})
        if company_id is not None:
            queryset = queryset.for_company(company_id)
        return queryset

    def for_direct_reports_of(self, manager_employee_id, company_id=None):
        """
        Return records of employees whose manager is the given employee.

        Args:
            manager_employee_id: Employee primary key of the manager
            company_id: Optional company primary key to also match

        Returns:
            QuerySet
        """
        manager_lookup = self.employee_lookup[:-len('_id')] + '__manager_id'
        queryset = self.filter(**{manager_lookup: manager_employee_id})
        if company_id is not None:
            queryset = queryset.for_company(company_id)
        return queryset


class CompanyScopedManager(models.Manager.from_queryset(CompanyScopedQuerySet)):
    """
    Manager for company-scoped models.

    Usage:
        Goal.objects.for_employee(employee_id, company_id=company_id)
        LeaveRequest.objects.for_direct_reports_of(manager_id)
    """
    pass


class SoftDeleteQuerySet(CompanyScopedQuerySet):
    """
    QuerySet for SoftDeleteMixin models.

    Methods:
        - alive(): Records not soft deleted
    """

    def alive(self):
        """Return only records with deleted_at unset."""
        return self.filter(deleted_at__isnull=True)


class SoftDeleteManager(models.Manager.from_queryset(SoftDeleteQuerySet)):
    """
    Manager for SoftDeleteMixin models.

    Usage:
        WorkPermit.objects.alive().for_direct_reports_of(manager_id)
    """
    pass
