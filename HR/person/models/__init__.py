"""
Person Domain Models

Models:
- Company: Tenant of the HR system
- Employee: Employee with company and line manager
- Contract: Employment contract with optional end date
- WorkPermit: Work permit / visa with expiry tracking (soft delete)
- ProfileChangeRequest: Self-service profile change awaiting manager approval
- OnboardingTask / EmployeeOnboarding / EmployeeOnboardingTask: Onboarding checklists
"""

from .company import Company
from .employee import Employee
from .contract import Contract
from .work_permit import WorkPermit
from .profile_change import ProfileChangeRequest
from .onboarding import OnboardingTask, EmployeeOnboarding, EmployeeOnboardingTask

__all__ = [
    'Company',
    'Employee',
    'Contract',
    'WorkPermit',
    'ProfileChangeRequest',
    'OnboardingTask',
    'EmployeeOnboarding',
    'EmployeeOnboardingTask',
]
