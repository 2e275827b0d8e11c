"""
Test fixtures and helper functions for pending actions tests.

Every helper creates the minimum rows a collector needs; dates default to
values relative to the `now` passed in so tests stay deterministic.
"""

from datetime import timedelta
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.utils import timezone

from core.user_accounts.models import RoleChoices
from HR.helpdesk.models import ChatMessage, ChatSession
from HR.leave.models import LeaveRequest
from HR.payroll.models import PayrollRun
from HR.performance.models import EvaluationCycle, Goal, OneOnOne, PerformanceEvaluation
from HR.person.models import (
    Company,
    Contract,
    Employee,
    EmployeeOnboarding,
    EmployeeOnboardingTask,
    OnboardingTask,
    ProfileChangeRequest,
    WorkPermit,
)

User = get_user_model()


def create_company(code='ACME', name='Acme Corp'):
    """Create a test company"""
    company, _ = Company.objects.get_or_create(code=code, defaults={'name': name})
    return company


def create_employee(company, name='Jane Doe', manager=None):
    """Create a test employee, optionally reporting to a manager"""
    return Employee.objects.create(
        company=company,
        name=name,
        email_address=f"{name.lower().replace(' ', '.')}@example.com",
        manager=manager,
    )


def create_user(role=RoleChoices.EMPLOYEE, employee=None, company=None, email=None, password='TestPass123'):
    """
    Create a user account with a role.

    The account's company defaults to the employee's company.
    """
    role = str(role)
    if company is None and employee is not None:
        company = employee.company
    if email is None:
        email = f"{role}-{User.objects.count() + 1}@example.com"
    return User.objects.create_user(
        email=email,
        name=employee.name if employee else f'{role} user',
        password=password,
        user_type_name=role,
        company=company,
        employee=employee,
    )


def create_leave_request(employee, start_date, days=Decimal('1'), status=LeaveRequest.Status.PENDING, end_date=None):
    return LeaveRequest.objects.create(
        employee=employee,
        company=employee.company,
        start_date=start_date,
        end_date=end_date or start_date,
        days=days,
        status=status,
    )


def create_profile_change(employee, field_name='phone', old_value='010-0000', new_value='010-1234',
                          status=ProfileChangeRequest.Status.PENDING):
    return ProfileChangeRequest.objects.create(
        employee=employee,
        field_name=field_name,
        old_value=old_value,
        new_value=new_value,
        status=status,
    )


def create_goal(employee, title='Ship the new onboarding flow', status=Goal.Status.DRAFT, weight=Decimal('20')):
    return Goal.objects.create(
        employee=employee,
        company=employee.company,
        title=title,
        weight=weight,
        status=status,
    )


def create_cycle(company, eval_end, name='2025 H2'):
    """Create an evaluation cycle ending at eval_end"""
    return EvaluationCycle.objects.create(
        company=company,
        name=name,
        eval_start=eval_end - timedelta(days=30),
        eval_end=eval_end,
    )


def create_evaluation(cycle, employee, evaluator=None, eval_type=PerformanceEvaluation.EvalType.SELF,
                      status=PerformanceEvaluation.Status.DRAFT):
    return PerformanceEvaluation.objects.create(
        cycle=cycle,
        company=employee.company,
        employee=employee,
        evaluator=evaluator or employee,
        eval_type=eval_type,
        status=status,
    )


def create_onboarding_tasks(employee, titles=('Sign NDA',), status=EmployeeOnboardingTask.Status.PENDING):
    """Start an onboarding run for the employee with one task per title"""
    onboarding = EmployeeOnboarding.objects.create(
        employee=employee,
        started_on=timezone.localdate(),
    )
    tasks = []
    for order, title in enumerate(titles):
        template = OnboardingTask.objects.create(
            company=employee.company,
            title=title,
            sort_order=order,
        )
        tasks.append(EmployeeOnboardingTask.objects.create(
            employee_onboarding=onboarding,
            task=template,
            status=status,
        ))
    return tasks


def create_one_on_one(employee, manager, scheduled_at, status=OneOnOne.Status.SCHEDULED):
    return OneOnOne.objects.create(
        company=employee.company,
        employee=employee,
        manager=manager,
        scheduled_at=scheduled_at,
        status=status,
    )


def create_contract(employee, end_date, reference=None, start_date=None):
    if reference is None:
        reference = f"CT-{Contract.objects.count() + 1:04d}"
    return Contract.objects.create(
        contract_reference=reference,
        employee=employee,
        company=employee.company,
        contract_start_date=start_date or (end_date - timedelta(days=365) if end_date else timezone.localdate()),
        contract_end_date=end_date,
    )


def create_work_permit(employee, expiry_date, status=WorkPermit.Status.ACTIVE, permit_type='E-7'):
    return WorkPermit.objects.create(
        employee=employee,
        company=employee.company,
        permit_type=permit_type,
        permit_number=f"WP-{WorkPermit.objects.count() + 1:04d}",
        expiry_date=expiry_date,
        status=status,
    )


def create_payroll_run(company, year_month='2025-06', status=PayrollRun.Status.DRAFT, pay_date=None, name=''):
    return PayrollRun.objects.create(
        company=company,
        year_month=year_month,
        status=status,
        pay_date=pay_date,
        name=name,
    )


def create_escalation(employee, content='I need to talk to someone in HR', resolved=False):
    """Create a chat session with one escalated message"""
    session = ChatSession.objects.create(
        company=employee.company,
        employee=employee,
        title='Leave balance question',
    )
    return ChatMessage.objects.create(
        session=session,
        content=content,
        escalated=True,
        escalation_resolved=resolved,
    )
