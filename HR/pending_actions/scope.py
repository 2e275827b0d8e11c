"""
Role Scope Resolver

Decides, from the caller's role and employee record, which collector
groups run and with which keys (employee, company).

    every role              -> individual
    manager / hr_admin /
    super_admin             -> + manager   (direct reports)
    hr_admin / super_admin  -> + hr        (whole company)

Roles not listed (including unknown ones) get the individual group only.
The executive flag is carried on the scope but unlocks nothing.
"""

from core.user_accounts.models import HR_ROLES, MANAGER_ROLES, RoleChoices

from .dtos import CallerScope, ScopeGroup


def groups_for_role(role):
    """
    Collector groups unlocked by a role name.

    Args:
        role: Role name (UserType.type_name) or None

    Returns:
        frozenset of ScopeGroup
    """
    role = str(role) if role is not None else ''
    groups = {ScopeGroup.INDIVIDUAL}
    if role in MANAGER_ROLES:
        groups.add(ScopeGroup.MANAGER)
    if role in HR_ROLES:
        groups.add(ScopeGroup.HR)
    return frozenset(groups)


def resolve_scope(user) -> CallerScope:
    """
    Build the CallerScope of an authenticated user.

    The company comes from the user account, falling back to the linked
    employee's company.
    """
    user_type = getattr(user, 'user_type', None)
    role = user_type.type_name if user_type is not None else ''

    employee_id = getattr(user, 'employee_id', None)
    company_id = getattr(user, 'company_id', None)
    if company_id is None and employee_id is not None:
        company_id = user.employee.company_id

    return CallerScope(
        user_id=user.pk,
        role=role,
        employee_id=employee_id,
        company_id=company_id,
        groups=groups_for_role(role),
        is_executive=role == RoleChoices.EXECUTIVE,
    )
