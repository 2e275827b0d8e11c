"""
Pending Actions

Builds each user's "things needing your attention" feed from the HR
domains (performance, onboarding, leave, person, payroll, helpdesk),
scoped by the caller's role and reporting line.
"""
