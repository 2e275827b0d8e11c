"""
Person Domain

Handles the people side of the HR system:
- Companies and employees (reporting lines)
- Contracts and work permits
- Profile change requests
- Onboarding checklists
"""
