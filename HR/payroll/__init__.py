"""
Payroll Domain

Monthly payroll runs and their review lifecycle.
"""
