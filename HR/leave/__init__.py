"""
Leave Domain

Leave requests of employees awaiting or past a manager decision.
"""
