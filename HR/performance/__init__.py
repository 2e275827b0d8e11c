"""
Performance Domain

Goals (MBO), evaluation cycles, performance evaluations and 1:1 meetings.
"""
