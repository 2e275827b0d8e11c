from .goal import Goal
from .evaluation import EvaluationCycle, PerformanceEvaluation
from .one_on_one import OneOnOne

__all__ = [
    'Goal',
    'EvaluationCycle',
    'PerformanceEvaluation',
    'OneOnOne',
]
