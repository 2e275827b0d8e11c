"""
Urgency Calculator

Maps an optional deadline to a priority tier:

    no deadline            -> NORMAL
    due within  1 day      -> URGENT   (past due included)
    due within  3 days     -> HIGH
    later                  -> NORMAL

The day thresholds are configurable (PendingActionConfig).
"""

from datetime import date, datetime, time, timedelta
from typing import Optional, Union

from django.utils import timezone

from .dtos import Priority

SECONDS_PER_DAY = timedelta(days=1).total_seconds()


def as_deadline(value: Optional[Union[date, datetime]]) -> Optional[datetime]:
    """
    Normalize a due value to an aware datetime.

    Plain dates mean the start of that day in the current time zone.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        if timezone.is_naive(value):
            return timezone.make_aware(value)
        return value
    return timezone.make_aware(datetime.combine(value, time.min))


def days_until(due_date: datetime, now: datetime) -> float:
    """Fractional days from now to due_date; negative when past due."""
    return (due_date - now).total_seconds() / SECONDS_PER_DAY


def calculate_priority(
    due_date: Optional[Union[date, datetime]],
    now: Optional[datetime] = None,
    urgent_within_days: float = 1,
    high_within_days: float = 3,
) -> Priority:
    """
    Priority tier of a deadline.

    Args:
        due_date: Deadline, or None when the item has no natural deadline
        now: Reference time (defaults to timezone.now())
        urgent_within_days: Days left at or below which the item is URGENT
        high_within_days: Days left at or below which the item is HIGH

    Returns:
        Priority
    """
    deadline = as_deadline(due_date)
    if deadline is None:
        return Priority.NORMAL

    remaining = days_until(deadline, now or timezone.now())
    if remaining <= urgent_within_days:
        return Priority.URGENT
    if remaining <= high_within_days:
        return Priority.HIGH
    return Priority.NORMAL
