"""
Tuning of the pending actions feed.

Values come from the PENDING_ACTIONS dict in Django settings; missing keys
fall back to the defaults below.

    PENDING_ACTIONS = {
        'URGENT_WITHIN_DAYS': 1,
        'HIGH_WITHIN_DAYS': 3,
        'CONTRACT_LOOKAHEAD_DAYS': 30,
        'WORK_PERMIT_LOOKAHEAD_DAYS': 60,
        'BULK_LEAVE_HIGH_THRESHOLD': 10,
        'DEFAULT_LIMIT': 10,
        'MAX_LIMIT': 50,
        'ISOLATE_COLLECTOR_FAILURES': False,
    }
"""

from dataclasses import dataclass, fields

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured


@dataclass(frozen=True)
class PendingActionConfig:
    urgent_within_days: float = 1
    high_within_days: float = 3
    contract_lookahead_days: int = 30
    work_permit_lookahead_days: int = 60
    bulk_leave_high_threshold: int = 10
    default_limit: int = 10
    max_limit: int = 50
    isolate_collector_failures: bool = False

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            # bool is an int subclass; only the bool field may hold one.
            if f.type is bool:
                valid = isinstance(value, bool)
            elif f.type is float:
                valid = isinstance(value, (int, float)) and not isinstance(value, bool)
            else:
                valid = isinstance(value, int) and not isinstance(value, bool)
            if not valid:
                raise ImproperlyConfigured(
                    f"PENDING_ACTIONS: {f.name.upper()} must be {f.type.__name__}, "
                    f"got {value!r}"
                )

        if self.urgent_within_days > self.high_within_days:
            raise ImproperlyConfigured(
                "PENDING_ACTIONS: URGENT_WITHIN_DAYS must not exceed HIGH_WITHIN_DAYS"
            )
        if not 0 < self.default_limit <= self.max_limit:
            raise ImproperlyConfigured(
                "PENDING_ACTIONS: DEFAULT_LIMIT must be between 1 and MAX_LIMIT"
            )

    @classmethod
    def from_settings(cls) -> 'PendingActionConfig':
        """Build the configuration from settings.PENDING_ACTIONS."""
        raw = getattr(settings, 'PENDING_ACTIONS', None) or {}
        known = {f.name.upper(): f.name for f in fields(cls)}

        unknown = set(raw) - set(known)
        if unknown:
            raise ImproperlyConfigured(
                f"PENDING_ACTIONS has unknown keys: {', '.join(sorted(unknown))}"
            )

        return cls(**{known[key]: value for key, value in raw.items()})

    def clamp_limit(self, raw_limit) -> int:
        """
        Turn a request's limit parameter into a usable limit.

        Non-numeric, non-positive or too large values fall back to the
        default limit instead of failing the request.
        """
        try:
            limit = int(raw_limit)
        except (TypeError, ValueError):
            return self.default_limit

        if limit <= 0 or limit > self.max_limit:
            return self.default_limit
        return limit
