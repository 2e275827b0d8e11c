"""
Source collectors of the pending actions feed.

Importing this package registers the built-in collectors, in feed
production order: individual, manager, HR.
"""

from .base import CollectorRegistry, PendingActionCollector, registry
from . import individual, manager, hr_admin  # noqa: F401

__all__ = [
    'CollectorRegistry',
    'PendingActionCollector',
    'registry',
]
