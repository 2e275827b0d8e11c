"""
Pending Actions App Configuration
"""

from django.apps import AppConfig


class PendingActionsConfig(AppConfig):
    """Configuration for the Pending Actions app"""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'HR.pending_actions'
    label = 'pending_actions'
    verbose_name = 'Pending Actions'

    def ready(self):
        """Register the built-in collectors"""
        from . import collectors  # noqa: F401
