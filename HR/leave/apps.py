from django.apps import AppConfig


class LeaveConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'HR.leave'
    label = 'leave'
    verbose_name = 'Leave Management'
