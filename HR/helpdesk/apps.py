from django.apps import AppConfig


class HelpdeskConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'HR.helpdesk'
    label = 'helpdesk'
    verbose_name = 'HR Helpdesk'
