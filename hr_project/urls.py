"""
URL configuration for hr_project.

    hr/    HR module (pending actions feed, manager hub)
    auth/  Login, session user and token refresh
"""
from django.urls import path, include

urlpatterns = [
    path('hr/', include('HR.urls')),

    # Authentication endpoints (login, me, tokens)
    path('auth/', include('core.user_accounts.auth_urls')),
]
