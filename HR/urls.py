"""
HR App - Main URL Configuration
This file routes URLs to the appropriate sub-apps within the HR module.
"""
from django.urls import path, include

app_name = 'hr'

urlpatterns = [
    # Home page pending actions and manager hub
    path('pending-actions/', include('HR.pending_actions.urls')),
]
