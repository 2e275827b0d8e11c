"""
URL Configuration for the pending actions feed.
"""
from django.urls import path
from . import views

app_name = 'pending_actions'

urlpatterns = [
    path('', views.pending_action_list, name='pending-action-list'),
    path('approvals/', views.pending_approval_summary, name='pending-approval-summary'),
]
