"""
URL configuration for reports app.
"""

from django.urls import path
from . import views

app_name = 'reports'

urlpatterns = [
    path('overdue/', views.overdue_report, name='overdue_report'),
    path('overdue/works/<int:pk>/reason/', views.overdue_reason_edit, name='overdue_reason'),
]
