"""
URL routing for activity log endpoints.
"""

from django.urls import path
from apps.activity import views

app_name = "activity"

urlpatterns = [
    path("activity-logs", views.query_activity_log, name="query-activity-log"),
]
