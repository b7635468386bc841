"""
URL routing for authentication endpoints.
"""

from django.urls import path
from apps.auth import views

app_name = "auth"

urlpatterns = [
    path("auth/login", views.login, name="login"),
    path("auth/logout", views.logout, name="logout"),
]
