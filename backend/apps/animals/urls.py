"""
URL routing for animal endpoints.
"""

from django.urls import path
from apps.animals import views

app_name = "animals"

urlpatterns = [
    path("animals", views.list_animals, name="list-animals"),
    path("animals/<int:animalId>", views.get_animal_detail, name="get-animal"),
]
