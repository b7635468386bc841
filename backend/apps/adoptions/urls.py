"""
URL routing for adoption endpoints.
"""

from django.urls import path
from apps.adoptions import views

app_name = "adoptions"

urlpatterns = [
    path("adoptions", views.create_or_list_adoptions, name="create-or-list-adoptions"),
    path("adoptions/stats/summary", views.adoption_statistics, name="adoption-statistics"),
    path(
        "adoptions/animal/<int:animalId>",
        views.animal_adoption_history,
        name="animal-adoption-history",
    ),
    path(
        "adoptions/user/<int:userId>",
        views.adopter_adoption_history,
        name="adopter-adoption-history",
    ),
    path("adoptions/<int:requestId>", views.get_adoption, name="get-adoption"),
    path(
        "adoptions/<int:requestId>/process",
        views.process_adoption,
        name="process-adoption",
    ),
    path(
        "adoptions/<int:requestId>/cancel",
        views.cancel_adoption,
        name="cancel-adoption",
    ),
]
