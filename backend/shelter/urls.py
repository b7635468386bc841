from django.contrib import admin
from django.urls import include, path

from health.views import HealthSummaryView

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/health/", HealthSummaryView.as_view(), name="health-summary"),
    path("health/", include("health.urls")),
    path("api/v1/", include("apps.auth.urls")),
    path("api/v1/", include("apps.users.urls")),
    path("api/v1/", include("apps.animals.urls")),
    path("api/v1/", include("apps.adoptions.urls")),
    path("api/v1/", include("apps.inventory.urls")),
    path("api/v1/", include("apps.activity.urls")),
]
