from django.contrib import admin

from apps.adoptions.models import AdoptionRequest


@admin.register(AdoptionRequest)
class AdoptionRequestAdmin(admin.ModelAdmin):
    list_display = ("id", "animal", "adopter", "status", "request_date", "processed_by")
    list_filter = ("status",)
    search_fields = ("animal__name", "adopter__username", "adopter__email")
    # Status changes must go through the workflow
    readonly_fields = ("status", "interview_date", "processed_by")
