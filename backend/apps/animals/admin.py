from django.contrib import admin

from apps.animals.models import Animal


@admin.register(Animal)
class AnimalAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "type", "breed", "current_status", "is_deleted")
    list_filter = ("current_status", "type", "is_deleted")
    search_fields = ("name", "breed")
