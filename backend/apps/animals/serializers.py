"""
Serializers for Animal model.
"""

from rest_framework import serializers
from apps.animals.models import Animal


class AnimalSerializer(serializers.ModelSerializer):
    """Serializer for Animal."""

    class Meta:
        model = Animal
        fields = [
            "id",
            "name",
            "type",
            "breed",
            "gender",
            "age_group",
            "intake_date",
            "current_status",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
