"""
Serializers for AdoptionRequest.
"""

from rest_framework import serializers

from apps.adoptions.models import AdoptionRequest
from apps.adoptions.state_machine import allowed_transitions


class AdoptionRequestSerializer(serializers.ModelSerializer):
    """Read serializer with denormalised animal and adopter details."""

    animal_id = serializers.IntegerField(read_only=True)
    animal_name = serializers.CharField(source="animal.name", read_only=True)
    animal_type = serializers.CharField(source="animal.type", read_only=True)
    animal_breed = serializers.CharField(source="animal.breed", read_only=True)
    animal_status = serializers.CharField(
        source="animal.current_status", read_only=True
    )
    adopter_id = serializers.IntegerField(read_only=True)
    adopter_name = serializers.CharField(source="adopter.full_name", read_only=True)
    adopter_email = serializers.CharField(source="adopter.email", read_only=True)
    processed_by_id = serializers.IntegerField(read_only=True, allow_null=True)
    processed_by_name = serializers.SerializerMethodField()
    allowed_transitions = serializers.SerializerMethodField()

    class Meta:
        model = AdoptionRequest
        fields = [
            "id",
            "animal_id",
            "animal_name",
            "animal_type",
            "animal_breed",
            "animal_status",
            "adopter_id",
            "adopter_name",
            "adopter_email",
            "status",
            "request_date",
            "interview_date",
            "staff_comments",
            "processed_by_id",
            "processed_by_name",
            "allowed_transitions",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

    def get_processed_by_name(self, obj):
        return obj.processed_by.full_name if obj.processed_by else None

    def get_allowed_transitions(self, obj):
        return allowed_transitions(obj.status)


class SubmitRequestSerializer(serializers.Serializer):
    animal_id = serializers.IntegerField()


class CommentsInputSerializer(serializers.Serializer):
    """
    Accepts staff notes as ``comments``; ``staff_comments`` is kept as an
    alias. Validated data always carries the value under ``comments``.
    """

    comments = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    staff_comments = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, write_only=True
    )

    def validate(self, attrs):
        alias = attrs.pop("staff_comments", None)
        if "comments" not in attrs and alias is not None:
            attrs["comments"] = alias
        return attrs


class ProcessRequestSerializer(CommentsInputSerializer):
    """Input for PUT /adoptions/{id}/process. Status is checked by the service."""

    status = serializers.CharField()
    interview_date = serializers.CharField(
        required=False, allow_blank=True, allow_null=True
    )


class CancelRequestSerializer(CommentsInputSerializer):
    pass
