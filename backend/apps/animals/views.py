"""
Animal API views.

Read-only: animal status changes flow through the adoption workflow.
"""

from django.db.models import Q
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.pagination import LimitOffsetPagination
from rest_framework.response import Response

from shelter.exceptions import ValidationError
from shelter.permissions import IsAnyRole
from apps.animals.models import Animal, AnimalStatus
from apps.animals.serializers import AnimalSerializer
from apps.animals.services import get_animal


@api_view(["GET"])
@permission_classes([IsAnyRole])
def list_animals(request):
    """
    GET /api/v1/animals

    List animals. Filters: status, type, search (name or breed).
    """
    queryset = Animal.objects.filter(is_deleted=False).order_by("name", "id")

    status_filter = request.query_params.get("status")
    if status_filter:
        if status_filter not in AnimalStatus.values:
            raise ValidationError("Invalid status filter")
        queryset = queryset.filter(current_status=status_filter)

    type_filter = request.query_params.get("type")
    if type_filter:
        queryset = queryset.filter(type=type_filter)

    search = (request.query_params.get("search") or "").strip()
    if search:
        queryset = queryset.filter(Q(name__icontains=search) | Q(breed__icontains=search))

    paginator = LimitOffsetPagination()
    paginator.default_limit = 50
    paginator.max_limit = 100

    page = paginator.paginate_queryset(queryset, request)
    serializer = AnimalSerializer(page, many=True)

    return paginator.get_paginated_response(serializer.data)


@api_view(["GET"])
@permission_classes([IsAnyRole])
def get_animal_detail(request, animalId):
    """
    GET /api/v1/animals/{animalId}
    """
    animal = get_animal(animalId)
    return Response(
        {"success": True, "message": "Animal retrieved", "data": AnimalSerializer(animal).data},
        status=status.HTTP_200_OK,
    )
